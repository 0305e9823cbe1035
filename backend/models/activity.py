from datetime import datetime
from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from database import Model
from models.auth import utc_now




class ActivityOrm(Model):
    __tablename__ = "activities"
    
    id: Mapped[int] = mapped_column(primary_key=True)
    type: Mapped[str] = mapped_column(nullable=False)  # cadet_activity, system_event, task_completed
    title: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    related_id: Mapped[int] = mapped_column(nullable=True)
    related_type: Mapped[str] = mapped_column(nullable=True)  # cadet, application, event
    performed_by: Mapped[str] = mapped_column(nullable=True)
    campus: Mapped[str] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
