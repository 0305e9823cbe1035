from datetime import date, datetime
from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column
from database import Model
from models.auth import utc_now




class MentorshipOrm(Model):
    __tablename__ = "mentorships"
    
    id: Mapped[int] = mapped_column(primary_key=True)
    cadet_id: Mapped[int] = mapped_column(ForeignKey("cadets.id"), nullable=False)
    mentor_name: Mapped[str] = mapped_column(nullable=False)
    mentor_email: Mapped[str] = mapped_column(nullable=True)
    mentor_phone: Mapped[str] = mapped_column(nullable=True)
    assigned_date: Mapped[date] = mapped_column(nullable=False)
    status: Mapped[str] = mapped_column(nullable=False, default="active")  # active, completed, inactive
    meeting_frequency: Mapped[str] = mapped_column(nullable=True)  # weekly, biweekly, monthly
    last_meeting_date: Mapped[date] = mapped_column(nullable=True)
    next_meeting_date: Mapped[date] = mapped_column(nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
