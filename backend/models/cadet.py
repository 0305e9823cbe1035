from datetime import date, datetime
from sqlalchemy import DateTime, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from database import Model
from models.auth import utc_now




class CadetOrm(Model):
    __tablename__ = "cadets"
    
    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(nullable=False)
    last_name: Mapped[str] = mapped_column(nullable=False)
    email: Mapped[str] = mapped_column(nullable=True)
    phone: Mapped[str] = mapped_column(nullable=True)
    date_of_birth: Mapped[date] = mapped_column(nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=True)
    city: Mapped[str] = mapped_column(nullable=True)
    state: Mapped[str] = mapped_column(nullable=True)
    zip_code: Mapped[str] = mapped_column(nullable=True)
    emergency_contact_name: Mapped[str] = mapped_column(nullable=False)
    emergency_contact_phone: Mapped[str] = mapped_column(nullable=False)
    emergency_contact_relation: Mapped[str] = mapped_column(nullable=False)
    campus: Mapped[str] = mapped_column(nullable=False, default="oahu")
    class_number: Mapped[int] = mapped_column(nullable=True)
    start_date: Mapped[date] = mapped_column(nullable=True)
    graduation_date: Mapped[date] = mapped_column(nullable=True)
    status: Mapped[str] = mapped_column(nullable=False, default="active")  # active, graduated, dismissed, withdrawn
    academic_progress: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), default=0)
    fitness_progress: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), default=0)
    leadership_progress: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), default=0)
    service_hours: Mapped[int] = mapped_column(nullable=True, default=0)
    notes: Mapped[str] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
