from datetime import date, datetime
from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from database import Model
from models.auth import utc_now




class ApplicationOrm(Model):
    __tablename__ = "applications"
    
    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(nullable=False)
    last_name: Mapped[str] = mapped_column(nullable=False)
    email: Mapped[str] = mapped_column(nullable=False)
    phone: Mapped[str] = mapped_column(nullable=False)
    date_of_birth: Mapped[date] = mapped_column(nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(nullable=False)
    state: Mapped[str] = mapped_column(nullable=False)
    zip_code: Mapped[str] = mapped_column(nullable=False)
    parent_guardian_name: Mapped[str] = mapped_column(nullable=False)
    parent_guardian_phone: Mapped[str] = mapped_column(nullable=False)
    parent_guardian_email: Mapped[str] = mapped_column(nullable=True)
    current_school: Mapped[str] = mapped_column(nullable=True)
    grade_level: Mapped[str] = mapped_column(nullable=True)
    reason_for_applying: Mapped[str] = mapped_column(Text, nullable=True)
    previous_challenges: Mapped[str] = mapped_column(Text, nullable=True)
    goals: Mapped[str] = mapped_column(Text, nullable=True)
    preferred_campus: Mapped[str] = mapped_column(nullable=False, default="oahu")
    status: Mapped[str] = mapped_column(nullable=False, default="pending")  # pending, under_review, approved, denied, waitlisted
    reviewed_by: Mapped[str] = mapped_column(nullable=True)
    review_notes: Mapped[str] = mapped_column(Text, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    reviewed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
