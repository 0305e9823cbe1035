from pydantic import ConfigDict, Field
from datetime import date, datetime
from typing import Optional
from schemas.base import SCamelModel, MentorshipStatus




class SMentorshipCreate(SCamelModel):
    cadet_id: int = Field(description="Cadet ID")
    mentor_name: str
    mentor_email: Optional[str] = None
    mentor_phone: Optional[str] = None
    assigned_date: date
    status: MentorshipStatus = "active"
    meeting_frequency: Optional[str] = Field(None, examples=["weekly", "biweekly", "monthly"])
    last_meeting_date: Optional[date] = None
    next_meeting_date: Optional[date] = None
    notes: Optional[str] = None


class SMentorship(SMentorshipCreate):
    id: int
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
