from pydantic import ConfigDict, Field
from datetime import date, datetime
from typing import Optional
from schemas.base import SCamelModel, Campus, ApplicationStatus




class SApplicationBase(SCamelModel):
    first_name: str = Field(description="Applicant first name")
    last_name: str = Field(description="Applicant last name")
    email: str
    phone: str
    date_of_birth: date
    address: str
    city: str
    state: str
    zip_code: str
    parent_guardian_name: str
    parent_guardian_phone: str
    parent_guardian_email: Optional[str] = None
    current_school: Optional[str] = None
    grade_level: Optional[str] = None
    reason_for_applying: Optional[str] = None
    previous_challenges: Optional[str] = None
    goals: Optional[str] = None
    preferred_campus: Campus = Field("oahu", description="Campus the applicant asks for")


class SApplicationCreate(SApplicationBase):
    pass


class SApplicationUpdate(SCamelModel):
    status: Optional[ApplicationStatus] = Field(None, description="Review decision")
    review_notes: Optional[str] = Field(None, description="Reviewer notes")
    preferred_campus: Optional[Campus] = None


class SApplication(SApplicationBase):
    id: int
    preferred_campus: str
    status: str
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None
    submitted_at: datetime
    reviewed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
