from pydantic import ConfigDict, Field
from datetime import datetime
from typing import Optional
from schemas.base import SCamelModel, Campus, StaffRole




class SStaffAuth(SCamelModel):
    subject: str = Field(description="User id issued by the identity provider", examples=["idp|4821"])
    email: Optional[str] = Field(None, examples=["kumu@academy.example"])
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: StaffRole = "staff"
    campus: Campus = "oahu"


class SStaff(SCamelModel):
    id: int
    subject: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str
    campus: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SStaffSession(SCamelModel):
    session_token: str
    staff: SStaff
