from pydantic import ConfigDict, Field
from datetime import date, datetime
from typing import Optional
from schemas.base import SCamelModel, Campus, CadetStatus




class SCadetBase(SCamelModel):
    first_name: str = Field(description="First name", examples=["Keoni"])
    last_name: str = Field(description="Last name", examples=["Kahale"])
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: date = Field(description="Date of birth", examples=["2008-04-12"])
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    emergency_contact_name: str
    emergency_contact_phone: str
    emergency_contact_relation: str = Field(examples=["mother", "guardian"])
    class_number: Optional[int] = Field(None, ge=1, description="Class (cohort) number")
    start_date: Optional[date] = None
    graduation_date: Optional[date] = None
    status: CadetStatus = "active"
    academic_progress: float = Field(0, ge=0, le=100)
    fitness_progress: float = Field(0, ge=0, le=100)
    leadership_progress: float = Field(0, ge=0, le=100)
    service_hours: int = Field(0, ge=0)
    notes: Optional[str] = None


class SCadetCreate(SCadetBase):
    campus: Optional[Campus] = Field(None, description="Defaults to the campus of the staff member creating the record")


class SCadetUpdate(SCamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    campus: Optional[Campus] = None
    class_number: Optional[int] = Field(None, ge=1)
    start_date: Optional[date] = None
    graduation_date: Optional[date] = None
    status: Optional[CadetStatus] = None
    academic_progress: Optional[float] = Field(None, ge=0, le=100)
    fitness_progress: Optional[float] = Field(None, ge=0, le=100)
    leadership_progress: Optional[float] = Field(None, ge=0, le=100)
    service_hours: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class SCadet(SCadetBase):
    id: int
    campus: str
    academic_progress: Optional[float] = 0
    fitness_progress: Optional[float] = 0
    leadership_progress: Optional[float] = 0
    service_hours: Optional[int] = 0
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
