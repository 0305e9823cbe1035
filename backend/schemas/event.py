from pydantic import ConfigDict, Field, field_validator, model_validator
from datetime import date, datetime
from typing import Optional, List
from schemas.base import SCamelModel, Campus, as_naive_utc




class SEventBase(SCamelModel):
    title: str = Field(description="Event title", examples=["Family Day", "PT Assessment"])
    description: Optional[str] = None
    event_type: str = Field(description="Event category", examples=["graduation", "community_service", "visitation", "training"])
    start_time: datetime = Field(description="Offsets are converted to UTC; times without one are taken as UTC", examples=["2026-10-12T09:00:00Z"])
    end_time: datetime = Field(examples=["2026-10-12T10:00:00"])
    location: Optional[str] = Field(None, description="Compared verbatim when detecting conflicts", examples=["Gym"])
    max_participants: Optional[int] = Field(None, ge=1)
    is_required: bool = False


class SEventCreate(SEventBase):
    campus: Optional[Campus] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def store_as_utc(cls, value: datetime) -> datetime:
        return as_naive_utc(value)

    @model_validator(mode="after")
    def check_interval(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class SEvent(SEventBase):
    id: int
    campus: str
    current_participants: int = 0
    created_by: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SEventConflict(SCamelModel):
    event: SEvent
    conflicts: List[SEvent]

    model_config = ConfigDict(from_attributes=True)


class SHourSlot(SCamelModel):
    hour: int = Field(ge=0, le=23)
    event_ids: List[int] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class SScheduleDay(SCamelModel):
    day: date
    events: List[SEvent] = Field(default_factory=list)
    slots: List[SHourSlot] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class SWeekSchedule(SCamelModel):
    week_start: date
    week_end: date
    days: List[SScheduleDay]

    model_config = ConfigDict(from_attributes=True)
