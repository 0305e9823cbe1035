from datetime import datetime, timezone
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel




Campus = Literal["oahu", "hilo"]
CadetStatus = Literal["active", "graduated", "dismissed", "withdrawn"]
ApplicationStatus = Literal["pending", "under_review", "approved", "denied", "waitlisted"]
MentorshipStatus = Literal["active", "completed", "inactive"]
StaffRole = Literal["staff", "admin", "instructor"]


class SCamelModel(BaseModel):
    """Base for every wire schema: camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to UTC and drop the offset; naive values are already UTC"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
