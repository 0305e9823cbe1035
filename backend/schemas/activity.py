from pydantic import ConfigDict
from datetime import datetime
from typing import Optional
from schemas.base import SCamelModel




class SActivity(SCamelModel):
    id: int
    type: str
    title: str
    description: Optional[str] = None
    related_id: Optional[int] = None
    related_type: Optional[str] = None
    performed_by: Optional[str] = None
    campus: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
