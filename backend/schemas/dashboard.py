from pydantic import ConfigDict, Field
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from schemas.base import SCamelModel




class SDashboardMetrics(SCamelModel):
    active_participants: int = Field(description="Cadets with status active")
    graduation_rate: float = Field(ge=0, le=100, description="Share of graduated cadets, percent, one decimal")
    service_hours: int = Field(ge=0, description="Total community service hours")
    pending_applications: int = Field(description="Applications waiting for review")

    model_config = ConfigDict(from_attributes=True)


class SProgressAxis(SCamelModel):
    key: str
    label: str
    value: int = Field(ge=0, le=100)

    model_config = ConfigDict(from_attributes=True)


class SComponentProgress(SCamelModel):
    key: str
    label: str
    value: float
    rating: str

    model_config = ConfigDict(from_attributes=True)


class SCadetProgress(SCamelModel):
    cadet_id: int
    overall_progress: float
    components: List[SComponentProgress]
    service_hours: int
    weeks_in_program: int
    program_progress: int
    service_hours_complete: bool
    core_components_complete: bool

    model_config = ConfigDict(from_attributes=True)


class SNarrativeResult(SCamelModel):
    kind: Literal["structured", "raw"]
    text: str
    data: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(from_attributes=True)


class SHealth(SCamelModel):
    database: bool
    ai: bool
    timestamp: datetime
