import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from utils.metrics import round_half_up




PROGRESS_AXES = (
    ("academic", "Academic Excellence", "academic_progress"),
    ("fitness", "Physical Fitness", "fitness_progress"),
    ("leadership", "Leadership Development", "leadership_progress"),
)
SERVICE_AXIS = ("community_service", "Community Service", "service_hours")

PROGRAM_WEEKS = 22
SERVICE_HOURS_GOAL = 40
CORE_COMPONENTS_GOAL = 80


@dataclass(frozen=True)
class ProgressAxis:
    key: str
    label: str
    value: int


@dataclass(frozen=True)
class ComponentProgress:
    key: str
    label: str
    value: float
    rating: str


@dataclass(frozen=True)
class CadetProgressSummary:
    cadet_id: int
    overall_progress: float
    components: list
    service_hours: int
    weeks_in_program: int
    program_progress: int
    service_hours_complete: bool
    core_components_complete: bool


def _numeric(record, field: str) -> float:
    if isinstance(record, Mapping):
        value = record.get(field)
    else:
        value = getattr(record, field, None)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _mean(values: list) -> float:
    return sum(values) / len(values)


def rate_progress(value: float) -> str:
    if value >= 80:
        return "excellent"
    if value >= 60:
        return "good"
    if value >= 40:
        return "fair"
    return "needs_improvement"


def rollup_progress(cadets) -> list[ProgressAxis]:
    """Cohort averages per progress axis.

    Every axis is the mean over the cohort rounded to a whole percent. The
    community service axis is the mean of service hours capped at 100. An
    empty cohort has no averages, so the result is an empty list.
    """
    cadets = list(cadets)
    if not cadets:
        return []

    axes = []
    for key, label, field in PROGRESS_AXES:
        value = _mean([_numeric(cadet, field) for cadet in cadets])
        axes.append(ProgressAxis(key=key, label=label, value=int(round_half_up(value))))

    key, label, field = SERVICE_AXIS
    service = _mean([_numeric(cadet, field) for cadet in cadets])
    axes.append(ProgressAxis(key=key, label=label, value=int(min(round_half_up(service), 100))))
    return axes


def weeks_between(start: date | None, today: date) -> int:
    if start is None or start > today:
        return 0
    return (today - start).days // 7


def summarize_cadet_progress(cadet, today: date) -> CadetProgressSummary:
    """Progress card for a single cadet"""
    components = []
    for key, label, field in PROGRESS_AXES:
        value = _numeric(cadet, field)
        components.append(ComponentProgress(key=key, label=label, value=value, rating=rate_progress(value)))

    overall = round_half_up(_mean([component.value for component in components]), 1)
    service_hours = int(_numeric(cadet, "service_hours"))
    start_date = cadet.get("start_date") if isinstance(cadet, Mapping) else getattr(cadet, "start_date", None)
    weeks = weeks_between(start_date, today)
    program_progress = int(min(round_half_up(weeks / PROGRAM_WEEKS * 100), 100))
    cadet_id = cadet.get("id") if isinstance(cadet, Mapping) else getattr(cadet, "id", None)

    return CadetProgressSummary(
        cadet_id=cadet_id,
        overall_progress=overall,
        components=components,
        service_hours=service_hours,
        weeks_in_program=weeks,
        program_progress=program_progress,
        service_hours_complete=service_hours >= SERVICE_HOURS_GOAL,
        core_components_complete=overall >= CORE_COMPONENTS_GOAL,
    )
