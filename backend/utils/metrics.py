import math
from dataclasses import dataclass




@dataclass(frozen=True)
class DashboardMetrics:
    active_participants: int
    graduation_rate: float
    service_hours: int
    pending_applications: int


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like the dashboard does: .5 always goes up"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def compute_graduation_rate(graduated: int, total: int) -> float:
    """Percentage of graduated cadets, one decimal; 0 when nobody is enrolled"""
    if not total:
        return 0.0
    return round_half_up(graduated / total * 100, 1)


def build_metrics(status_counts: dict, service_hours, pending_applications: int) -> DashboardMetrics:
    total = sum(status_counts.values())
    return DashboardMetrics(
        active_participants=status_counts.get("active", 0),
        graduation_rate=compute_graduation_rate(status_counts.get("graduated", 0), total),
        service_hours=max(int(service_hours or 0), 0),
        pending_applications=pending_applications or 0,
    )
