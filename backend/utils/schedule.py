from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta




HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
ONE_HOUR = timedelta(hours=1)


@dataclass
class HourSlot:
    hour: int
    event_ids: list = field(default_factory=list)


@dataclass
class ScheduleDay:
    day: date
    events: list = field(default_factory=list)
    slots: list = field(default_factory=list)


@dataclass
class WeekSchedule:
    week_start: date
    week_end: date
    days: list


def week_start_for(anchor: date) -> date:
    """Sunday on or before the anchor"""
    if isinstance(anchor, datetime):
        anchor = anchor.date()
    return anchor - timedelta(days=(anchor.weekday() + 1) % DAYS_PER_WEEK)


def _floor_hour(moment: datetime) -> datetime:
    return moment.replace(minute=0, second=0, microsecond=0)


def project_week(anchor: date, events) -> WeekSchedule:
    """Lay events out on a Sunday-first week grid.

    Each event lands in the day bucket of its start date and in every hour slot
    its interval touches. Zero-length events take the slot they start in.
    """
    week_start = week_start_for(anchor)
    days = [
        ScheduleDay(
            day=week_start + timedelta(days=offset),
            slots=[HourSlot(hour=hour) for hour in range(HOURS_PER_DAY)],
        )
        for offset in range(DAYS_PER_WEEK)
    ]

    for event in sorted(events, key=lambda e: e.start_time):
        start, end = event.start_time, event.end_time

        offset = (start.date() - week_start).days
        if 0 <= offset < DAYS_PER_WEEK:
            days[offset].events.append(event)

        window_start = datetime.combine(week_start, time.min, tzinfo=start.tzinfo)
        window_end = window_start + timedelta(days=DAYS_PER_WEEK)

        if end <= start:
            if window_start <= start < window_end:
                days[offset].slots[start.hour].event_ids.append(event.id)
            continue

        cursor = max(_floor_hour(start), window_start)
        while cursor < end and cursor < window_end:
            day_offset = (cursor.date() - week_start).days
            days[day_offset].slots[cursor.hour].event_ids.append(event.id)
            cursor += ONE_HOUR

    return WeekSchedule(week_start=week_start, week_end=week_start + timedelta(days=DAYS_PER_WEEK - 1), days=days)
