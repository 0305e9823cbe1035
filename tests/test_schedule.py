from dataclasses import dataclass
from datetime import date, datetime
from utils.schedule import project_week, week_start_for




@dataclass
class Event:
    id: int
    start_time: datetime
    end_time: datetime


class TestWeekStart:
    def test_sunday_is_its_own_week_start(self):
        assert week_start_for(date(2026, 10, 11)) == date(2026, 10, 11)

    def test_saturday_goes_back_to_sunday(self):
        assert week_start_for(date(2026, 10, 17)) == date(2026, 10, 11)


class TestProjectWeek:
    def test_grid_shape(self):
        week = project_week(date(2026, 10, 14), [])

        assert week.week_start == date(2026, 10, 11)
        assert week.week_end == date(2026, 10, 17)
        assert len(week.days) == 7
        assert all(len(day.slots) == 24 for day in week.days)

    def test_event_fills_touched_hours(self):
        event = Event(1, datetime(2026, 10, 12, 9, 30), datetime(2026, 10, 12, 11, 0))

        week = project_week(date(2026, 10, 12), [event])
        monday = week.days[1]

        assert monday.events == [event]
        assert [slot.hour for slot in monday.slots if slot.event_ids] == [9, 10]

    def test_event_across_midnight(self):
        event = Event(2, datetime(2026, 10, 13, 23, 0), datetime(2026, 10, 14, 1, 0))

        week = project_week(date(2026, 10, 13), [event])

        assert week.days[2].slots[23].event_ids == [2]
        assert week.days[3].slots[0].event_ids == [2]
        assert week.days[3].events == []

    def test_zero_length_event(self):
        event = Event(3, datetime(2026, 10, 15, 14, 0), datetime(2026, 10, 15, 14, 0))

        week = project_week(date(2026, 10, 15), [event])

        assert week.days[4].slots[14].event_ids == [3]

    def test_event_outside_week_ignored(self):
        event = Event(4, datetime(2026, 10, 20, 9, 0), datetime(2026, 10, 20, 10, 0))

        week = project_week(date(2026, 10, 15), [event])

        assert all(not day.events for day in week.days)
        assert all(not slot.event_ids for day in week.days for slot in day.slots)
