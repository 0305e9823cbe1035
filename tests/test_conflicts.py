from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from utils.conflicts import events_overlap, find_event_conflicts




@dataclass
class Event:
    id: int
    start_time: datetime
    end_time: datetime
    location: Optional[str]


def at(hour, minute=0):
    return datetime(2026, 10, 12, hour, minute)


class TestEventsOverlap:
    def test_touching_events_do_not_overlap(self):
        assert not events_overlap(Event(1, at(9), at(10), "Gym"), Event(2, at(10), at(11), "Gym"))

    def test_nested_event_overlaps(self):
        assert events_overlap(Event(1, at(9), at(12), "Gym"), Event(2, at(10), at(11), "Gym"))


class TestFindEventConflicts:
    def test_gym_double_booking(self):
        """Two overlapping gym events conflict, the classroom event does not"""
        first = Event(1, at(9), at(10), "Gym")
        second = Event(2, at(9, 30), at(10, 30), "Gym")
        third = Event(3, at(9), at(10), "Classroom A")

        conflicts = find_event_conflicts([first, second, third])

        assert [c.event.id for c in conflicts] == [1, 2]
        assert [e.id for e in conflicts[0].conflicts] == [2]
        assert [e.id for e in conflicts[1].conflicts] == [1]

    def test_third_gym_event_conflicts_with_second_only(self):
        first = Event(1, at(9), at(10), "Gym")
        second = Event(2, at(9, 30), at(10, 30), "Gym")
        third = Event(3, at(10), at(11), "Gym")

        conflicts = {c.event.id: [e.id for e in c.conflicts] for c in find_event_conflicts([first, second, third])}

        assert conflicts == {1: [2], 2: [1, 3], 3: [2]}

    def test_back_to_back_is_not_a_conflict(self):
        events = [Event(1, at(9), at(10), "Gym"), Event(2, at(10), at(11), "Gym")]
        assert find_event_conflicts(events) == []

    def test_location_compared_verbatim(self):
        events = [Event(1, at(9), at(10), "Gym"), Event(2, at(9), at(10), "gym")]
        assert find_event_conflicts(events) == []

    def test_missing_location_never_conflicts(self):
        events = [Event(1, at(9), at(10), None), Event(2, at(9), at(10), None)]
        assert find_event_conflicts(events) == []

    def test_identical_rows_conflict_with_each_other_only(self):
        events = [Event(1, at(9), at(10), "Gym"), Event(1, at(9), at(10), "Gym")]

        conflicts = find_event_conflicts(events)

        assert len(conflicts) == 2
        assert conflicts[0].conflicts == [events[1]]
        assert conflicts[1].conflicts == [events[0]]

    def test_long_event_overlaps_several(self):
        events = [
            Event(1, at(8), at(12), "Field"),
            Event(2, at(9), at(10), "Field"),
            Event(3, at(11), at(13), "Field"),
        ]

        conflicts = {c.event.id: [e.id for e in c.conflicts] for c in find_event_conflicts(events)}

        assert conflicts == {1: [2, 3], 2: [1], 3: [1]}

    def test_empty_input(self):
        assert find_event_conflicts([]) == []
