from collections import defaultdict
from dataclasses import dataclass, field




@dataclass
class EventConflict:
    event: object
    conflicts: list = field(default_factory=list)


def events_overlap(first, second) -> bool:
    """Half-open intervals: an event ending at 10:00 does not overlap one starting at 10:00"""
    return first.start_time < second.end_time and second.start_time < first.end_time


def find_event_conflicts(events) -> list[EventConflict]:
    """Find events that overlap another event booked at the same location.

    Locations are compared verbatim. Events are told apart by position, so two
    identical rows still conflict with each other but no event conflicts with
    itself. Events without a location are never reported.
    """
    events = list(events)

    by_location = defaultdict(list)
    for index, event in enumerate(events):
        if event.location is None:
            continue
        by_location[event.location].append(index)

    found = defaultdict(set)
    for indexes in by_location.values():
        ordered = sorted(indexes, key=lambda i: events[i].start_time)
        for position, i in enumerate(ordered):
            current = events[i]
            for j in ordered[position + 1:]:
                other = events[j]
                if other.start_time >= current.end_time:
                    break
                if events_overlap(current, other):
                    found[i].add(j)
                    found[j].add(i)

    return [
        EventConflict(event=events[i], conflicts=[events[j] for j in sorted(found[i])])
        for i in range(len(events))
        if i in found
    ]
