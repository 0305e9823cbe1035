import logging
from datetime import date, datetime, time, timedelta
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from repositories.event import EventRepository
from schemas.base import Campus, as_naive_utc
from schemas.event import SEvent, SEventCreate, SEventConflict, SWeekSchedule, SScheduleDay, SHourSlot
from models.auth import StaffOrm
from utils.conflicts import find_event_conflicts
from utils.schedule import DAYS_PER_WEEK, project_week, week_start_for
from utils.security import get_current_staff




logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/events",
    tags=["Events"]
)


@router.get("", response_model=list[SEvent])
async def get_events(
    campus: Optional[Campus] = Query(None),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Events ordered by start time"""
    try:
        return await EventRepository.get_events(
            campus or current_staff.campus, as_naive_utc(start_date), as_naive_utc(end_date)
        )
    except Exception:
        logger.exception("Failed to fetch events")
        raise HTTPException(status_code=500, detail="Failed to fetch events")


@router.post("", response_model=SEvent, status_code=201)
async def create_event(
    event_data: SEventCreate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Create an event"""
    try:
        return await EventRepository.create_event(event_data, current_staff.campus, current_staff.id)
    except Exception:
        logger.exception("Failed to create event")
        raise HTTPException(status_code=500, detail="Failed to create event")


@router.get("/conflicts", response_model=list[SEventConflict])
async def get_event_conflicts(
    campus: Optional[Campus] = Query(None),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Events double-booked at the same location, among those running at any point inside the window"""
    try:
        events = await EventRepository.get_events_overlapping(
            as_naive_utc(start_date), as_naive_utc(end_date), campus or current_staff.campus
        )
    except Exception:
        logger.exception("Failed to fetch events for conflict check")
        raise HTTPException(status_code=500, detail="Failed to fetch events")
    
    return [
        SEventConflict(
            event=SEvent.model_validate(conflict.event),
            conflicts=[SEvent.model_validate(other) for other in conflict.conflicts]
        )
        for conflict in find_event_conflicts(events)
    ]


@router.get("/week", response_model=SWeekSchedule)
async def get_week_schedule(
    anchor: Optional[date] = Query(None, description="Any day of the wanted week; defaults to today"),
    campus: Optional[Campus] = Query(None),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Sunday-first week grid with day buckets and hourly slots"""
    anchor = anchor or date.today()
    window_start = datetime.combine(week_start_for(anchor), time.min)
    window_end = window_start + timedelta(days=DAYS_PER_WEEK)
    try:
        events = await EventRepository.get_events_overlapping(window_start, window_end, campus or current_staff.campus)
    except Exception:
        logger.exception("Failed to fetch events for week of %s", anchor)
        raise HTTPException(status_code=500, detail="Failed to fetch events")
    
    schedule = project_week(anchor, events)
    return SWeekSchedule(
        week_start=schedule.week_start,
        week_end=schedule.week_end,
        days=[
            SScheduleDay(
                day=day.day,
                events=[SEvent.model_validate(event) for event in day.events],
                slots=[SHourSlot(hour=slot.hour, event_ids=slot.event_ids) for slot in day.slots]
            )
            for day in schedule.days
        ]
    )


@router.get("/{event_id}", response_model=SEvent)
async def get_event(
    event_id: int,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Get event by ID"""
    try:
        event = await EventRepository.get_event_by_id(event_id)
    except Exception:
        logger.exception("Failed to fetch event %s", event_id)
        raise HTTPException(status_code=500, detail="Failed to fetch event")
    
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event
