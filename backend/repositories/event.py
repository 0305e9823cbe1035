from datetime import datetime
from typing import Optional
from database import new_session
from models.event import EventOrm
from schemas.event import SEventCreate
from sqlalchemy import select, and_




class EventRepository:
    @classmethod
    async def create_event(cls, event_data: SEventCreate, campus: str, staff_id: int):
        """Create an event"""
        async with new_session() as session:
            fields = event_data.model_dump()
            fields["campus"] = event_data.campus or campus
            event = EventOrm(**fields, created_by=staff_id)
            session.add(event)
            await session.commit()
            await session.refresh(event)
            return event
    
    
    @classmethod
    async def get_event_by_id(cls, event_id: int):
        """Get event by ID"""
        async with new_session() as session:
            query = select(EventOrm).where(EventOrm.id == event_id)
            result = await session.execute(query)
            return result.scalars().first()
    
    
    @classmethod
    async def get_events(cls, campus: Optional[str] = None, start_date: Optional[datetime] = None, end_date: Optional[datetime] = None):
        """Events ordered by start time; the date window applies to the start time, both ends inclusive"""
        async with new_session() as session:
            conditions = []
            if campus:
                conditions.append(EventOrm.campus == campus)
            if start_date:
                conditions.append(EventOrm.start_time >= start_date)
            if end_date:
                conditions.append(EventOrm.start_time <= end_date)
            
            query = select(EventOrm).order_by(EventOrm.start_time, EventOrm.id)
            if conditions:
                query = query.where(and_(*conditions))
            
            result = await session.execute(query)
            return result.scalars().all()
    
    
    @classmethod
    async def get_events_overlapping(cls, window_start: Optional[datetime], window_end: Optional[datetime], campus: Optional[str] = None):
        """Events whose interval touches [window_start, window_end); a missing bound leaves that side open"""
        async with new_session() as session:
            conditions = []
            if campus:
                conditions.append(EventOrm.campus == campus)
            if window_start:
                conditions.append(EventOrm.end_time > window_start)
            if window_end:
                conditions.append(EventOrm.start_time < window_end)
            
            query = select(EventOrm).order_by(EventOrm.start_time, EventOrm.id)
            if conditions:
                query = query.where(and_(*conditions))
            
            result = await session.execute(query)
            return result.scalars().all()
