from datetime import datetime, timezone
from typing import Optional
from database import new_session
from models.application import ApplicationOrm
from schemas.application import SApplicationCreate, SApplicationUpdate
from sqlalchemy import select, and_
from utils.activity_log import build_activity




class ApplicationRepository:
    @classmethod
    async def get_applications(cls, status: Optional[str] = None, campus: Optional[str] = None):
        """Applications filtered by status and preferred campus, newest submitted first"""
        async with new_session() as session:
            conditions = []
            if status:
                conditions.append(ApplicationOrm.status == status)
            if campus:
                conditions.append(ApplicationOrm.preferred_campus == campus)
            
            query = select(ApplicationOrm).order_by(ApplicationOrm.submitted_at.desc(), ApplicationOrm.id.desc())
            if conditions:
                query = query.where(and_(*conditions))
            
            result = await session.execute(query)
            return result.scalars().all()
    
    
    @classmethod
    async def get_application_by_id(cls, application_id: int):
        """Get application by ID"""
        async with new_session() as session:
            query = select(ApplicationOrm).where(ApplicationOrm.id == application_id)
            result = await session.execute(query)
            return result.scalars().first()
    
    
    @classmethod
    async def create_application(cls, application_data: SApplicationCreate):
        """Store a public intake application; it always starts as pending"""
        async with new_session() as session:
            application = ApplicationOrm(**application_data.model_dump(), status="pending")
            session.add(application)
            await session.flush()
            
            session.add(build_activity("application_submitted", application))
            
            await session.commit()
            await session.refresh(application)
            return application
    
    
    @classmethod
    async def review_application(cls, application_id: int, application_data: SApplicationUpdate, reviewer: str):
        """Apply a review; reviewer and review time are always stamped together"""
        async with new_session() as session:
            query = select(ApplicationOrm).where(ApplicationOrm.id == application_id)
            result = await session.execute(query)
            application = result.scalars().first()
            
            if not application:
                return None
            
            previous_status = application.status
            for field, value in application_data.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(application, field, value)
            
            application.reviewed_by = reviewer
            application.reviewed_at = datetime.now(timezone.utc)
            
            if application.status != previous_status:
                session.add(build_activity("application_reviewed", application, reviewer))
            
            await session.commit()
            await session.refresh(application)
            return application
