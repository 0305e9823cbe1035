from typing import Optional
from database import new_session
from models.activity import ActivityOrm
from sqlalchemy import select




class ActivityRepository:
    @classmethod
    async def get_recent_activities(cls, campus: Optional[str] = None, limit: int = 10):
        """Latest activity feed entries"""
        async with new_session() as session:
            query = select(ActivityOrm).order_by(ActivityOrm.created_at.desc(), ActivityOrm.id.desc()).limit(limit)
            if campus:
                query = query.where(ActivityOrm.campus == campus)
            
            result = await session.execute(query)
            return result.scalars().all()
