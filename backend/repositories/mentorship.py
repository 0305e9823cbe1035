from typing import Optional
from database import new_session
from models.cadet import CadetOrm
from models.mentorship import MentorshipOrm
from schemas.mentorship import SMentorshipCreate
from sqlalchemy import select




class MentorshipRepository:
    @classmethod
    async def get_mentorships(cls, cadet_id: Optional[int] = None):
        """Mentorships, newest first, optionally for one cadet"""
        async with new_session() as session:
            query = select(MentorshipOrm).order_by(MentorshipOrm.created_at.desc(), MentorshipOrm.id.desc())
            if cadet_id is not None:
                query = query.where(MentorshipOrm.cadet_id == cadet_id)
            
            result = await session.execute(query)
            return result.scalars().all()
    
    
    @classmethod
    async def create_mentorship(cls, mentorship_data: SMentorshipCreate):
        """Assign a mentor to a cadet"""
        async with new_session() as session:
            cadet = await session.get(CadetOrm, mentorship_data.cadet_id)
            if not cadet:
                raise ValueError("Cadet not found")
            
            mentorship = MentorshipOrm(**mentorship_data.model_dump())
            session.add(mentorship)
            await session.commit()
            await session.refresh(mentorship)
            return mentorship
