import secrets
from datetime import datetime, timezone, timedelta
from config import get_settings
from database import new_session
from models.auth import StaffOrm, StaffSessionOrm
from schemas.auth import SStaffAuth
from sqlalchemy import select, delete




def _as_utc(moment: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class StaffRepository:
    @classmethod
    async def upsert_staff(cls, auth_data: SStaffAuth):
        """Create or refresh a staff member from the identity provider claims"""
        async with new_session() as session:
            query = select(StaffOrm).where(StaffOrm.subject == auth_data.subject)
            result = await session.execute(query)
            staff = result.scalars().first()
            
            if not staff:
                staff = StaffOrm(subject=auth_data.subject)
                session.add(staff)
            
            staff.email = auth_data.email
            staff.first_name = auth_data.first_name
            staff.last_name = auth_data.last_name
            staff.role = auth_data.role
            staff.campus = auth_data.campus
            
            await session.commit()
            await session.refresh(staff)
            return staff
    
    
    @classmethod
    async def get_staff_by_id(cls, staff_id: int):
        """Get staff member by ID"""
        async with new_session() as session:
            query = select(StaffOrm).where(StaffOrm.id == staff_id)
            result = await session.execute(query)
            return result.scalars().first()
    
    
    @classmethod
    async def get_staff_by_session_token(cls, session_token: str):
        """Get staff member by session token, None if missing or expired"""
        async with new_session() as session:
            query = select(StaffSessionOrm).where(StaffSessionOrm.session_token == session_token)
            result = await session.execute(query)
            session_obj = result.scalars().first()
            
            if not session_obj or _as_utc(session_obj.expires_at) < datetime.now(timezone.utc):
                return None
            
            return await cls.get_staff_by_id(session_obj.staff_id)
    
    
    @classmethod
    async def create_staff_session(cls, staff_id: int):
        """Open a session for a staff member"""
        async with new_session() as session:
            session_token = secrets.token_urlsafe(32)
            expires_at = datetime.now(timezone.utc) + timedelta(days=get_settings().session_expire_days)
            
            session_obj = StaffSessionOrm(
                staff_id=staff_id,
                session_token=session_token,
                expires_at=expires_at
            )
            session.add(session_obj)
            await session.commit()
            return session_token
    
    
    @classmethod
    async def delete_staff_session(cls, session_token: str):
        """Close a session"""
        async with new_session() as session:
            query = delete(StaffSessionOrm).where(StaffSessionOrm.session_token == session_token)
            await session.execute(query)
            await session.commit()
