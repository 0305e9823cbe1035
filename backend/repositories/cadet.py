from typing import Optional
from database import new_session
from models.cadet import CadetOrm
from schemas.cadet import SCadetCreate, SCadetUpdate
from sqlalchemy import select, update, and_
from utils.activity_log import build_activity




CLEARABLE_FIELDS = {
    "email", "phone", "address", "city", "state", "zip_code",
    "class_number", "start_date", "graduation_date", "notes",
}


class CadetRepository:
    @classmethod
    async def get_cadets(cls, campus: Optional[str] = None, status: Optional[str] = None):
        """Cadets of a campus, newest first"""
        async with new_session() as session:
            conditions = []
            if campus:
                conditions.append(CadetOrm.campus == campus)
            if status:
                conditions.append(CadetOrm.status == status)
            
            query = select(CadetOrm).order_by(CadetOrm.created_at.desc(), CadetOrm.id.desc())
            if conditions:
                query = query.where(and_(*conditions))
            
            result = await session.execute(query)
            return result.scalars().all()
    
    
    @classmethod
    async def get_cohort(cls, campus: Optional[str] = None, class_number: Optional[int] = None):
        """Active cadets, optionally narrowed to one class"""
        async with new_session() as session:
            query = select(CadetOrm).where(CadetOrm.status == "active")
            if campus:
                query = query.where(CadetOrm.campus == campus)
            if class_number is not None:
                query = query.where(CadetOrm.class_number == class_number)
            
            result = await session.execute(query)
            return result.scalars().all()
    
    
    @classmethod
    async def get_cadet_by_id(cls, cadet_id: int):
        """Get cadet by ID"""
        async with new_session() as session:
            query = select(CadetOrm).where(CadetOrm.id == cadet_id)
            result = await session.execute(query)
            return result.scalars().first()
    
    
    @classmethod
    async def create_cadet(cls, cadet_data: SCadetCreate, campus: str, performed_by: Optional[str] = None):
        """Enroll a cadet and log the activity in the same transaction"""
        async with new_session() as session:
            fields = cadet_data.model_dump()
            fields["campus"] = cadet_data.campus or campus
            cadet = CadetOrm(**fields)
            session.add(cadet)
            await session.flush()
            
            session.add(build_activity("cadet_created", cadet, performed_by))
            
            await session.commit()
            await session.refresh(cadet)
            return cadet
    
    
    @classmethod
    async def update_cadet(cls, cadet_id: int, cadet_data: SCadetUpdate):
        """Partial update, None if the cadet does not exist"""
        async with new_session() as session:
            update_data = {
                field: value
                for field, value in cadet_data.model_dump(exclude_unset=True).items()
                if value is not None or field in CLEARABLE_FIELDS
            }
            
            if update_data:
                stmt = (
                    update(CadetOrm)
                    .where(CadetOrm.id == cadet_id)
                    .values(**update_data)
                )
                result = await session.execute(stmt)
                await session.commit()
                if result.rowcount == 0:
                    return None
            
            return await cls.get_cadet_by_id(cadet_id)
