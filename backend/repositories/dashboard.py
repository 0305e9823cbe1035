from typing import Optional
from database import new_session
from models.application import ApplicationOrm
from models.cadet import CadetOrm
from sqlalchemy import select, func
from utils.metrics import build_metrics




class DashboardRepository:
    @classmethod
    async def get_dashboard_metrics(cls, campus: Optional[str] = None):
        """Headline numbers for the dashboard.

        Cadets are scoped by their campus of record, applications by the
        campus the applicant asked for.
        """
        async with new_session() as session:
            status_query = (
                select(CadetOrm.status, func.count(CadetOrm.id).label("count"))
                .group_by(CadetOrm.status)
            )
            hours_query = select(func.coalesce(func.sum(CadetOrm.service_hours), 0))
            pending_query = (
                select(func.count(ApplicationOrm.id))
                .where(ApplicationOrm.status == "pending")
            )
            
            if campus:
                status_query = status_query.where(CadetOrm.campus == campus)
                hours_query = hours_query.where(CadetOrm.campus == campus)
                pending_query = pending_query.where(ApplicationOrm.preferred_campus == campus)
            
            status_result = await session.execute(status_query)
            status_counts = dict(status_result.all())
            
            hours_result = await session.execute(hours_query)
            service_hours = hours_result.scalar()
            
            pending_result = await session.execute(pending_query)
            pending_applications = pending_result.scalar()
            
            return build_metrics(status_counts, service_hours, pending_applications)
