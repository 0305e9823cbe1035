import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from repositories.activity import ActivityRepository
from repositories.cadet import CadetRepository
from repositories.dashboard import DashboardRepository
from schemas.activity import SActivity
from schemas.base import Campus
from schemas.dashboard import SDashboardMetrics, SProgressAxis
from models.auth import StaffOrm
from utils.progress import rollup_progress
from utils.security import get_current_staff




logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Dashboard"]
)


@router.get("/dashboard/metrics", response_model=SDashboardMetrics)
async def get_dashboard_metrics(
    campus: Optional[Campus] = Query(None, description="Campus; defaults to the staff member's campus"),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Active cadets, graduation rate, service hours and pending applications"""
    try:
        metrics = await DashboardRepository.get_dashboard_metrics(campus or current_staff.campus)
        return SDashboardMetrics.model_validate(metrics)
    except Exception:
        logger.exception("Failed to fetch dashboard metrics")
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard metrics")


@router.get("/dashboard/progress", response_model=list[SProgressAxis])
async def get_cohort_progress(
    campus: Optional[Campus] = Query(None),
    class_number: Optional[int] = Query(None, alias="classNumber", ge=1),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Average progress of the active cohort; empty list when there is nobody to average"""
    try:
        cadets = await CadetRepository.get_cohort(campus or current_staff.campus, class_number)
        return [SProgressAxis.model_validate(axis) for axis in rollup_progress(cadets)]
    except Exception:
        logger.exception("Failed to compute cohort progress")
        raise HTTPException(status_code=500, detail="Failed to fetch cohort progress")


@router.get("/activities", response_model=list[SActivity])
async def get_recent_activities(
    campus: Optional[Campus] = Query(None),
    limit: int = Query(10, ge=1, le=100),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Recent activity feed"""
    try:
        return await ActivityRepository.get_recent_activities(campus or current_staff.campus, limit)
    except Exception:
        logger.exception("Failed to fetch activities")
        raise HTTPException(status_code=500, detail="Failed to fetch activities")
