import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from repositories.application import ApplicationRepository
from schemas.application import SApplication, SApplicationCreate, SApplicationUpdate
from schemas.base import Campus, ApplicationStatus
from schemas.dashboard import SNarrativeResult
from models.auth import StaffOrm
from utils.narrative import NarrativeClient, NarrativeUnavailableError, get_narrative_client
from utils.security import get_current_staff




logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/applications",
    tags=["Applications"]
)


@router.get("", response_model=list[SApplication])
async def get_applications(
    status: Optional[ApplicationStatus] = Query(None),
    campus: Optional[Campus] = Query(None, description="Matched against the applicant's preferred campus"),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Applications, newest submitted first"""
    try:
        return await ApplicationRepository.get_applications(status, campus or current_staff.campus)
    except Exception:
        logger.exception("Failed to fetch applications")
        raise HTTPException(status_code=500, detail="Failed to fetch applications")


@router.post("", response_model=SApplication, status_code=201)
async def create_application(application_data: SApplicationCreate):
    """Public intake form, no session required"""
    try:
        return await ApplicationRepository.create_application(application_data)
    except Exception:
        logger.exception("Failed to create application")
        raise HTTPException(status_code=500, detail="Failed to create application")


@router.get("/{application_id}", response_model=SApplication)
async def get_application(
    application_id: int,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Get application by ID"""
    try:
        application = await ApplicationRepository.get_application_by_id(application_id)
    except Exception:
        logger.exception("Failed to fetch application %s", application_id)
        raise HTTPException(status_code=500, detail="Failed to fetch application")
    
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return application


@router.patch("/{application_id}", response_model=SApplication)
async def review_application(
    application_id: int,
    application_data: SApplicationUpdate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Review an application; the reviewer and review time are stamped by the server"""
    try:
        application = await ApplicationRepository.review_application(
            application_id, application_data, current_staff.subject
        )
    except Exception:
        logger.exception("Failed to update application %s", application_id)
        raise HTTPException(status_code=500, detail="Failed to update application")
    
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return application


@router.post("/{application_id}/analyze", response_model=SNarrativeResult)
async def analyze_application(
    application_id: int,
    current_staff: StaffOrm = Depends(get_current_staff),
    narrative: NarrativeClient = Depends(get_narrative_client)
):
    """AI-written assessment of an application"""
    application = await get_application(application_id, current_staff)
    try:
        result = await narrative.analyze_application(application)
        return SNarrativeResult.model_validate(result)
    except NarrativeUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        logger.exception("Failed to analyze application %s", application_id)
        raise HTTPException(status_code=500, detail="Failed to analyze application")
