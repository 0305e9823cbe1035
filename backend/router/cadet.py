import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from repositories.cadet import CadetRepository
from schemas.base import Campus, CadetStatus
from schemas.cadet import SCadet, SCadetCreate, SCadetUpdate
from schemas.dashboard import SCadetProgress, SNarrativeResult
from models.auth import StaffOrm
from utils.narrative import NarrativeClient, NarrativeUnavailableError, get_narrative_client
from utils.progress import summarize_cadet_progress
from utils.security import get_current_staff




logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/cadets",
    tags=["Cadets"]
)


@router.get("", response_model=list[SCadet])
async def get_cadets(
    campus: Optional[Campus] = Query(None),
    status: Optional[CadetStatus] = Query(None),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Cadets of a campus, newest first"""
    try:
        return await CadetRepository.get_cadets(campus or current_staff.campus, status)
    except Exception:
        logger.exception("Failed to fetch cadets")
        raise HTTPException(status_code=500, detail="Failed to fetch cadets")


@router.post("", response_model=SCadet, status_code=201)
async def create_cadet(
    cadet_data: SCadetCreate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Enroll a cadet"""
    try:
        return await CadetRepository.create_cadet(cadet_data, current_staff.campus, current_staff.subject)
    except Exception:
        logger.exception("Failed to create cadet")
        raise HTTPException(status_code=500, detail="Failed to create cadet")


@router.get("/{cadet_id}", response_model=SCadet)
async def get_cadet(
    cadet_id: int,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Get cadet by ID"""
    try:
        cadet = await CadetRepository.get_cadet_by_id(cadet_id)
    except Exception:
        logger.exception("Failed to fetch cadet %s", cadet_id)
        raise HTTPException(status_code=500, detail="Failed to fetch cadet")
    
    if not cadet:
        raise HTTPException(status_code=404, detail="Cadet not found")
    return cadet


@router.patch("/{cadet_id}", response_model=SCadet)
async def update_cadet(
    cadet_id: int,
    cadet_data: SCadetUpdate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Partial update of a cadet"""
    try:
        cadet = await CadetRepository.update_cadet(cadet_id, cadet_data)
    except Exception:
        logger.exception("Failed to update cadet %s", cadet_id)
        raise HTTPException(status_code=500, detail="Failed to update cadet")
    
    if not cadet:
        raise HTTPException(status_code=404, detail="Cadet not found")
    return cadet


@router.get("/{cadet_id}/progress", response_model=SCadetProgress)
async def get_cadet_progress(
    cadet_id: int,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Progress card for one cadet"""
    cadet = await get_cadet(cadet_id, current_staff)
    return SCadetProgress.model_validate(summarize_cadet_progress(cadet, date.today()))


@router.post("/{cadet_id}/insights", response_model=SNarrativeResult)
async def generate_cadet_insights(
    cadet_id: int,
    current_staff: StaffOrm = Depends(get_current_staff),
    narrative: NarrativeClient = Depends(get_narrative_client)
):
    """AI-written development insights for a cadet"""
    cadet = await get_cadet(cadet_id, current_staff)
    try:
        result = await narrative.generate_cadet_insights(cadet)
        return SNarrativeResult.model_validate(result)
    except NarrativeUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        logger.exception("Failed to generate insights for cadet %s", cadet_id)
        raise HTTPException(status_code=500, detail="Failed to generate insights")
