import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from repositories.mentorship import MentorshipRepository
from schemas.mentorship import SMentorship, SMentorshipCreate
from models.auth import StaffOrm
from utils.security import get_current_staff




logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/mentorships",
    tags=["Mentorships"]
)


@router.get("", response_model=list[SMentorship])
async def get_mentorships(
    cadet_id: Optional[int] = Query(None, alias="cadetId"),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Mentor assignments, newest first"""
    try:
        return await MentorshipRepository.get_mentorships(cadet_id)
    except Exception:
        logger.exception("Failed to fetch mentorships")
        raise HTTPException(status_code=500, detail="Failed to fetch mentorships")


@router.post("", response_model=SMentorship, status_code=201)
async def create_mentorship(
    mentorship_data: SMentorshipCreate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Assign a mentor to a cadet"""
    try:
        return await MentorshipRepository.create_mentorship(mentorship_data)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Failed to create mentorship")
        raise HTTPException(status_code=500, detail="Failed to create mentorship")
