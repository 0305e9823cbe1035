import logging
from fastapi import APIRouter, HTTPException, Depends
from schemas.auth import SStaffAuth, SStaffSession, SStaff
from repositories.auth import StaffRepository
from models.auth import StaffOrm
from utils.security import get_current_staff, get_session_token




logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Auth"]
)


@router.post("/login", response_model=SStaffSession)
async def login_staff(auth_data: SStaffAuth):
    """Identity provider callback: upsert the staff member and open a session"""
    try:
        staff = await StaffRepository.upsert_staff(auth_data)
        session_token = await StaffRepository.create_staff_session(staff.id)
        
        return SStaffSession(
            session_token=session_token,
            staff=SStaff.model_validate(staff)
        )
    except Exception:
        logger.exception("Login failed for subject=%s", auth_data.subject)
        raise HTTPException(status_code=500, detail="Failed to sign in")


@router.post("/logout")
async def logout(session_token: str = Depends(get_session_token)):
    """Close the current session"""
    try:
        await StaffRepository.delete_staff_session(session_token)
        return {"success": True, "message": "Signed out"}
    except Exception:
        logger.exception("Logout failed")
        raise HTTPException(status_code=500, detail="Failed to sign out")


@router.get("/me", response_model=SStaff)
async def get_current_staff_info(current_staff: StaffOrm = Depends(get_current_staff)):
    """Current staff member"""
    return current_staff
