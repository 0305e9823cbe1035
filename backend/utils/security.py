from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from repositories.auth import StaffRepository




security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str):
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_session_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)):
    """Session token from the Authorization header"""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    return credentials.credentials


async def get_current_staff(session_token: str = Depends(get_session_token)):
    """Staff member behind the session token"""
    staff = await StaffRepository.get_staff_by_session_token(session_token)
    if not staff:
        raise _unauthorized("Invalid or expired session token")
    
    return staff
