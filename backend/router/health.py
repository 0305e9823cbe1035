import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from database import ping_database
from schemas.dashboard import SHealth
from utils.narrative import NarrativeClient, get_narrative_client




logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"]
)


@router.get("/health", response_model=SHealth)
async def check_system_health(narrative: NarrativeClient = Depends(get_narrative_client)):
    """Database and AI service reachability"""
    try:
        database_ok = await ping_database()
    except Exception:
        logger.exception("Database health check failed")
        database_ok = False
    
    return SHealth(
        database=database_ok,
        ai=await narrative.ping(),
        timestamp=datetime.now(timezone.utc)
    )
