"""
Analytics API endpoints.
Statistics are recomputed from the full application list on every request.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.database import get_db
from jobtracker.api.auth import require_session
from jobtracker.errors import StorageError
from jobtracker.schemas.analytics import ApplicationStatistics
from jobtracker.services.analytics import compute_statistics
from jobtracker.services.applications import list_applications

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_session)])


@router.get("/statistics", response_model=ApplicationStatistics)
async def get_statistics(
    chronological: bool = Query(
        False, description="Sort timeline by month instead of first-seen order"
    ),
    db: AsyncSession = Depends(get_db)
):
    """
    Dashboard statistics: status counts, response/success rates,
    status distribution and monthly timeline.
    """
    try:
        applications = await list_applications(db)
    except StorageError as e:
        logger.error(f"Failed to fetch applications: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch applications")
    
    return compute_statistics(applications, chronological=chronological)
