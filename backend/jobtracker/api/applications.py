"""
Applications API endpoints.
Thin HTTP layer over the application store.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.database import get_db
from jobtracker.api.auth import require_session
from jobtracker.errors import NotFoundError, StorageError, ValidationError
from jobtracker.schemas.application import (
    ApplicationCreateRequest,
    ApplicationUpdateRequest,
    ApplicationResponse,
    DeleteResponse,
)
from jobtracker.services.applications import (
    list_applications,
    create_application,
    update_application,
    delete_application,
)

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_session)])


# Endpoints
@router.get("", response_model=list[ApplicationResponse])
async def get_applications(db: AsyncSession = Depends(get_db)):
    """List all applications, most recently applied first."""
    try:
        return await list_applications(db)
    except StorageError as e:
        logger.error(f"Failed to fetch applications: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch applications")


@router.post("", response_model=ApplicationResponse, status_code=201)
async def post_application(
    request: ApplicationCreateRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an application.
    
    company and position are required. status defaults to Applied and
    dateApplied to now.
    
    Returns:
        201: Created application
        400: Missing required field or invalid status
        500: Database error
    """
    try:
        return await create_application(db, request.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StorageError as e:
        logger.error(f"Failed to create application: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create application")


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def patch_application(
    application_id: str,
    request: ApplicationUpdateRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Partially update an application.
    
    Only fields present in the body are changed; status can be changed on its own.
    
    Returns:
        200: Updated application
        400: Empty required field or invalid status
        404: Application not found
        500: Database error
    """
    try:
        return await update_application(
            db, application_id, request.model_dump(exclude_unset=True)
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        logger.error(f"Failed to update application: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update application")


@router.delete("/{application_id}", response_model=DeleteResponse)
async def remove_application(
    application_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    Permanently delete an application.
    
    Returns:
        200: Application deleted
        404: Application not found
        500: Database error
    """
    try:
        await delete_application(db, application_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        logger.error(f"Failed to delete application: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete application")
    
    return DeleteResponse(message="Application deleted")
