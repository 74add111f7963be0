"""
Resume bullet generation endpoint.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from jobtracker.api.auth import require_session
from jobtracker.errors import BulletGenerationError, ValidationError
from jobtracker.schemas.bullets import BulletsRequest, BulletsResponse
from jobtracker.services.bullets import BulletGenerator, get_bullet_generator

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_session)])


@router.post("/generate-bullets", response_model=BulletsResponse)
async def generate_bullets(
    request: BulletsRequest,
    generator: BulletGenerator = Depends(get_bullet_generator)
):
    """
    Turn a free-text experience description into resume bullet points.
    
    Returns:
        200: Generated bullets
        400: Description missing
        500: API key not configured or generation failed
    """
    try:
        bullets = await generator.generate(request.description)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except BulletGenerationError as e:
        logger.error(f"Bullet generation failed: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    
    return BulletsResponse(bullets=bullets)
