"""Resume bullet generation schemas."""
from typing import Optional
from pydantic import BaseModel


class BulletsRequest(BaseModel):
    """Free-text description of a project or role."""
    description: Optional[str] = None


class BulletsResponse(BaseModel):
    """Generated bullet text, one "- " line per bullet."""
    bullets: str
