"""Session-related Pydantic schemas."""
from pydantic import BaseModel


class SessionResponse(BaseModel):
    """Response describing the current session."""
    authenticated: bool
    identity: str
    dev_mode: bool
