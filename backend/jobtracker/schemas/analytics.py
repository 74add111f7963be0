"""Analytics Pydantic schemas."""
from pydantic import BaseModel, Field


class StatusSlice(BaseModel):
    """One non-zero status count for the distribution chart."""
    name: str
    value: int


class TimelinePoint(BaseModel):
    """Applications submitted in one calendar month ("Mon YYYY")."""
    month: str
    applications: int


class ApplicationStatistics(BaseModel):
    """Derived statistics over the full application list."""
    total: int = 0
    applied: int = 0
    interview: int = 0
    offer: int = 0
    rejected: int = 0
    ignored: int = 0
    response_rate: int = Field(0, serialization_alias="responseRate")
    success_rate: int = Field(0, serialization_alias="successRate")
    status_distribution: list[StatusSlice] = Field(
        default_factory=list, serialization_alias="statusDistribution"
    )
    timeline: list[TimelinePoint] = Field(default_factory=list)
