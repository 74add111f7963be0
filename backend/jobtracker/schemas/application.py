"""Application-related Pydantic schemas."""
from datetime import datetime
from typing import Optional, Union
from uuid import UUID
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ApplicationCreateRequest(BaseModel):
    """
    Request body for creating an application.
    
    company and position are checked by the store so that a missing
    field is reported by name rather than as a schema error.
    """
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[str] = None
    date_applied: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("dateApplied", "date_applied")
    )
    job_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("jobUrl", "jobURL", "job_url")
    )
    salary: Optional[Union[str, int, float]] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class ApplicationUpdateRequest(BaseModel):
    """Request body for a partial update. Omitted fields are left unchanged."""
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[str] = None
    job_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("jobUrl", "jobURL", "job_url")
    )
    salary: Optional[Union[str, int, float]] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    
    # dateApplied is fixed at creation
    model_config = ConfigDict(extra="forbid")


class ApplicationResponse(BaseModel):
    """Schema for application response."""
    id: UUID
    company: str
    position: str
    status: str
    date_applied: datetime = Field(serialization_alias="dateApplied")
    job_url: Optional[str] = Field(None, serialization_alias="jobUrl")
    salary: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
    
    model_config = ConfigDict(from_attributes=True)


class DeleteResponse(BaseModel):
    """Response after deleting an application."""
    message: str
