from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, DateTime, Text, Index, CheckConstraint
import uuid

from jobtracker.database import Base
from jobtracker.database_types import GUID


class ApplicationStatus(str, Enum):
    """Valid statuses for a job application"""
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFERED = "Offered"
    REJECTED = "Rejected"
    IGNORED = "Ignored"


class Application(Base):
    __tablename__ = "applications"
    
    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    
    company = Column(Text, nullable=False)
    position = Column(Text, nullable=False)
    
    # Lifecycle
    status = Column(
        String(20),
        nullable=False,
        default=ApplicationStatus.APPLIED.value,
        server_default=ApplicationStatus.APPLIED.value
    )
    date_applied = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    # Optional details, unbounded text (salary is never computed on)
    job_url = Column(Text, nullable=True)
    salary = Column(Text, nullable=True)
    location = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    __table_args__ = (
        CheckConstraint(
            "status IN ('Applied', 'Interview', 'Offered', 'Rejected', 'Ignored')",
            name='ck_applications_status'
        ),
        
        # List is always ordered newest first
        Index('idx_applications_date_applied', 'date_applied'),
    )
