"""
Application status lifecycle.

Statuses form a fixed set; any status may be replaced by any other.
Status values are validated here before they reach the database.
"""
from typing import Any, Mapping, Optional

from jobtracker.errors import ValidationError
from jobtracker.models.application import ApplicationStatus


DEFAULT_STATUS = ApplicationStatus.APPLIED

# Employer reacted (positively, negatively, or progressed to interview)
RESPONSE_STATUSES = frozenset({
    ApplicationStatus.INTERVIEW,
    ApplicationStatus.OFFERED,
    ApplicationStatus.REJECTED,
})

# Chart order and labels. IGNORED is counted but never charted.
CHART_LABELS: tuple[tuple[ApplicationStatus, str], ...] = (
    (ApplicationStatus.APPLIED, "Applied"),
    (ApplicationStatus.INTERVIEW, "Interview"),
    (ApplicationStatus.OFFERED, "Offer"),
    (ApplicationStatus.REJECTED, "Rejected"),
)

REQUIRED_FIELDS = ("company", "position")
IMMUTABLE_FIELDS = frozenset({"id", "date_applied", "created_at", "updated_at"})


def parse_status(value: Any) -> ApplicationStatus:
    """
    Convert a raw status value to ApplicationStatus.
    
    Raises:
        ValidationError: If value is not one of the five statuses
    """
    if isinstance(value, ApplicationStatus):
        return value
    try:
        return ApplicationStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in ApplicationStatus)
        raise ValidationError(
            "status",
            f"Invalid status {value!r}. Must be one of: {allowed}"
        )


def is_response(status: ApplicationStatus) -> bool:
    """Check if a status counts as an employer response."""
    return status in RESPONSE_STATUSES


def require_text(fields: Mapping[str, Any], name: str) -> str:
    """Return a required text field, stripped, or raise ValidationError."""
    value = fields.get(name)
    if value is None or not str(value).strip():
        raise ValidationError(name, f"{name} is required")
    return str(value).strip()


def normalize_salary(value: Any) -> Optional[str]:
    """Salary is opaque text; numbers are kept in their string form."""
    if value is None:
        return None
    return str(value)
