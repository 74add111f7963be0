"""
Application store.
ALL reads and writes of application records go through this module.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.errors import NotFoundError, StorageError, ValidationError
from jobtracker.models.application import Application
from jobtracker.services.lifecycle import (
    DEFAULT_STATUS,
    IMMUTABLE_FIELDS,
    REQUIRED_FIELDS,
    normalize_salary,
    parse_status,
    require_text,
)

logger = logging.getLogger(__name__)


OPTIONAL_TEXT_FIELDS = ("job_url", "location", "notes")
UPDATABLE_FIELDS = frozenset(REQUIRED_FIELDS + OPTIONAL_TEXT_FIELDS + ("status", "salary"))


def _to_naive_utc(value: datetime) -> datetime:
    """Timestamps are stored as naive UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _parse_id(application_id: Any) -> uuid.UUID:
    # Malformed ids can never match a record
    if isinstance(application_id, uuid.UUID):
        return application_id
    try:
        return uuid.UUID(str(application_id))
    except ValueError:
        raise NotFoundError(application_id)


async def list_applications(db: AsyncSession) -> List[Application]:
    """
    Return every application, most recently applied first.

    Raises:
        StorageError: If the database query fails
    """
    try:
        result = await db.execute(
            select(Application).order_by(Application.date_applied.desc())
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to list applications: {str(e)}", exc_info=True)
        raise StorageError("Failed to fetch applications") from e


async def get_application(db: AsyncSession, application_id: Any) -> Application:
    """
    Fetch a single application.

    Raises:
        NotFoundError: If no application has this id
        StorageError: If the database query fails
    """
    key = _parse_id(application_id)
    try:
        result = await db.execute(
            select(Application).where(Application.id == key)
        )
        application = result.scalar_one_or_none()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to fetch application {key}: {str(e)}", exc_info=True)
        raise StorageError("Failed to fetch application") from e

    if application is None:
        raise NotFoundError(application_id)

    return application


async def create_application(db: AsyncSession, fields: Dict[str, Any]) -> Application:
    """
    Create and persist a new application.

    Args:
        db: Database session
        fields: company and position are required. status, date_applied,
            job_url, salary, location and notes are optional.

    Returns:
        The persisted Application with its generated id

    Raises:
        ValidationError: If a required field is missing/empty or status is invalid
        StorageError: If the insert fails
    """
    company = require_text(fields, "company")
    position = require_text(fields, "position")

    status = fields.get("status")
    status = parse_status(status) if status else DEFAULT_STATUS

    date_applied: Optional[datetime] = fields.get("date_applied")
    date_applied = _to_naive_utc(date_applied) if date_applied else datetime.utcnow()

    application = Application(
        id=uuid.uuid4(),
        company=company,
        position=position,
        status=status.value,
        date_applied=date_applied,
        job_url=fields.get("job_url"),
        salary=normalize_salary(fields.get("salary")),
        location=fields.get("location"),
        notes=fields.get("notes"),
    )

    try:
        db.add(application)
        await db.commit()
        await db.refresh(application)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to create application: {str(e)}", exc_info=True)
        raise StorageError("Failed to create application") from e

    logger.info(
        f"Application created: {application.id} ({company} / {position}, {status.value})"
    )
    return application


async def update_application(
    db: AsyncSession,
    application_id: Any,
    fields: Dict[str, Any]
) -> Application:
    """
    Merge the supplied fields into an existing application.

    Fields absent from `fields` keep their current values. dateApplied
    and id can never be changed.

    Raises:
        NotFoundError: If no application has this id
        ValidationError: If a supplied field is invalid or immutable
        StorageError: If the update fails
    """
    # A missing record wins over a bad body
    application = await get_application(db, application_id)

    for name in fields:
        if name in IMMUTABLE_FIELDS:
            raise ValidationError(name, f"{name} cannot be changed")
        if name not in UPDATABLE_FIELDS:
            raise ValidationError(name, f"Unknown field {name}")

    # Validate everything before touching the record
    changes: Dict[str, Any] = {}
    for name in REQUIRED_FIELDS:
        if name in fields:
            changes[name] = require_text(fields, name)
    if "status" in fields:
        changes["status"] = parse_status(fields["status"]).value
    if "salary" in fields:
        changes["salary"] = normalize_salary(fields["salary"])
    for name in OPTIONAL_TEXT_FIELDS:
        if name in fields:
            changes[name] = fields[name]

    old_status = application.status

    for name, value in changes.items():
        setattr(application, name, value)
    application.updated_at = datetime.utcnow()

    try:
        await db.commit()
        await db.refresh(application)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to update application {application_id}: {str(e)}", exc_info=True)
        raise StorageError("Failed to update application") from e

    if application.status != old_status:
        logger.info(
            f"Application status transition: {old_status} → {application.status}",
            extra={"application_id": str(application.id)}
        )
    logger.info(f"Application updated: {application.id} (fields: {sorted(changes)})")

    return application


async def delete_application(db: AsyncSession, application_id: Any) -> None:
    """
    Permanently delete an application.

    Raises:
        NotFoundError: If no application has this id
        StorageError: If the delete fails
    """
    application = await get_application(db, application_id)

    try:
        await db.delete(application)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to delete application {application_id}: {str(e)}", exc_info=True)
        raise StorageError("Failed to delete application") from e

    logger.info(f"Application deleted: {application_id}")
