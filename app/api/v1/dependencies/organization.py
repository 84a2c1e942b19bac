"""Organization (tenant) dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.organization_validation import is_valid_organization_id_format
from app.domain.exceptions import OrganizationNotFoundException, ValidationException
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import OrganizationRepository
from app.shared.context import set_organization_id


async def get_organization_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrganizationRepository:
    """Organization repository for read operations."""
    return OrganizationRepository(db)


async def get_organization_id(
    request: Request,
    organization_repo: Annotated[
        OrganizationRepository, Depends(get_organization_repo)
    ],
) -> str:
    """Resolve the organization ID from the header and check it exists.

    Raises:
        ValidationException: Header missing or malformed.
        OrganizationNotFoundException: No such organization.
    """
    name = get_settings().organization_header_name
    value = request.headers.get(name)
    if not value:
        raise ValidationException(f"Missing required header: {name}", field=name)
    if not is_valid_organization_id_format(value):
        raise ValidationException(
            "Invalid organization ID format (use alphanumeric, hyphen, underscore; max 64 characters)",
            field=name,
        )
    if await organization_repo.get_by_id(value) is None:
        raise OrganizationNotFoundException(value)
    set_organization_id(value)
    return value
