"""User ORM model (organization-scoped). Only name/email are read by search."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import MultiTenantModel


class User(MultiTenantModel, Base):
    """User model. Table: app_user. Unique (organization_id, email)."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        UniqueConstraint("organization_id", "email", name="uq_organization_email"),
    )
