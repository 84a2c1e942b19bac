"""Organization ORM model. Root entity for multi-tenant hierarchy (no organization_id)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Organization(CuidMixin, TimestampMixin, Base):
    """Tenant. Table: organization."""

    __tablename__ = "organization"

    name: Mapped[str] = mapped_column(String, nullable=False)
    slug: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
