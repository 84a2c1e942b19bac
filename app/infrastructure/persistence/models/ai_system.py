"""AI system ORM model. Inventory entry searched by name, description, purpose."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import (
    AISystemType,
    DataClassification,
    LifecycleStatus,
    RiskTier,
)
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import MultiTenantModel, enum_check


class AISystem(MultiTenantModel, Base):
    """AI system entity. Table: ai_system."""

    __tablename__ = "ai_system"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    purpose: Mapped[str | None] = mapped_column(Text, nullable=True)
    system_type: Mapped[str] = mapped_column(String, nullable=False)
    data_classification: Mapped[str] = mapped_column(
        String, nullable=False, default=DataClassification.INTERNAL.value
    )
    lifecycle_status: Mapped[str] = mapped_column(
        String, nullable=False, default=LifecycleStatus.DEVELOPMENT.value
    )
    risk_tier: Mapped[str | None] = mapped_column(String, nullable=True)
    owner_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        Index("ix_ai_system_organization_status", "organization_id", "lifecycle_status"),
        enum_check("system_type", AISystemType.values(), "ai_system_type_check"),
        enum_check(
            "data_classification",
            DataClassification.values(),
            "ai_system_data_classification_check",
        ),
        enum_check(
            "lifecycle_status", LifecycleStatus.values(), "ai_system_lifecycle_check"
        ),
        enum_check("risk_tier", RiskTier.values(), "ai_system_risk_tier_check"),
    )
