"""Risk assessment ORM model. An assessment of one AI system against one framework."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import AssessmentStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import MultiTenantModel, enum_check


class RiskAssessment(MultiTenantModel, Base):
    """Risk assessment entity. Table: risk_assessment."""

    __tablename__ = "risk_assessment"

    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=AssessmentStatus.DRAFT.value
    )
    assessment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    ai_system_id: Mapped[str] = mapped_column(
        String, ForeignKey("ai_system.id", ondelete="CASCADE"), nullable=False, index=True
    )
    framework_id: Mapped[str] = mapped_column(
        String, ForeignKey("framework.id"), nullable=False, index=True
    )
    created_by_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        Index("ix_risk_assessment_organization_status", "organization_id", "status"),
        enum_check("status", AssessmentStatus.values(), "risk_assessment_status_check"),
    )
