"""Risk ORM model. Belongs to an assessment; has no organization_id of its own.

Tenant scope is the owning assessment's organization_id.
"""

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import RiskCategory, TreatmentStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampMixin,
    enum_check,
)


class Risk(CuidMixin, TimestampMixin, Base):
    """Identified risk. Table: risk. Scores: likelihood x impact, reduced by controls."""

    __tablename__ = "risk"

    assessment_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("risk_assessment.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String, nullable=False)
    likelihood: Mapped[int] = mapped_column(Integer, nullable=False)
    impact: Mapped[int] = mapped_column(Integer, nullable=False)
    inherent_score: Mapped[int] = mapped_column(Integer, nullable=False)
    control_effectiveness: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    residual_score: Mapped[float] = mapped_column(Float, nullable=False)
    treatment_status: Mapped[str] = mapped_column(
        String, nullable=False, default=TreatmentStatus.PENDING.value
    )
    treatment_plan: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        enum_check("category", RiskCategory.values(), "risk_category_check"),
        enum_check(
            "treatment_status", TreatmentStatus.values(), "risk_treatment_status_check"
        ),
    )
