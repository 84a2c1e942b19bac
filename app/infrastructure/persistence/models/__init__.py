"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.ai_system import AISystem
from app.infrastructure.persistence.models.evidence import Evidence
from app.infrastructure.persistence.models.framework import Framework
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    OrganizationMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.organization import Organization
from app.infrastructure.persistence.models.risk import Risk
from app.infrastructure.persistence.models.risk_assessment import RiskAssessment
from app.infrastructure.persistence.models.user import User

__all__ = [
    "AISystem",
    "Evidence",
    "Framework",
    "Organization",
    "Risk",
    "RiskAssessment",
    "User",
    "CuidMixin",
    "MultiTenantModel",
    "OrganizationMixin",
    "TimestampMixin",
]
