"""Domain enumerations for the AIRM application.

Enums represent fixed sets of domain values stored as strings in the
database (AI system classification, assessment and risk workflow states,
evidence review states) plus the searchable entity types.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (e.g. for CHECK constraints)."""
        return [member.value for member in cls]


class SearchEntityType(_ValuesMixin, str, Enum):
    """Entity kinds covered by global search. Value is the wire tag."""

    AI_SYSTEM = "ai_system"
    ASSESSMENT = "assessment"
    RISK = "risk"
    EVIDENCE = "evidence"


class AISystemType(_ValuesMixin, str, Enum):
    """Kind of AI system in the inventory."""

    GENAI = "GENAI"
    ML = "ML"
    RPA = "RPA"
    HYBRID = "HYBRID"
    OTHER = "OTHER"


class DataClassification(_ValuesMixin, str, Enum):
    """Sensitivity of data processed by an AI system."""

    PUBLIC = "PUBLIC"
    INTERNAL = "INTERNAL"
    CONFIDENTIAL = "CONFIDENTIAL"
    RESTRICTED = "RESTRICTED"


class LifecycleStatus(_ValuesMixin, str, Enum):
    """Lifecycle stage of an AI system."""

    DEVELOPMENT = "DEVELOPMENT"
    PILOT = "PILOT"
    PRODUCTION = "PRODUCTION"
    DEPRECATED = "DEPRECATED"
    RETIRED = "RETIRED"


class RiskTier(_ValuesMixin, str, Enum):
    """Overall risk tier assigned to an AI system."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class AssessmentStatus(_ValuesMixin, str, Enum):
    """Risk assessment workflow status."""

    DRAFT = "DRAFT"
    IN_PROGRESS = "IN_PROGRESS"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    ARCHIVED = "ARCHIVED"


class RiskCategory(_ValuesMixin, str, Enum):
    """Category of an identified risk."""

    BIAS_FAIRNESS = "BIAS_FAIRNESS"
    PRIVACY = "PRIVACY"
    SECURITY = "SECURITY"
    RELIABILITY = "RELIABILITY"
    TRANSPARENCY = "TRANSPARENCY"
    ACCOUNTABILITY = "ACCOUNTABILITY"
    SAFETY = "SAFETY"
    OTHER = "OTHER"


class TreatmentStatus(_ValuesMixin, str, Enum):
    """Risk treatment progress."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    MITIGATING = "MITIGATING"
    TRANSFERRED = "TRANSFERRED"
    AVOIDED = "AVOIDED"
    COMPLETED = "COMPLETED"


class EvidenceStatus(_ValuesMixin, str, Enum):
    """Evidence review status."""

    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"
