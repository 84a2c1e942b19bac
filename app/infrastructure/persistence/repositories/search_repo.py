"""Search record store: tenant-scoped substring lookups behind global search.

Each find_* runs one SELECT on its own session (the aggregator calls them
concurrently), matches the query case-insensitively and literally across
the entity's searched columns, applies the typed filters, and returns at
most limit read-model records. Scoring happens in the application layer.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.search import (
    AISystemFilters,
    AISystemRecord,
    AssessmentFilters,
    AssessmentRecord,
    EvidenceFilters,
    EvidenceRecord,
    RiskFilters,
    RiskRecord,
)
from app.infrastructure.persistence.models import (
    AISystem,
    Evidence,
    Framework,
    Risk,
    RiskAssessment,
    User,
)
from app.shared.utils.datetime import ensure_utc


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards % and _ (and the escape char) so value is literal."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _matches_any(query: str, *columns: Any) -> ColumnElement[bool]:
    """OR of case-insensitive substring matches of query against columns."""
    pattern = f"%{_escape_like(query)}%"
    return or_(*(column.ilike(pattern, escape="\\") for column in columns))


class SqlSearchRecordStore:
    """ISearchRecordStore over SQLAlchemy. Opens one session per lookup."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def _fetch(self, stmt: Select[Any]) -> list[Any]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.mappings().all())

    async def find_ai_systems(
        self,
        organization_id: str,
        query: str,
        filters: AISystemFilters,
        limit: int,
    ) -> list[AISystemRecord]:
        stmt = select(
            AISystem.id,
            AISystem.organization_id,
            AISystem.name,
            AISystem.description,
            AISystem.purpose,
            AISystem.system_type,
            AISystem.lifecycle_status,
            AISystem.risk_tier,
            AISystem.created_at,
        ).where(
            AISystem.organization_id == organization_id,
            _matches_any(query, AISystem.name, AISystem.description, AISystem.purpose),
        )
        if filters.system_type is not None:
            stmt = stmt.where(AISystem.system_type == filters.system_type.value)
        if filters.lifecycle_status is not None:
            stmt = stmt.where(AISystem.lifecycle_status == filters.lifecycle_status.value)
        if filters.risk_tier is not None:
            stmt = stmt.where(AISystem.risk_tier == filters.risk_tier.value)
        stmt = stmt.order_by(AISystem.created_at.desc(), AISystem.id).limit(limit)

        rows = await self._fetch(stmt)
        return [
            AISystemRecord(
                id=row["id"],
                organization_id=row["organization_id"],
                name=row["name"],
                description=row["description"],
                purpose=row["purpose"],
                system_type=row["system_type"],
                lifecycle_status=row["lifecycle_status"],
                risk_tier=row["risk_tier"],
                created_at=ensure_utc(row["created_at"]),
            )
            for row in rows
        ]

    async def find_assessments(
        self,
        organization_id: str,
        query: str,
        filters: AssessmentFilters,
        limit: int,
    ) -> list[AssessmentRecord]:
        stmt = (
            select(
                RiskAssessment.id,
                RiskAssessment.organization_id,
                RiskAssessment.title,
                RiskAssessment.description,
                RiskAssessment.status,
                RiskAssessment.assessment_date,
                AISystem.name.label("ai_system_name"),
                Framework.name.label("framework_name"),
            )
            .join(AISystem, AISystem.id == RiskAssessment.ai_system_id)
            .join(Framework, Framework.id == RiskAssessment.framework_id)
            .where(
                RiskAssessment.organization_id == organization_id,
                _matches_any(query, RiskAssessment.title, RiskAssessment.description),
            )
        )
        if filters.status is not None:
            stmt = stmt.where(RiskAssessment.status == filters.status.value)
        if filters.framework_id is not None:
            stmt = stmt.where(RiskAssessment.framework_id == filters.framework_id)
        stmt = stmt.order_by(
            RiskAssessment.assessment_date.desc(), RiskAssessment.id
        ).limit(limit)

        rows = await self._fetch(stmt)
        return [
            AssessmentRecord(
                id=row["id"],
                organization_id=row["organization_id"],
                title=row["title"],
                description=row["description"],
                status=row["status"],
                assessment_date=ensure_utc(row["assessment_date"]),
                ai_system_name=row["ai_system_name"],
                framework_name=row["framework_name"],
            )
            for row in rows
        ]

    async def find_risks(
        self,
        organization_id: str,
        query: str,
        filters: RiskFilters,
        limit: int,
    ) -> list[RiskRecord]:
        # Risk has no organization_id; scope through the owning assessment.
        stmt = (
            select(
                Risk.id,
                RiskAssessment.organization_id,
                Risk.title,
                Risk.description,
                Risk.treatment_plan,
                Risk.category,
                Risk.residual_score,
                Risk.treatment_status,
                RiskAssessment.title.label("assessment_title"),
                AISystem.name.label("ai_system_name"),
            )
            .join(RiskAssessment, RiskAssessment.id == Risk.assessment_id)
            .join(AISystem, AISystem.id == RiskAssessment.ai_system_id)
            .where(
                RiskAssessment.organization_id == organization_id,
                _matches_any(query, Risk.title, Risk.description, Risk.treatment_plan),
            )
        )
        if filters.category is not None:
            stmt = stmt.where(Risk.category == filters.category.value)
        if filters.treatment_status is not None:
            stmt = stmt.where(Risk.treatment_status == filters.treatment_status.value)
        if filters.min_residual_score is not None:
            stmt = stmt.where(Risk.residual_score >= filters.min_residual_score)
        stmt = stmt.order_by(Risk.residual_score.desc(), Risk.id).limit(limit)

        rows = await self._fetch(stmt)
        return [
            RiskRecord(
                id=row["id"],
                organization_id=row["organization_id"],
                title=row["title"],
                description=row["description"],
                treatment_plan=row["treatment_plan"],
                category=row["category"],
                residual_score=float(row["residual_score"]),
                treatment_status=row["treatment_status"],
                assessment_title=row["assessment_title"],
                ai_system_name=row["ai_system_name"],
            )
            for row in rows
        ]

    async def find_evidence(
        self,
        organization_id: str,
        query: str,
        filters: EvidenceFilters,
        limit: int,
    ) -> list[EvidenceRecord]:
        stmt = (
            select(
                Evidence.id,
                Evidence.organization_id,
                Evidence.filename,
                Evidence.original_name,
                Evidence.description,
                Evidence.mime_type,
                Evidence.file_size,
                Evidence.review_status,
                func.coalesce(User.name, User.email).label("uploaded_by"),
                Evidence.created_at,
            )
            .outerjoin(User, User.id == Evidence.uploaded_by_id)
            .where(
                Evidence.organization_id == organization_id,
                _matches_any(
                    query, Evidence.filename, Evidence.original_name, Evidence.description
                ),
            )
        )
        if filters.review_status is not None:
            stmt = stmt.where(Evidence.review_status == filters.review_status.value)
        if filters.mime_type is not None:
            stmt = stmt.where(
                Evidence.mime_type.like(
                    f"%{_escape_like(filters.mime_type)}%", escape="\\"
                )
            )
        stmt = stmt.order_by(Evidence.created_at.desc(), Evidence.id).limit(limit)

        rows = await self._fetch(stmt)
        return [
            EvidenceRecord(
                id=row["id"],
                organization_id=row["organization_id"],
                filename=row["filename"],
                original_name=row["original_name"],
                description=row["description"],
                mime_type=row["mime_type"],
                file_size=int(row["file_size"]),
                review_status=row["review_status"],
                uploaded_by=row["uploaded_by"],
                created_at=ensure_utc(row["created_at"]),
            )
            for row in rows
        ]
