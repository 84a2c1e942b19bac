"""Pytest configuration and fixtures for AIRM search.

Uses app.main:app for HTTP tests. Store and API tests run against a
throwaway SQLite database (aiosqlite) created per test with the ORM
metadata; no Postgres is needed.
"""

import os
from datetime import UTC, datetime, timedelta

# Settings require DATABASE_URL; must be set before app.main is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.api.v1.dependencies import get_db, get_search_session_factory
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models import (
    AISystem,
    Evidence,
    Framework,
    Organization,
    Risk,
    RiskAssessment,
    User,
)
from app.main import app

ORG_A = "org-a"
ORG_B = "org-b"
FRAMEWORK_ID = "fw-nist-ai-rmf"

_BASE_TIME = datetime(2025, 3, 1, 9, 0, 0, tzinfo=UTC)


@pytest.fixture
async def session_factory(tmp_path) -> async_sessionmaker[AsyncSession]:
    """Session factory over a fresh SQLite file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'search.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def seeded(session_factory: async_sessionmaker[AsyncSession]) -> dict[str, str]:
    """Two organizations with overlapping vocabulary.

    ORG_A: AI system "Fraud Detection Model" (description "Detects fraud"),
    one assessment, one risk "Model drift" whose description mentions
    fraud, one evidence file. ORG_B: AI system "Fraud Detector".
    Returns the IDs by role.
    """
    async with session_factory() as session:
        session.add_all(
            [
                Organization(id=ORG_A, name="Acme Bank", slug="acme-bank"),
                Organization(id=ORG_B, name="Globex", slug="globex"),
                Framework(
                    id=FRAMEWORK_ID,
                    name="NIST AI Risk Management Framework",
                    short_name="NIST-AI-RMF",
                    version="1.0",
                ),
            ]
        )
        await session.flush()
        session.add_all(
            [
                User(
                    id="user-a",
                    organization_id=ORG_A,
                    email="auditor@acme.test",
                    name="Ada Auditor",
                ),
                AISystem(
                    id="ais-a",
                    organization_id=ORG_A,
                    name="Fraud Detection Model",
                    description="Detects fraud",
                    purpose=None,
                    system_type="ML",
                    lifecycle_status="PRODUCTION",
                    risk_tier="HIGH",
                    created_at=_BASE_TIME,
                ),
                AISystem(
                    id="ais-b",
                    organization_id=ORG_B,
                    name="Fraud Detector",
                    description="Flags fraud in card payments",
                    system_type="ML",
                    lifecycle_status="PILOT",
                    risk_tier="MEDIUM",
                    created_at=_BASE_TIME,
                ),
            ]
        )
        await session.flush()
        session.add(
            RiskAssessment(
                id="asm-a",
                organization_id=ORG_A,
                title="Quarterly model review",
                description="Review of credit scoring controls",
                status="IN_PROGRESS",
                assessment_date=_BASE_TIME + timedelta(days=1),
                ai_system_id="ais-a",
                framework_id=FRAMEWORK_ID,
            )
        )
        await session.flush()
        session.add_all(
            [
                Risk(
                    id="risk-a",
                    assessment_id="asm-a",
                    title="Model drift",
                    description="Fraud patterns change",
                    category="RELIABILITY",
                    likelihood=3,
                    impact=4,
                    inherent_score=12,
                    control_effectiveness=50,
                    residual_score=6.0,
                    treatment_status="MITIGATING",
                    treatment_plan=None,
                ),
                Evidence(
                    id="ev-a",
                    organization_id=ORG_A,
                    filename="a1b2c3.pdf",
                    original_name="Model card.pdf",
                    mime_type="application/pdf",
                    file_size=48213,
                    storage_path="evidence/org-a/a1b2c3.pdf",
                    hash_sha256="0" * 64,
                    description="Model card for the credit scorer",
                    review_status="APPROVED",
                    uploaded_by_id="user-a",
                    created_at=_BASE_TIME,
                ),
            ]
        )
        await session.commit()
    return {
        "org_a": ORG_A,
        "org_b": ORG_B,
        "ai_system_a": "ais-a",
        "ai_system_b": "ais-b",
        "assessment_a": "asm-a",
        "risk_a": "risk-a",
        "evidence_a": "ev-a",
        "framework": FRAMEWORK_ID,
    }


@pytest.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), wired to the SQLite database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_search_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
