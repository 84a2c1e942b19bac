"""Seed two demo organizations with overlapping vocabulary for search checks.

"Acme Bank" and "Globex" both own an AI system whose name contains "fraud",
so searching "fraud" with either X-Organization-ID shows tenant isolation.
Re-running is safe: organizations that already exist (by slug) are skipped.

Usage:
    uv run python -m scripts.seed_demo_data [--create-tables]

Requires: DATABASE_URL. --create-tables runs Base.metadata.create_all first.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import (
    Base,
    dispose_engine,
    get_engine,
    get_session_factory,
)
from app.infrastructure.persistence.models import (
    AISystem,
    Evidence,
    Framework,
    Organization,
    Risk,
    RiskAssessment,
    User,
)

logger = logging.getLogger("scripts.seed_demo_data")

DEMO_ORGANIZATIONS = [
    {
        "name": "Acme Bank",
        "slug": "acme-bank",
        "user": ("risk.officer@acme.test", "Riley Officer"),
        "ai_system": {
            "name": "Fraud Detection Model",
            "description": "Detects fraud in card and wire transactions",
            "purpose": "Flag suspicious payments for analyst review",
            "system_type": "ML",
            "lifecycle_status": "PRODUCTION",
            "risk_tier": "HIGH",
        },
        "assessment": ("2025 Q1 fraud model assessment", "Annual review of the fraud model"),
        "risk": {
            "title": "Model drift",
            "description": "Fraud patterns change faster than retraining cycles",
            "category": "RELIABILITY",
            "likelihood": 4,
            "impact": 4,
            "control_effectiveness": 50,
            "treatment_status": "MITIGATING",
            "treatment_plan": "Monthly retraining with drift monitoring",
        },
        "evidence": ("Model card - fraud detection.pdf", "application/pdf"),
    },
    {
        "name": "Globex",
        "slug": "globex",
        "user": ("compliance@globex.test", "Casey Compliance"),
        "ai_system": {
            "name": "Fraud Detector",
            "description": "Scores insurance claims for fraud indicators",
            "purpose": None,
            "system_type": "HYBRID",
            "lifecycle_status": "PILOT",
            "risk_tier": "MEDIUM",
        },
        "assessment": ("Claims scoring bias review", "Fairness review across regions"),
        "risk": {
            "title": "Biased claim scoring",
            "description": "Historic data under-represents rural policyholders",
            "category": "BIAS_FAIRNESS",
            "likelihood": 3,
            "impact": 5,
            "control_effectiveness": 25,
            "treatment_status": "PENDING",
            "treatment_plan": None,
        },
        "evidence": ("Bias test results.xlsx", "application/vnd.ms-excel"),
    },
]

FRAMEWORK = {
    "name": "NIST AI Risk Management Framework",
    "short_name": "NIST-AI-RMF",
    "version": "1.0",
    "description": "Govern, Map, Measure, Manage",
}


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _get_or_create_framework(session: AsyncSession) -> str:
    existing = await session.scalar(
        select(Framework.id).where(Framework.short_name == FRAMEWORK["short_name"])
    )
    if existing:
        return existing
    framework = Framework(**FRAMEWORK)
    session.add(framework)
    await session.flush()
    return framework.id


async def _seed_organization(
    session: AsyncSession, spec: dict, framework_id: str
) -> None:
    if await session.scalar(
        select(Organization.id).where(Organization.slug == spec["slug"])
    ):
        logger.info("Organization %s exists, skipping", spec["slug"])
        return

    organization = Organization(name=spec["name"], slug=spec["slug"])
    session.add(organization)
    await session.flush()

    email, name = spec["user"]
    user = User(organization_id=organization.id, email=email, name=name)
    ai_system = AISystem(organization_id=organization.id, **spec["ai_system"])
    session.add_all([user, ai_system])
    await session.flush()

    title, description = spec["assessment"]
    assessment = RiskAssessment(
        organization_id=organization.id,
        title=title,
        description=description,
        status="IN_PROGRESS",
        assessment_date=datetime.now(UTC),
        ai_system_id=ai_system.id,
        framework_id=framework_id,
        created_by_id=user.id,
    )
    session.add(assessment)
    await session.flush()

    risk_spec = dict(spec["risk"])
    inherent = risk_spec["likelihood"] * risk_spec["impact"]
    residual = inherent * (1 - risk_spec["control_effectiveness"] / 100)
    original_name, mime_type = spec["evidence"]
    session.add_all(
        [
            Risk(
                assessment_id=assessment.id,
                inherent_score=inherent,
                residual_score=residual,
                **risk_spec,
            ),
            Evidence(
                organization_id=organization.id,
                filename=f"{organization.slug}-{len(original_name)}.bin",
                original_name=original_name,
                mime_type=mime_type,
                file_size=20480,
                storage_path=f"evidence/{organization.id}/{original_name}",
                hash_sha256="0" * 64,
                description=f"Evidence for {ai_system.name}",
                review_status="SUBMITTED",
                uploaded_by_id=user.id,
            ),
        ]
    )
    logger.info("Seeded organization %s (id=%s)", spec["slug"], organization.id)


async def main(create_tables: bool) -> None:
    if create_tables:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    session_factory = get_session_factory()
    try:
        async with session_factory() as session:
            async with session.begin():
                framework_id = await _get_or_create_framework(session)
                for spec in DEMO_ORGANIZATIONS:
                    await _seed_organization(session, spec, framework_id)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    _load_env()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(main(create_tables="--create-tables" in sys.argv[1:]))
