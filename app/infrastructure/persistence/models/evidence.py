"""Evidence ORM model. Uploaded file metadata (content lives in object storage)."""

from sqlalchemy import BigInteger, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import EvidenceStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import MultiTenantModel, enum_check


class Evidence(MultiTenantModel, Base):
    """Evidence entity. Table: evidence."""

    __tablename__ = "evidence"

    filename: Mapped[str] = mapped_column(String, nullable=False)
    original_name: Mapped[str] = mapped_column(String, nullable=False)
    mime_type: Mapped[str] = mapped_column(String, nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    storage_path: Mapped[str] = mapped_column(String, nullable=False)
    hash_sha256: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    review_status: Mapped[str] = mapped_column(
        String, nullable=False, default=EvidenceStatus.SUBMITTED.value
    )
    uploaded_by_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        Index("ix_evidence_organization_status", "organization_id", "review_status"),
        enum_check("review_status", EvidenceStatus.values(), "evidence_review_status_check"),
    )
