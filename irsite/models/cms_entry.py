"""CMS content override ORM model.

Each row overrides one page section of a company's site with a JSON payload
(``hero``, ``metrics``, ``leaders`` or ``contact``).
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from irsite.models.company import Base


class CmsEntry(Base):
    __tablename__ = "cms_entries"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    company_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    section: Mapped[str] = mapped_column(String(50), nullable=False)
    payload: Mapped[Any] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    company = relationship("Company", back_populates="cms_entries")

    __table_args__ = (
        UniqueConstraint("company_id", "section", name="uq_cms_entries_company_section"),
        Index("ix_cms_entries_company_id", "company_id"),
    )

    def __repr__(self) -> str:
        return f"<CmsEntry {self.company_id} {self.section}>"
