"""Company ORM model – one tenant site per company."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Shared declarative base for all models."""

    pass


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    slug: Mapped[str | None] = mapped_column(String(120), unique=True, nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    ticker_symbol: Mapped[str | None] = mapped_column(String(10), unique=True, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    market_cap: Mapped[float | None] = mapped_column(Numeric(20, 2), nullable=True)

    # Brand fonts, used when the theme leaves typography unset
    primary_font_family: Mapped[str | None] = mapped_column(String(120), nullable=True)
    secondary_font_family: Mapped[str | None] = mapped_column(String(120), nullable=True)

    theme_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("themes.id", ondelete="SET NULL"), nullable=True
    )
    template_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("templates.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    # Relationships – lazy="select" so related rows are only loaded when
    # requested via selectinload(); async sessions cannot lazy-load.
    press_releases = relationship("PressRelease", back_populates="company", lazy="select")
    leaders = relationship("Leader", back_populates="company", lazy="select")
    cms_entries = relationship("CmsEntry", back_populates="company", lazy="select")
    theme = relationship("Theme", lazy="select")
    template = relationship("Template", lazy="select")

    __table_args__ = (
        Index("ix_companies_ticker_symbol", "ticker_symbol"),
        Index("ix_companies_slug", "slug"),
    )

    def __repr__(self) -> str:
        return f"<Company {self.ticker_symbol or '-'} – {self.name}>"
