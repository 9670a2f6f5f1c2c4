"""Initial schema – themes, templates, companies, press_releases, leaders, cms_entries

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- themes ---
    op.create_table(
        "themes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("colors", postgresql.JSONB, nullable=True),
        sa.Column("typography", postgresql.JSONB, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- templates ---
    op.create_table(
        "templates",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column(
            "template_type",
            sa.String(60),
            nullable=False,
            server_default="capital-markets-hub",
        ),
        sa.Column("config", postgresql.JSONB, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- companies ---
    op.create_table(
        "companies",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("slug", sa.String(120), unique=True, nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("ticker_symbol", sa.String(10), unique=True, nullable=True),
        sa.Column("logo_url", sa.String(500)),
        sa.Column("description", sa.Text),
        sa.Column("website_url", sa.String(500)),
        sa.Column("contact_email", sa.String(255)),
        sa.Column("market_cap", sa.Numeric(20, 2)),
        sa.Column("primary_font_family", sa.String(120)),
        sa.Column("secondary_font_family", sa.String(120)),
        sa.Column(
            "theme_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("themes.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "template_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("templates.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_companies_ticker_symbol", "companies", ["ticker_symbol"])
    op.create_index("ix_companies_slug", "companies", ["slug"])

    # --- press_releases ---
    op.create_table(
        "press_releases",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "company_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("summary", sa.Text),
        sa.Column("url", sa.String(500)),
        sa.Column("published_at", sa.Date, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_press_releases_company_id", "press_releases", ["company_id"])
    op.create_index(
        "ix_press_releases_company_published", "press_releases", ["company_id", "published_at"]
    )

    # --- leaders ---
    op.create_table(
        "leaders",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "company_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text),
        sa.Column("photo_url", sa.String(500)),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("ix_leaders_company_id", "leaders", ["company_id"])

    # --- cms_entries ---
    op.create_table(
        "cms_entries",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "company_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("section", sa.String(50), nullable=False),
        sa.Column("payload", postgresql.JSONB, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("company_id", "section", name="uq_cms_entries_company_section"),
    )
    op.create_index("ix_cms_entries_company_id", "cms_entries", ["company_id"])


def downgrade() -> None:
    op.drop_table("cms_entries")
    op.drop_table("leaders")
    op.drop_table("press_releases")
    op.drop_table("companies")
    op.drop_table("templates")
    op.drop_table("themes")
