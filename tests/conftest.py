"""Shared pytest fixtures – uses async SQLite for fast in-memory tests."""

from __future__ import annotations

import uuid
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from irsite.models import Base, CmsEntry, Company, Leader, PressRelease, Template, Theme

ACME_ID = uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
PLAIN_ID = uuid.UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb")


@pytest_asyncio.fixture
async def engine():
    """Create an async in-memory SQLite engine shared by every session of a test."""
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded_session(session_factory):
    """Session pre-loaded with two tenant sites.

    ACM – Acme Capital: themed, logo, press releases, leaders, CMS overrides.
    PLN – Plain Holdings: no theme, no logo, no content.
    """
    async with session_factory() as sess:
        theme = Theme(
            id=uuid.uuid4(),
            name="Harbour Blue",
            colors={"primary": "#0B2545", "accent": "#8DA9C4"},
            typography={"primaryFont": "Inter"},
        )
        template = Template(
            id=uuid.uuid4(),
            name="Capital Markets Hub",
            template_type="capital-markets-hub",
            config={"hiddenComponents": []},
        )
        sess.add_all([theme, template])
        await sess.flush()

        acme = Company(
            id=ACME_ID,
            slug="acme-capital",
            name="Acme Capital",
            ticker_symbol="ACM",
            logo_url="https://logo.example.com/acm.png",
            description="Long-horizon private capital.",
            website_url="https://acme.example.com",
            contact_email="ir@acme.example.com",
            market_cap=1_250_000_000,
            theme_id=theme.id,
            template_id=template.id,
        )
        plain = Company(id=PLAIN_ID, name="Plain Holdings", ticker_symbol="PLN")
        sess.add_all([acme, plain])
        await sess.flush()

        sess.add_all(
            [
                PressRelease(
                    company_id=ACME_ID,
                    title="Acme closes Fund IV",
                    summary="Fund IV closed above target.",
                    published_at=date(2024, 3, 1),
                ),
                PressRelease(
                    company_id=ACME_ID,
                    title="Acme opens London office",
                    url="https://acme.example.com/news/london",
                    published_at=date(2024, 6, 1),
                ),
                Leader(company_id=ACME_ID, name="Dana Reyes", title="CIO", sort_order=1),
                Leader(company_id=ACME_ID, name="Sam Ortiz", title="Managing Partner", sort_order=0),
                CmsEntry(
                    company_id=ACME_ID,
                    section="hero",
                    payload={"headline": "Patient capital for durable businesses"},
                ),
                CmsEntry(
                    company_id=ACME_ID,
                    section="footer",
                    payload={"text": "unused"},
                ),
            ]
        )
        await sess.commit()

    # Fresh session so reads go through the database, not the identity map
    async with session_factory() as fresh:
        yield fresh
