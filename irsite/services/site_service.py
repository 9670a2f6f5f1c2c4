"""Tenant site lookup service."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from irsite.models.company import Company


async def get_site_by_ticker(
    session: AsyncSession,
    ticker: str,
) -> Company | None:
    """Return the company for a ticker (case-insensitive) with everything a render reads.

    Press releases, leaders, theme and template are eager-loaded because an
    async session cannot lazy-load them during rendering.
    """
    stmt = (
        select(Company)
        .where(func.upper(Company.ticker_symbol) == ticker.upper())
        .options(
            selectinload(Company.press_releases),
            selectinload(Company.leaders),
            selectinload(Company.theme),
            selectinload(Company.template),
        )
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
