"""Base component data for a company site, with optional CMS overrides."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from irsite.models.cms_entry import CmsEntry
from irsite.models.company import Company
from irsite.schemas.component_data import (
    ComponentData,
    Contact,
    Hero,
    LeaderItem,
    Metrics,
    PressReleaseItem,
)
from irsite.services.formatting import format_compact_currency

logger = logging.getLogger("irsite.services.component_data")


def _loaded_collection(company: Company, attr: str) -> list:
    """Return a relationship collection only if it is already loaded.

    Async sessions cannot lazy-load, so callers are expected to eager-load
    (see ``site_service.get_site_by_ticker``); anything else counts as empty.
    """
    state = inspect(company, raiseerr=False)
    if state is not None and attr in state.unloaded:
        return []
    return list(getattr(company, attr, None) or [])


def _overlay(model: Any, payload: dict) -> Any:
    return type(model).model_validate({**model.model_dump(), **payload})


def _apply_hero(data: ComponentData, payload: Any) -> ComponentData:
    return data.model_copy(update={"hero": _overlay(data.hero, payload)})


def _apply_metrics(data: ComponentData, payload: Any) -> ComponentData:
    return data.model_copy(update={"metrics": _overlay(data.metrics, payload)})


def _apply_contact(data: ComponentData, payload: Any) -> ComponentData:
    return data.model_copy(update={"contact": _overlay(data.contact, payload)})


def _apply_leaders(data: ComponentData, payload: Any) -> ComponentData:
    leaders = [LeaderItem.model_validate(item) for item in payload]
    return data.model_copy(update={"leaders": leaders})


CMS_SECTIONS: dict[str, Callable[[ComponentData, Any], ComponentData]] = {
    "hero": _apply_hero,
    "metrics": _apply_metrics,
    "leaders": _apply_leaders,
    "contact": _apply_contact,
}


def build_base_data(company: Company) -> ComponentData:
    """Shape the company record into component data, without CMS content."""
    press_releases = sorted(
        _loaded_collection(company, "press_releases"),
        key=lambda pr: pr.published_at,
        reverse=True,
    )
    leaders = sorted(_loaded_collection(company, "leaders"), key=lambda ld: ld.sort_order or 0)

    return ComponentData(
        company_name=company.name,
        ticker_symbol=company.ticker_symbol,
        hero=Hero(headline=company.name, subheadline=company.description),
        metrics=Metrics(market_cap=format_compact_currency(company.market_cap)),
        press_releases=[
            PressReleaseItem(
                title=pr.title,
                summary=pr.summary,
                url=pr.url,
                published_at=pr.published_at,
            )
            for pr in press_releases
        ],
        leaders=[
            LeaderItem(name=ld.name, title=ld.title, bio=ld.bio, photo_url=ld.photo_url)
            for ld in leaders
        ],
        contact=Contact(email=company.contact_email, website_url=company.website_url),
    )


async def load_cms_entries(session: AsyncSession, company: Company) -> list[CmsEntry]:
    """Return the company's CMS entries ordered by section."""
    stmt = (
        select(CmsEntry)
        .where(CmsEntry.company_id == company.id)
        .order_by(CmsEntry.section)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


def apply_cms_entries(data: ComponentData, entries: list[CmsEntry]) -> ComponentData:
    """Overlay each supported CMS section on ``data``; unknown sections are skipped."""
    for entry in entries:
        apply = CMS_SECTIONS.get(entry.section)
        if apply is None:
            logger.warning("Ignoring unknown CMS section %r for company %s", entry.section, entry.company_id)
            continue
        data = apply(data, entry.payload)
    return data


async def prepare_component_data(
    company: Company,
    use_cms: bool,
    session: AsyncSession | None = None,
) -> ComponentData:
    """Build the base presentational data for ``company``.

    Args:
        company: Company row; ``press_releases`` / ``leaders`` are read only
            when already loaded.
        use_cms: Overlay stored CMS entries on top of the record.
        session: Async DB session used to read CMS entries.  Without one
            the CMS step is skipped.
    """
    data = build_base_data(company)
    if not use_cms:
        return data
    if session is None:
        logger.debug("No session for %s – skipping CMS overrides", company.name)
        return data

    entries = await load_cms_entries(session, company)
    logger.debug("Applying %d CMS entries for %s", len(entries), company.name)
    return apply_cms_entries(data, entries)
