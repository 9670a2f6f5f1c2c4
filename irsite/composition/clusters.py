"""Component clusters – the pre-selected block list for each layout type."""

from __future__ import annotations

from collections.abc import Callable

from irsite.schemas.component import ComponentSpec
from irsite.schemas.component_data import ComponentData

CAPITAL_MARKETS_HUB = "capital-markets-hub"


class ComponentClusters:
    """Registry of layout key → function building that layout's components."""

    @staticmethod
    def capital_markets_hub(data: ComponentData) -> list[ComponentSpec]:
        """Thesis + AUM, KPI strip, portfolio snapshot, research, coverage, team, contact."""
        return [
            ComponentSpec(
                type="hero",
                props={
                    "headline": data.hero.headline,
                    "subheadline": data.hero.subheadline,
                    "aum": data.metrics.aum,
                },
            ),
            ComponentSpec(
                type="kpi_strip",
                props={"kpis": [kpi.model_dump() for kpi in data.kpis]},
            ),
            ComponentSpec(
                type="metrics_grid",
                id="portfolio",
                props={
                    "title": "Portfolio Snapshot",
                    "metrics": [
                        {"label": "Assets Under Management", "value": data.metrics.aum},
                        {"label": "Market Cap", "value": data.metrics.market_cap},
                    ],
                },
            ),
            ComponentSpec(
                type="press_releases",
                id="research",
                props={
                    "title": "Research & Insights",
                    "releases": [pr.model_dump() for pr in data.press_releases],
                },
            ),
            ComponentSpec(
                type="analyst_coverage",
                props={
                    "title": "Analyst Coverage",
                    "ticker_symbol": data.ticker_symbol,
                    "analysts": [analyst.model_dump() for analyst in data.analysts],
                },
            ),
            ComponentSpec(
                type="leadership",
                id="team",
                props={
                    "title": "Investment Team",
                    "leaders": [leader.model_dump() for leader in data.leaders],
                },
            ),
            ComponentSpec(
                type="contact",
                id="contact",
                props={
                    "title": "Investor Relations",
                    "company_name": data.company_name,
                    "email": data.contact.email,
                    "website_url": data.contact.website_url,
                },
            ),
        ]

    @classmethod
    def for_layout(cls, layout_key: str) -> Callable[[ComponentData], list[ComponentSpec]]:
        """Return the cluster builder for a layout key.

        Raises:
            KeyError: if no cluster is registered for ``layout_key``.
        """
        registry = {
            CAPITAL_MARKETS_HUB: cls.capital_markets_hub,
        }
        return registry[layout_key]
