"""Capital Markets Hub demo content and its typed merge onto base data."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from irsite.schemas.component_data import KPI, AnalystCoverage, ComponentData


class CapitalMarketsOverrides(BaseModel):
    """The fields a Capital Markets Hub page layers over base data.

    Only these fields are replaced by ``merge_component_data``; everything
    else on the base data is kept as is.
    """

    model_config = ConfigDict(frozen=True)

    aum: str
    kpis: list[KPI]
    analysts: list[AnalystCoverage]


# Placeholder content until a fund-data source exists for AUM, KPIs and
# analyst coverage. Not derived from the company record.
CAPITAL_MARKETS_DEMO = CapitalMarketsOverrides(
    aum="$2.5B",
    kpis=[
        KPI(
            label="AUM",
            gaap_value="$2.5B",
            change="+25%",
            change_percent="25.0",
            period="Q4 2024",
            trend="up",
        ),
        KPI(
            label="Portfolio Companies",
            gaap_value="45",
            change="+8",
            period="Active Investments",
            trend="up",
        ),
        KPI(
            label="IRR",
            gaap_value="18.5%",
            change="+2.5%",
            change_percent="2.5",
            period="Since Inception",
            trend="up",
        ),
    ],
    analysts=[
        AnalystCoverage(
            id="1",
            bank="Goldman Sachs",
            analyst_name="Jane Smith",
            rating="Strong Buy",
            target_price="275",
            date=date(2024, 1, 15),
        ),
        AnalystCoverage(
            id="2",
            bank="Morgan Stanley",
            analyst_name="John Doe",
            rating="Buy",
            target_price="265",
            date=date(2024, 1, 10),
        ),
    ],
)


def merge_component_data(base: ComponentData, overrides: CapitalMarketsOverrides) -> ComponentData:
    """Return a copy of ``base`` with the override fields applied.

    ``metrics.aum`` is replaced and the other metrics kept; ``kpis`` and
    ``analysts`` are replaced wholesale.  ``base`` is not modified.
    """
    metrics = base.metrics.model_copy(update={"aum": overrides.aum})
    return base.model_copy(
        update={
            "metrics": metrics,
            "kpis": [kpi.model_copy() for kpi in overrides.kpis],
            "analysts": [analyst.model_copy() for analyst in overrides.analysts],
        },
        deep=True,
    )
