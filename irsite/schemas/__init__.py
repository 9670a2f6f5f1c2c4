"""Pydantic schemas."""

from irsite.schemas.component import ComponentSpec
from irsite.schemas.component_data import (
    KPI,
    AnalystCoverage,
    ComponentData,
    Contact,
    Hero,
    LeaderItem,
    Metrics,
    PressReleaseItem,
)
from irsite.schemas.theme import ThemeColors, ThemeConfig, ThemeTokens, ThemeTypography

__all__ = [
    "ComponentSpec",
    "KPI",
    "AnalystCoverage",
    "ComponentData",
    "Contact",
    "Hero",
    "LeaderItem",
    "Metrics",
    "PressReleaseItem",
    "ThemeColors",
    "ThemeConfig",
    "ThemeTokens",
    "ThemeTypography",
]
