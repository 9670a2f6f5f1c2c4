"""Component data Pydantic schemas – the per-render data handed to clusters."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

Trend = Literal["up", "down", "flat"]
RatingTier = Literal["Strong Buy", "Buy", "Hold", "Sell", "Strong Sell"]


class Hero(BaseModel):
    headline: str
    subheadline: str | None = None


class Metrics(BaseModel):
    """Headline metrics shown in the hero and metrics grid."""

    market_cap: str | None = None
    aum: str | None = None


class KPI(BaseModel):
    """Single entry of the KPI strip."""

    label: str
    gaap_value: str
    change: str
    change_percent: str | None = None
    period: str
    trend: Trend


class AnalystCoverage(BaseModel):
    """Single sell-side analyst rating."""

    id: str
    bank: str
    analyst_name: str
    rating: RatingTier
    target_price: str
    date: date


class LeaderItem(BaseModel):
    name: str
    title: str
    bio: str | None = None
    photo_url: str | None = None


class PressReleaseItem(BaseModel):
    title: str
    summary: str | None = None
    url: str | None = None
    published_at: date


class Contact(BaseModel):
    email: str | None = None
    website_url: str | None = None


class ComponentData(BaseModel):
    """Everything the component clusters need to build a page."""

    company_name: str
    ticker_symbol: str | None = None
    hero: Hero
    metrics: Metrics = Field(default_factory=Metrics)
    kpis: list[KPI] = Field(default_factory=list)
    analysts: list[AnalystCoverage] = Field(default_factory=list)
    leaders: list[LeaderItem] = Field(default_factory=list)
    press_releases: list[PressReleaseItem] = Field(default_factory=list)
    contact: Contact = Field(default_factory=Contact)
