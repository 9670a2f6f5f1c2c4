"""Tests for the Capital Markets Hub layout renderer."""

from __future__ import annotations

import logging
import re

import pytest
from bs4 import BeautifulSoup

from irsite.layouts import LAYOUTS, CapitalMarketsHubLayout, render_capital_markets_hub
from irsite.models import Company, Theme
from irsite.services.site_service import get_site_by_ticker


def _soup(markup) -> BeautifulSoup:
    return BeautifulSoup(str(markup), "html.parser")


async def _render(company, template=None, theme=None, **kwargs) -> BeautifulSoup:
    return _soup(await render_capital_markets_hub(company, template, theme, **kwargs))


@pytest.mark.asyncio
async def test_acme_example_without_theme():
    """Acme without a theme renders the default colours and badge."""
    soup = await _render(Company(name="Acme Capital", ticker_symbol="ACM"))
    root = soup.find("div", class_="capital-markets-hub")
    assert "ir-site" in root["class"]
    assert "background-color: #0F0F0F" in root["style"]
    assert "color: #FFFFFF" in root["style"]
    assert "font-family: IBM Plex Sans" in root["style"]
    assert "min-height: 100vh" in root["style"]

    header = soup.find("header")
    assert header.find("h1").get_text() == "Acme Capital"
    assert header.find("span", class_="ticker-badge").get_text() == "ACM"


@pytest.mark.asyncio
async def test_css_custom_properties_are_emitted():
    """The style element defines all six custom properties."""
    soup = await _render(Company(name="Acme Capital"))
    css = soup.find("style").get_text()
    for line in [
        "--primary-color: #0A0A0A;",
        "--accent-color: #F5C55A;",
        "--background-color: #0F0F0F;",
        "--text-color: #FFFFFF;",
        "--primary-font: IBM Plex Sans;",
        "--secondary-font: IBM Plex Sans;",
    ]:
        assert line in css


@pytest.mark.asyncio
async def test_theme_tokens_flow_into_markup():
    """Theme colours and fonts reach the root and header."""
    theme = Theme(
        name="Harbour",
        colors={"accent": "#8DA9C4", "background": "#F7F9FB", "text": "#13315C"},
        typography={"primaryFont": "Inter"},
    )
    soup = await _render(Company(name="Acme Capital", ticker_symbol="ACM"), theme=theme)
    root = soup.find("div", class_="capital-markets-hub")
    assert "background-color: #F7F9FB" in root["style"]
    assert "font-family: Inter" in root["style"]
    assert "color: #8DA9C4" in soup.find("h1")["style"]
    assert "background-color: #8DA9C430" in soup.find("span", class_="ticker-badge")["style"]
    assert "--primary-color: #0A0A0A;" in soup.find("style").get_text()


@pytest.mark.asyncio
async def test_logo_rendered_only_when_present():
    """The logo image appears only when a URL is set."""
    with_logo = await _render(Company(name="Acme Capital", logo_url="https://logo.example.com/acm.png"))
    img = with_logo.find("header").find("img")
    assert img["src"] == "https://logo.example.com/acm.png"
    assert img["alt"] == "Acme Capital Logo"

    without_logo = await _render(Company(name="Acme Capital"))
    assert without_logo.find("header").find("img") is None
    assert without_logo.find("h1").get_text() == "Acme Capital"


@pytest.mark.asyncio
async def test_ticker_badge_absent_without_ticker():
    """No ticker means no badge."""
    soup = await _render(Company(name="Acme Capital"))
    assert soup.find("span", class_="ticker-badge") is None


@pytest.mark.asyncio
async def test_navigation_has_four_fixed_links():
    """Navigation has the four fixed links in order."""
    soup = await _render(Company(name="Acme Capital"))
    links = soup.find("nav").find_all("a")
    assert [a["href"] for a in links] == ["#portfolio", "#research", "#team", "#contact"]
    assert [a.get_text() for a in links] == ["Portfolio", "Research", "Team", "Contact"]


@pytest.mark.asyncio
async def test_kpis_and_analysts_are_fixed_regardless_of_company():
    """KPI and analyst blocks are the same for every company."""
    for company in [
        Company(name="Acme Capital", ticker_symbol="ACM", market_cap=10),
        Company(name="Other Partners", description="Different"),
    ]:
        soup = await _render(company)
        kpis = soup.find_all("li", class_="ir-kpi")
        assert [k.find(class_="ir-kpi-label").get_text() for k in kpis] == [
            "AUM",
            "Portfolio Companies",
            "IRR",
        ]
        analysts = soup.find_all("tr", class_="ir-analyst")
        assert [r.find("td").get_text() for r in analysts] == ["Goldman Sachs", "Morgan Stanley"]
        assert soup.find(class_="ir-hero-aum").find("strong").get_text() == "$2.5B"


@pytest.mark.asyncio
async def test_anchor_sections_exist_for_nav():
    """Each nav link targets a rendered section."""
    soup = await _render(Company(name="Acme Capital"))
    for anchor in ["portfolio", "research", "team", "contact"]:
        assert soup.find(id=anchor) is not None


@pytest.mark.asyncio
async def test_company_name_is_escaped():
    """The company name is HTML-escaped."""
    soup = await _render(Company(name="<b>Acme</b>"))
    assert soup.find("h1").get_text() == "<b>Acme</b>"
    assert soup.find("h1").find("b") is None


@pytest.mark.asyncio
async def test_render_with_session_applies_cms(seeded_session):
    """Rendering with a session applies CMS overrides."""
    company = await get_site_by_ticker(seeded_session, "ACM")
    layout = CapitalMarketsHubLayout(session=seeded_session)
    soup = _soup(await layout.render(company, company.template, company.theme))
    assert soup.find("section", class_="ir-hero").find("h2").get_text() == (
        "Patient capital for durable businesses"
    )
    assert "font-family: Inter" in soup.find("div", class_="capital-markets-hub")["style"]


@pytest.mark.asyncio
async def test_composer_failure_propagates():
    """Composer errors propagate out of render."""
    class BrokenComposer:
        def render(self, template, theme, company, components):
            raise RuntimeError("composer down")

    layout = CapitalMarketsHubLayout(composer=BrokenComposer())
    with pytest.raises(RuntimeError, match="composer down"):
        await layout.render(Company(name="Acme Capital"), None, None)


def test_layout_registry():
    """The registry maps the hub template type to its layout."""
    assert LAYOUTS["capital-markets-hub"] is CapitalMarketsHubLayout


@pytest.mark.asyncio
async def test_quoted_font_stack_is_literal_css():
    """Custom properties keep quoted font stacks as plain CSS, matching the inline style."""
    theme = {"typography": {"primaryFont": '"Helvetica Neue", Arial'}}
    soup = await _render(Company(name="Acme Capital"), theme=theme)
    css = soup.find("style").get_text()
    assert '--primary-font: "Helvetica Neue", Arial;' in css
    assert '--secondary-font: "Helvetica Neue", Arial;' in css
    assert "&#34;" not in css
    root = soup.find("div", class_="capital-markets-hub")
    assert 'font-family: "Helvetica Neue", Arial' in root["style"]


@pytest.mark.asyncio
async def test_token_cannot_close_style_element():
    """Angle brackets in a token are CSS-escaped inside the style element."""
    theme = {"colors": {"accent": "red</style><b>x</b>"}}
    html = str(await render_capital_markets_hub(Company(name="Acme Capital"), None, theme))
    style_block = html.split("<style>", 1)[1].split("</style>", 1)[0]
    assert "<" not in style_block
    assert "--accent-color: red\\3C /style\\3E " in style_block


@pytest.mark.asyncio
async def test_render_logs_elapsed_ms(caplog):
    """Each render logs the company name and elapsed milliseconds."""
    caplog.set_level(logging.INFO, logger="irsite.layouts")
    await _render(Company(name="Acme Capital"))
    messages = [r.getMessage() for r in caplog.records if r.name == "irsite.layouts"]
    assert any(re.fullmatch(r"capital_markets_hub company=Acme Capital ms=\d+\.\d", m) for m in messages)
