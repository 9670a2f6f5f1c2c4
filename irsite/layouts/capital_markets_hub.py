"""Capital Markets Hub layout.

Asset manager / investment firm / fund platform.
Structure: thesis + AUM + portfolio snapshot, portfolio grid, research and
thought leadership, analyst coverage, team, contact.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from jinja2 import Environment, select_autoescape
from markupsafe import Markup
from sqlalchemy.ext.asyncio import AsyncSession

from irsite.composition.clusters import CAPITAL_MARKETS_HUB, ComponentClusters
from irsite.composition.composer import ComponentComposer
from irsite.models.company import Company
from irsite.schemas.component_data import ComponentData
from irsite.services.capital_markets import CAPITAL_MARKETS_DEMO, merge_component_data
from irsite.services.component_data import prepare_component_data
from irsite.services.theme_tokens import resolve_theme_tokens

logger = logging.getLogger("irsite.layouts")

NAV_LINKS: list[tuple[str, str]] = [
    ("#portfolio", "Portfolio"),
    ("#research", "Research"),
    ("#team", "Team"),
    ("#contact", "Contact"),
]

LAYOUT_TEMPLATE = """\
<div class="ir-site capital-markets-hub" style="background-color: {{ t.background_color }}; color: {{ t.text_color }}; font-family: {{ t.primary_font }}; min-height: 100vh;">
  <style>
    :root {
{% for name, value in t.css_variables().items() %}
      {{ name }}: {{ value | css }};
{% endfor %}
    }
  </style>
  <header class="border-b sticky top-0 z-50" style="border-color: {{ t.accent_color }}; background-color: {{ t.background_color }};">
    <div class="container mx-auto px-4 py-4">
      <div class="flex items-center justify-between">
        <div class="flex items-center gap-4">
{% if company.logo_url %}
          <img src="{{ company.logo_url }}" alt="{{ company.name }} Logo" class="h-12">
{% endif %}
          <h1 class="text-2xl font-bold" style="color: {{ t.accent_color }};">{{ company.name }}</h1>
{% if company.ticker_symbol %}
          <span class="ticker-badge text-sm px-2 py-1 rounded" style="background-color: {{ t.accent_color }}30; color: {{ t.text_color }};">{{ company.ticker_symbol }}</span>
{% endif %}
        </div>
        <nav>
          <ul class="flex items-center gap-6">
{% for href, label in nav_links %}
            <li><a href="{{ href }}" class="hover:underline" style="color: {{ t.text_color }};">{{ label }}</a></li>
{% endfor %}
          </ul>
        </nav>
      </div>
    </div>
  </header>
  {{ content }}
</div>
"""


def css_value(value: str) -> Markup:
    """Make a token safe inside a <style> element.

    Browsers do not decode HTML entities there, so quotes stay literal and
    only angle brackets are CSS-escaped to keep the element from closing.
    """
    return Markup(str(value).replace("<", "\\3C ").replace(">", "\\3E "))


_env = Environment(
    autoescape=select_autoescape(default=True, default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["css"] = css_value
_layout_template = _env.from_string(LAYOUT_TEMPLATE)


class CapitalMarketsHubLayout:
    """Renders the Capital Markets Hub page for one company.

    Args:
        session: Async DB session used to read CMS overrides.  Optional;
            without it the page renders from the company record alone.
        composer: Component renderer for the main region.
        use_cms: Whether to overlay stored CMS entries.
    """

    layout_key = CAPITAL_MARKETS_HUB

    def __init__(
        self,
        session: AsyncSession | None = None,
        composer: ComponentComposer | None = None,
        use_cms: bool = True,
    ):
        self.session = session
        self.composer = composer or ComponentComposer()
        self.use_cms = use_cms

    async def build_component_data(self, company: Company) -> ComponentData:
        """Base data for ``company`` with the Capital Markets demo content merged in."""
        base = await prepare_component_data(company, self.use_cms, session=self.session)
        return merge_component_data(base, CAPITAL_MARKETS_DEMO)

    def render_page(
        self,
        company: Company,
        template: Any,
        theme: Any,
        data: ComponentData,
    ) -> Markup:
        """Synchronous part of a render: tokens, header and composed components."""
        tokens = resolve_theme_tokens(theme, company)
        components = ComponentClusters.for_layout(self.layout_key)(data)
        content = self.composer.render(template, theme, company, components)
        return Markup(
            _layout_template.render(
                t=tokens,
                company=company,
                nav_links=NAV_LINKS,
                content=content,
            )
        )

    async def render(self, company: Company, template: Any, theme: Any) -> Markup:
        """Render the full page markup for ``company``.

        ``template`` is passed to the composer unmodified; ``theme`` may be
        None or miss any token.  Collaborator errors propagate.
        """
        t0 = time.perf_counter()
        data = await self.build_component_data(company)
        markup = self.render_page(company, template, theme, data)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.info("capital_markets_hub company=%s ms=%.1f", company.name, elapsed)
        return markup


async def render_capital_markets_hub(
    company: Company,
    template: Any,
    theme: Any,
    session: AsyncSession | None = None,
) -> Markup:
    """Render the Capital Markets Hub page with a default composer."""
    return await CapitalMarketsHubLayout(session=session).render(company, template, theme)
