"""Component composer – renders a list of component specs into page markup.

Each component type has a Jinja2 snippet; colours and fonts come from the
CSS custom properties the layout sets on ``:root``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from irsite.schemas.component import ComponentSpec

logger = logging.getLogger("irsite.composition")

# Component type -> Jinja2 snippet. ``c`` is the ComponentSpec, ``p`` its props.
COMPONENT_SNIPPETS: dict[str, str] = {
    "hero": """
<section class="ir-hero"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 96px 0; border-bottom: 1px solid var(--accent-color);">
  <div class="container mx-auto px-4">
    <h2 style="font-family: var(--secondary-font); font-size: 48px; margin: 0 0 16px;">{{ p.headline }}</h2>
    {% if p.subheadline %}<p class="ir-hero-subheadline" style="font-size: 20px; opacity: 0.85; max-width: 720px;">{{ p.subheadline }}</p>{% endif %}
    {% if p.aum %}<p class="ir-hero-aum" style="margin-top: 32px;"><span style="font-size: 14px; text-transform: uppercase; letter-spacing: 0.1em;">Assets Under Management</span><br><strong style="font-size: 40px; color: var(--accent-color);">{{ p.aum }}</strong></p>{% endif %}
  </div>
</section>""",
    "kpi_strip": """
<section class="ir-kpis"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 48px 0;">
  <ul class="container mx-auto px-4" style="display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 24px; list-style: none;">
    {% for kpi in p.kpis %}<li class="ir-kpi ir-kpi-{{ kpi.trend }}" style="padding: 24px; border: 1px solid var(--accent-color); border-radius: 8px;">
      <span class="ir-kpi-label" style="font-size: 14px; opacity: 0.75;">{{ kpi.label }}</span>
      <strong class="ir-kpi-value" style="display: block; font-size: 32px;">{{ kpi.gaap_value }}</strong>
      <span class="ir-kpi-change" style="color: var(--accent-color);">{{ kpi.change }}</span>
      <span class="ir-kpi-period" style="font-size: 12px; opacity: 0.6;">{{ kpi.period }}</span>
    </li>{% endfor %}
  </ul>
</section>""",
    "metrics_grid": """
<section class="ir-metrics"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 64px 0;">
  <div class="container mx-auto px-4">
    <h2 style="font-family: var(--secondary-font); color: var(--accent-color);">{{ p.title }}</h2>
    <dl style="display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 24px;">
      {% for m in p.metrics if m.value %}<div class="ir-metric"><dt style="opacity: 0.75;">{{ m.label }}</dt><dd style="font-size: 28px; margin: 0;">{{ m.value }}</dd></div>{% endfor %}
    </dl>
  </div>
</section>""",
    "press_releases": """
<section class="ir-press-releases"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 64px 0;">
  <div class="container mx-auto px-4">
    <h2 style="font-family: var(--secondary-font); color: var(--accent-color);">{{ p.title }}</h2>
    {% if p.releases %}<ul style="list-style: none; padding: 0;">
      {% for pr in p.releases %}<li class="ir-press-release" style="padding: 16px 0; border-bottom: 1px solid var(--primary-color);">
        <time datetime="{{ pr.published_at }}" style="font-size: 12px; opacity: 0.6;">{{ pr.published_at }}</time>
        <h3 style="margin: 4px 0;">{% if pr.url %}<a href="{{ pr.url }}" style="color: var(--text-color);">{{ pr.title }}</a>{% else %}{{ pr.title }}{% endif %}</h3>
        {% if pr.summary %}<p style="opacity: 0.8;">{{ pr.summary }}</p>{% endif %}
      </li>{% endfor %}
    </ul>{% else %}<p class="ir-empty" style="opacity: 0.6;">No recent releases.</p>{% endif %}
  </div>
</section>""",
    "analyst_coverage": """
<section class="ir-analysts"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 64px 0;">
  <div class="container mx-auto px-4">
    <h2 style="font-family: var(--secondary-font); color: var(--accent-color);">{{ p.title }}{% if p.ticker_symbol %} <small>({{ p.ticker_symbol }})</small>{% endif %}</h2>
    <table style="width: 100%; border-collapse: collapse;">
      <thead><tr><th scope="col">Firm</th><th scope="col">Analyst</th><th scope="col">Rating</th><th scope="col">Target</th><th scope="col">Date</th></tr></thead>
      <tbody>
      {% for a in p.analysts %}<tr class="ir-analyst"><td>{{ a.bank }}</td><td>{{ a.analyst_name }}</td><td>{{ a.rating }}</td><td>${{ a.target_price }}</td><td>{{ a.date }}</td></tr>{% endfor %}
      </tbody>
    </table>
  </div>
</section>""",
    "leadership": """
<section class="ir-leadership"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 64px 0;">
  <div class="container mx-auto px-4">
    <h2 style="font-family: var(--secondary-font); color: var(--accent-color);">{{ p.title }}</h2>
    <ul style="display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 24px; list-style: none; padding: 0;">
      {% for leader in p.leaders %}<li class="ir-leader">
        {% if leader.photo_url %}<img src="{{ leader.photo_url }}" alt="{{ leader.name }}" style="width: 100%; border-radius: 8px;" loading="lazy">{% endif %}
        <h3 style="margin: 8px 0 0;">{{ leader.name }}</h3>
        <p style="opacity: 0.75; margin: 0;">{{ leader.title }}</p>
      </li>{% endfor %}
    </ul>
  </div>
</section>""",
    "contact": """
<section class="ir-contact"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 64px 0; border-top: 1px solid var(--accent-color);">
  <div class="container mx-auto px-4">
    <h2 style="font-family: var(--secondary-font); color: var(--accent-color);">{{ p.title }}</h2>
    <address style="font-style: normal;">
      <strong>{{ p.company_name }}</strong>
      {% if p.email %}<br><a href="mailto:{{ p.email }}" style="color: var(--text-color);">{{ p.email }}</a>{% endif %}
      {% if p.website_url %}<br><a href="{{ p.website_url }}" style="color: var(--text-color);">{{ p.website_url }}</a>{% endif %}
    </address>
  </div>
</section>""",
    "placeholder": """
<section class="ir-placeholder"{% if c.id %} id="{{ c.id }}"{% endif %} style="padding: 24px; opacity: 0.6;"><p>Section: {{ c.type }} (placeholder)</p></section>""",
}


def _template_config(template: Any) -> Mapping[str, Any]:
    """Return the template's config mapping, whatever shape the template has."""
    if template is None:
        return {}
    if isinstance(template, Mapping):
        config = template.get("config", template)
    else:
        config = getattr(template, "config", None)
    return config if isinstance(config, Mapping) else {}


class ComponentComposer:
    """Renders component specs in order inside a ``<main>`` region."""

    def __init__(self, env: Environment | None = None):
        self.env = env or Environment(
            loader=DictLoader(COMPONENT_SNIPPETS),
            autoescape=select_autoescape(default=True, default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_component(self, component: ComponentSpec, theme: Any = None) -> Markup:
        name = component.type if component.type in COMPONENT_SNIPPETS else "placeholder"
        if name == "placeholder":
            logger.warning("No snippet for component type %r – rendering placeholder", component.type)
        snippet = self.env.get_template(name)
        return Markup(snippet.render(c=component, p=component.props, theme=theme))

    def render(
        self,
        template: Any,
        theme: Any,
        company: Any,
        components: Sequence[ComponentSpec],
    ) -> Markup:
        """Render ``components`` for ``company``.

        Component types listed in the template config's ``hiddenComponents``
        are skipped; the template is otherwise passed through untouched.
        """
        hidden = set(_template_config(template).get("hiddenComponents") or [])
        parts = [
            self.render_component(component, theme)
            for component in components
            if component.type not in hidden
        ]
        logger.debug(
            "Composed %d/%d components for %s",
            len(parts),
            len(components),
            getattr(company, "name", None),
        )
        return Markup('<main class="ir-components">') + Markup("\n").join(parts) + Markup("</main>")
