"""Page layouts, keyed by template type."""

from irsite.layouts.capital_markets_hub import CapitalMarketsHubLayout, render_capital_markets_hub

LAYOUTS = {
    CapitalMarketsHubLayout.layout_key: CapitalMarketsHubLayout,
}

__all__ = ["LAYOUTS", "CapitalMarketsHubLayout", "render_capital_markets_hub"]
