"""Theme token resolution (no DB access).

Every token is resolved through an ordered list of optional sources and a
non-empty literal default, so a render never produces an undefined style.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from irsite.schemas.theme import ThemeColors, ThemeConfig, ThemeTokens, ThemeTypography

DEFAULT_PRIMARY_COLOR = "#0A0A0A"
DEFAULT_ACCENT_COLOR = "#F5C55A"
DEFAULT_BACKGROUND_COLOR = "#0F0F0F"
DEFAULT_TEXT_COLOR = "#FFFFFF"
DEFAULT_PRIMARY_FONT = "IBM Plex Sans"


def resolve_token(sources: Iterable[str | None], default: str) -> str:
    """Return the first non-empty source, else ``default``.

    Raises:
        ValueError: if ``default`` itself is empty.
    """
    if not default:
        raise ValueError("token default must be a non-empty string")
    for value in sources:
        if value:
            return value
    return default


def coerce_theme(theme: Any) -> ThemeConfig | None:
    """Read a theme row, mapping or ``ThemeConfig`` into a ``ThemeConfig``.

    Malformed input raises ``pydantic.ValidationError``.
    """
    if theme is None:
        return None
    if isinstance(theme, ThemeConfig):
        return theme
    if isinstance(theme, Mapping):
        return ThemeConfig.model_validate(theme)
    return ThemeConfig.model_validate(theme, from_attributes=True)


def resolve_theme_tokens(theme: Any, company: Any) -> ThemeTokens:
    """Resolve the six style tokens: theme value → company brand font → default."""
    config = coerce_theme(theme)
    colors = (config.colors if config else None) or ThemeColors()
    typography = (config.typography if config else None) or ThemeTypography()

    primary_font = resolve_token(
        [typography.primary_font, getattr(company, "primary_font_family", None)],
        DEFAULT_PRIMARY_FONT,
    )
    secondary_font = resolve_token(
        [typography.secondary_font, getattr(company, "secondary_font_family", None)],
        primary_font,
    )

    return ThemeTokens(
        primary_color=resolve_token([colors.primary], DEFAULT_PRIMARY_COLOR),
        accent_color=resolve_token([colors.accent], DEFAULT_ACCENT_COLOR),
        background_color=resolve_token([colors.background], DEFAULT_BACKGROUND_COLOR),
        text_color=resolve_token([colors.text], DEFAULT_TEXT_COLOR),
        primary_font=primary_font,
        secondary_font=secondary_font,
    )
