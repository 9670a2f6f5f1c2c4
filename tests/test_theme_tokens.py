"""Tests for theme token resolution."""

from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from irsite.models import Company, Theme
from irsite.schemas.theme import ThemeConfig
from irsite.services.theme_tokens import (
    DEFAULT_ACCENT_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_PRIMARY_FONT,
    DEFAULT_TEXT_COLOR,
    coerce_theme,
    resolve_theme_tokens,
    resolve_token,
)

FULL_COLORS = {"primary": "#111111", "accent": "#222222", "background": "#333333", "text": "#444444"}
FULL_TYPOGRAPHY = {"primaryFont": "Inter", "secondaryFont": "Lora"}


def test_resolve_token_first_truthy_source_wins():
    """The first truthy source wins."""
    assert resolve_token([None, "", "#ABCDEF", "#000000"], "#FFFFFF") == "#ABCDEF"


def test_resolve_token_falls_back_to_default():
    """All-empty sources fall back to the default."""
    assert resolve_token([None, ""], "#FFFFFF") == "#FFFFFF"
    assert resolve_token([], "#FFFFFF") == "#FFFFFF"


def test_resolve_token_rejects_empty_default():
    """An empty default raises ValueError."""
    with pytest.raises(ValueError):
        resolve_token(["#000000"], "")


def test_no_theme_resolves_every_default():
    """No theme resolves every token to its default."""
    tokens = resolve_theme_tokens(None, Company(name="Acme Capital"))
    assert tokens.primary_color == DEFAULT_PRIMARY_COLOR == "#0A0A0A"
    assert tokens.accent_color == DEFAULT_ACCENT_COLOR == "#F5C55A"
    assert tokens.background_color == DEFAULT_BACKGROUND_COLOR == "#0F0F0F"
    assert tokens.text_color == DEFAULT_TEXT_COLOR == "#FFFFFF"
    assert tokens.primary_font == DEFAULT_PRIMARY_FONT == "IBM Plex Sans"
    assert tokens.secondary_font == "IBM Plex Sans"


@pytest.mark.parametrize("drop_colors", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("drop_fonts", [0, 1, 2])
def test_missing_subsets_never_produce_empty_tokens(drop_colors, drop_fonts):
    """Every combination of missing colour/font keys still resolves all six tokens."""
    company = Company(name="Acme Capital")
    for color_keys in itertools.combinations(FULL_COLORS, drop_colors):
        for font_keys in itertools.combinations(FULL_TYPOGRAPHY, drop_fonts):
            theme = {
                "colors": {k: v for k, v in FULL_COLORS.items() if k not in color_keys},
                "typography": {k: v for k, v in FULL_TYPOGRAPHY.items() if k not in font_keys},
            }
            tokens = resolve_theme_tokens(theme, company)
            assert all(tokens.css_variables().values())
            for key in color_keys:
                expected = {
                    "primary": "#0A0A0A",
                    "accent": "#F5C55A",
                    "background": "#0F0F0F",
                    "text": "#FFFFFF",
                }[key]
                assert getattr(tokens, f"{key}_color") == expected


def test_empty_nested_groups_use_defaults():
    """Empty colour and typography groups use defaults."""
    tokens = resolve_theme_tokens({"colors": None, "typography": {}}, Company(name="X"))
    assert tokens.background_color == "#0F0F0F"
    assert tokens.primary_font == "IBM Plex Sans"


def test_empty_string_values_count_as_missing():
    """Empty strings count as missing."""
    tokens = resolve_theme_tokens({"colors": {"accent": ""}}, Company(name="X"))
    assert tokens.accent_color == "#F5C55A"


def test_company_brand_fonts_used_when_theme_has_none():
    """Company brand fonts apply when the theme has none."""
    company = Company(name="X", primary_font_family="Source Sans Pro", secondary_font_family="Merriweather")
    tokens = resolve_theme_tokens({"colors": {}}, company)
    assert tokens.primary_font == "Source Sans Pro"
    assert tokens.secondary_font == "Merriweather"


def test_theme_fonts_win_over_company_fonts():
    """Theme fonts win over company fonts."""
    company = Company(name="X", primary_font_family="Source Sans Pro", secondary_font_family="Merriweather")
    tokens = resolve_theme_tokens({"typography": FULL_TYPOGRAPHY}, company)
    assert tokens.primary_font == "Inter"
    assert tokens.secondary_font == "Lora"


def test_secondary_font_defaults_to_resolved_primary_font():
    """Secondary font falls back to the resolved primary font."""
    company = Company(name="X", primary_font_family="Source Sans Pro")
    tokens = resolve_theme_tokens(None, company)
    assert tokens.secondary_font == "Source Sans Pro"

    tokens = resolve_theme_tokens({"typography": {"primaryFont": "Inter"}}, company)
    assert tokens.secondary_font == "Inter"


def test_theme_orm_row_is_accepted():
    """An ORM theme row is accepted."""
    theme = Theme(name="Harbour", colors={"accent": "#8DA9C4"}, typography=None)
    tokens = resolve_theme_tokens(theme, Company(name="X"))
    assert tokens.accent_color == "#8DA9C4"
    assert tokens.primary_color == "#0A0A0A"


def test_coerce_theme_passthrough_and_none():
    """ThemeConfig passes through and None stays None."""
    config = ThemeConfig()
    assert coerce_theme(config) is config
    assert coerce_theme(None) is None


def test_malformed_theme_raises():
    """A malformed theme raises ValidationError."""
    with pytest.raises(ValidationError):
        resolve_theme_tokens({"colors": {"accent": ["not", "a", "colour"]}}, Company(name="X"))


def test_css_variables_names_and_order():
    """CSS variables come out in a fixed order."""
    tokens = resolve_theme_tokens(None, Company(name="X"))
    assert list(tokens.css_variables()) == [
        "--primary-color",
        "--accent-color",
        "--background-color",
        "--text-color",
        "--primary-font",
        "--secondary-font",
    ]
