"""Theme Pydantic schemas – raw theme config and resolved tokens."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ThemeColors(BaseModel):
    """Colour tokens as stored on a theme. Every field is optional."""

    model_config = ConfigDict(extra="ignore")

    primary: str | None = None
    accent: str | None = None
    background: str | None = None
    text: str | None = None


class ThemeTypography(BaseModel):
    """Font tokens as stored on a theme (camelCase keys in storage)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    primary_font: str | None = Field(None, alias="primaryFont")
    secondary_font: str | None = Field(None, alias="secondaryFont")


class ThemeConfig(BaseModel):
    """A theme as read by the layout; both groups may be absent."""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    colors: ThemeColors | None = None
    typography: ThemeTypography | None = None


class ThemeTokens(BaseModel):
    """Fully resolved style tokens. No field is ever empty."""

    model_config = ConfigDict(frozen=True)

    primary_color: str
    accent_color: str
    background_color: str
    text_color: str
    primary_font: str
    secondary_font: str

    def css_variables(self) -> dict[str, str]:
        """CSS custom properties exposed to descendant components."""
        return {
            "--primary-color": self.primary_color,
            "--accent-color": self.accent_color,
            "--background-color": self.background_color,
            "--text-color": self.text_color,
            "--primary-font": self.primary_font,
            "--secondary-font": self.secondary_font,
        }
