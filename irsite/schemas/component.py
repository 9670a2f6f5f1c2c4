"""Renderable component specification."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ComponentSpec(BaseModel):
    """One block of a page: a component type, an optional anchor id and its props."""

    type: str
    id: str | None = Field(None, description="Anchor id of the rendered section")
    props: dict[str, Any] = Field(default_factory=dict)
