"""Pydantic request models for the VibeUI API.

These models define the JSON schema of the two generation endpoints.  Field
names follow the front-end's camelCase keys through aliases; Python code uses
the snake_case attribute names.

Required fields are deliberately typed as optional here.  Missing ``vibes``,
``appName`` or ``colors`` are reported by the prompt builders with the
endpoint's own 400 message instead of a generic schema error.

Models
------
MoodboardRequest
    Payload for ``POST /api/moodboard``.
PreviewRequest
    Payload for ``POST /api/preview``.
ColorPalette
    The six design-system colours carried by a preview request.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ColorPalette(_RequestModel):
    """The six colours a preview must reproduce exactly.

    Values are passed to the prompt verbatim, so any CSS colour notation the
    front-end uses (hex, ``rgb()``, names) is accepted.
    """

    bg: str = Field(..., description="Page background colour.")
    surface: str = Field(..., description="Card and surface colour.")
    text_primary: str = Field(..., alias="textPrimary", description="Primary text colour.")
    text_secondary: str = Field(..., alias="textSecondary", description="Secondary text colour.")
    accent: str = Field(..., description="Accent / call-to-action colour.")
    border: str = Field(..., description="Border colour.")


class MoodboardRequest(_RequestModel):
    """Request body for ``POST /api/moodboard``.

    Attributes:
        app_name: Optional product name woven into the prompt.
        app_desc: Optional one-line product description.
        vibes: Style keywords; must contain at least one entry.
        tech_stack: Accepted for front-end compatibility, not used.
    """

    app_name: str | None = Field(default=None, alias="appName")
    app_desc: str | None = Field(default=None, alias="appDesc")
    vibes: list[str] | None = Field(
        default=None,
        description="Style keywords, e.g. ['brutalist', 'playful'].",
    )
    tech_stack: str | None = Field(default=None, alias="techStack")


class PreviewRequest(_RequestModel):
    """Request body for ``POST /api/preview``.

    Attributes:
        app_name: Product name, required.
        app_desc: Optional product description.
        audience: Optional target audience.
        vibes: Optional style keywords.
        colors: Design-system colours, required.
        font_heading: Optional heading font style.
        font_body: Optional body font style.
        pages: Optional page names; only the first three are used.
        radius: Optional border-radius style (``sharp``, ``medium``, ...).
    """

    app_name: str | None = Field(default=None, alias="appName")
    app_desc: str | None = Field(default=None, alias="appDesc")
    audience: str | None = None
    vibes: list[str] | None = None
    colors: ColorPalette | None = None
    font_heading: str | None = Field(default=None, alias="fontHeading")
    font_body: str | None = Field(default=None, alias="fontBody")
    pages: list[str] | None = None
    radius: str | None = None
