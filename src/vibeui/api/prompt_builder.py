"""Prompt compilation for the two generation endpoints.

Each builder turns structured design inputs into one natural-language prompt
for the image model.  Both are pure functions: the same input always yields
byte-identical text (no randomness, no timestamps), so prompts can be
asserted on directly in tests.

Mood Board Structure::

    Create a professional, high-quality design mood board for a <vibes>
    application[ called "<appName>"][ — <appDesc>].

    [Fixed: 2×2 grid layout: palette / typography / UI sketches / texture]

    [Fixed: style line with exclusions]

Preview Structure::

    Create a high-fidelity UI mockup screenshot for "<appName>" — <appDesc>.

    [Design specifications: six colours, fonts, radius, vibe]

    [Fixed: nav bar, hero section, three feature cards]

    [Audience and page list]

    [Fixed: realism directive]

Usage
-----
::

    prompt = build_moodboard_prompt(["brutalist", "playful"], app_name="Inkwell")
"""

from __future__ import annotations

from collections.abc import Sequence

from vibeui.api.models import ColorPalette
from vibeui.core.errors import ValidationError

# ---------------------------------------------------------------------------
# Defaults for optional preview fields.
# ---------------------------------------------------------------------------

DEFAULT_APP_DESC = "a modern web application"
DEFAULT_FONT_HEADING = "elegant serif"
DEFAULT_FONT_BODY = "clean sans-serif"
DEFAULT_RADIUS = "medium"
DEFAULT_VIBE = "modern, clean"
DEFAULT_AUDIENCE = "modern users"
DEFAULT_PAGES = ("Landing Page",)
MAX_PAGES = 3

VIBE_SEPARATOR = ", "


def build_moodboard_prompt(
    vibes: Sequence[str] | None,
    *,
    app_name: str | None = None,
    app_desc: str | None = None,
) -> str:
    """Compile the mood-board prompt.

    Args:
        vibes: Style keywords.  Must be non-empty.
        app_name: Optional product name, added as ``called "<name>"``.
        app_desc: Optional description, appended after an em dash.

    Returns:
        The complete prompt text.

    Raises:
        ValidationError: If *vibes* is missing or empty.
    """
    if not vibes:
        raise ValidationError("vibes is required")

    vibe_str = VIBE_SEPARATOR.join(vibes)
    name_clause = f' called "{app_name}"' if app_name else ""
    desc_clause = f" — {app_desc}" if app_desc else ""

    return (
        f"Create a professional, high-quality design mood board for a {vibe_str} "
        f"application{name_clause}{desc_clause}.\n"
        "\n"
        "The mood board should be a clean 2×2 grid layout on a dark background, featuring:\n"
        "- Top-left: Color palette of 6 swatches with hex codes, arranged elegantly\n"
        "- Top-right: Typography inspiration — two complementary font styles (NOT Inter), "
        "shown as sample text\n"
        "- Bottom-left: UI element sketches — buttons, cards, minimal icons that match the vibe\n"
        f"- Bottom-right: Atmospheric/texture/pattern imagery that captures the {vibe_str} mood\n"
        "\n"
        f"Overall style: {vibe_str}. No generic gradients. No blue-purple AI clichés. "
        "Make it feel unique and directional.\n"
        "Output as a single cohesive image, professional design industry standard."
    )


def build_preview_prompt(
    app_name: str | None,
    colors: ColorPalette | None,
    *,
    app_desc: str | None = None,
    audience: str | None = None,
    vibes: Sequence[str] | None = None,
    font_heading: str | None = None,
    font_body: str | None = None,
    pages: Sequence[str] | None = None,
    radius: str | None = None,
) -> str:
    """Compile the UI-preview prompt.

    Colours are interpolated verbatim with an instruction to match them
    exactly.  Only the first three *pages* are listed.

    Args:
        app_name: Product name shown in the mock navigation bar.  Required.
        colors: The six design-system colours.  Required.
        app_desc: Product description, defaults to "a modern web application".
        audience: Target audience, defaults to "modern users".
        vibes: Style keywords, defaults to "modern, clean" when empty.
        font_heading: Heading font style, defaults to "elegant serif".
        font_body: Body font style, defaults to "clean sans-serif".
        pages: Page names, defaults to ``["Landing Page"]``.
        radius: Corner style, defaults to "medium".

    Returns:
        The complete prompt text.

    Raises:
        ValidationError: If *app_name* or *colors* is missing.
    """
    if not app_name or colors is None:
        raise ValidationError("appName and colors are required")

    vibe_str = VIBE_SEPARATOR.join(vibes or [])
    page_list = VIBE_SEPARATOR.join(list(pages if pages is not None else DEFAULT_PAGES)[:MAX_PAGES])

    return (
        f'Create a high-fidelity UI mockup screenshot for "{app_name}" — '
        f"{app_desc or DEFAULT_APP_DESC}.\n"
        "\n"
        "Design specifications to follow EXACTLY:\n"
        f"- Background: {colors.bg}\n"
        f"- Surface/cards: {colors.surface}\n"
        f"- Primary text: {colors.text_primary}\n"
        f"- Secondary text: {colors.text_secondary}\n"
        f"- Accent/CTA color: {colors.accent}\n"
        f"- Border color: {colors.border}\n"
        f"- Heading font style: {font_heading or DEFAULT_FONT_HEADING}\n"
        f"- Body font style: {font_body or DEFAULT_FONT_BODY}\n"
        f"- Border radius style: {radius or DEFAULT_RADIUS} corners\n"
        f"- Visual vibe: {vibe_str or DEFAULT_VIBE}\n"
        "\n"
        "Show a desktop-width landing page with:\n"
        f'1. Navigation bar: logo "{app_name}" on left, 4 nav links, CTA button on right\n'
        "2. Hero section: large headline (2-3 words), supporting subtext describing "
        f'"{app_desc or app_name}", two CTAs side by side\n'
        "3. Three feature cards in a row on the surface color, each with an icon, title, "
        "and description\n"
        "\n"
        f"Target audience: {audience or DEFAULT_AUDIENCE}\n"
        f"Pages in this app: {page_list}\n"
        "\n"
        "Make it look like a real, polished, production-ready website screenshot. "
        "Use the exact colors specified. No wireframe style — full color, full detail."
    )
