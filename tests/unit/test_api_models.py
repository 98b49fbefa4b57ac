"""Tests for vibeui.api.models — Pydantic request models.

Tests cover:
- camelCase aliases on input.
- Leniency on the fields the prompt builders validate themselves.
- ColorPalette required fields.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vibeui.api.models import ColorPalette, MoodboardRequest, PreviewRequest


class TestMoodboardRequest:
    def test_aliases(self):
        req = MoodboardRequest.model_validate(
            {"appName": "Inkwell", "appDesc": "journaling", "vibes": ["calm"], "techStack": "Vue"}
        )
        assert req.app_name == "Inkwell"
        assert req.app_desc == "journaling"
        assert req.vibes == ["calm"]
        assert req.tech_stack == "Vue"

    def test_empty_body_accepted(self):
        """Missing vibes is reported by the endpoint, not the schema."""
        req = MoodboardRequest.model_validate({})
        assert req.vibes is None
        assert req.app_name is None

    def test_unknown_fields_ignored(self):
        req = MoodboardRequest.model_validate({"vibes": ["calm"], "extra": 1})
        assert not hasattr(req, "extra")

    def test_vibes_must_be_list_of_strings(self):
        with pytest.raises(ValidationError):
            MoodboardRequest.model_validate({"vibes": "calm"})


class TestColorPalette:
    def test_all_fields_required(self):
        with pytest.raises(ValidationError):
            ColorPalette.model_validate({"bg": "#000"})

    def test_aliases(self):
        palette = ColorPalette.model_validate(
            {
                "bg": "#000",
                "surface": "#111",
                "textPrimary": "#fff",
                "textSecondary": "#aaa",
                "accent": "#f00",
                "border": "#222",
            }
        )
        assert palette.text_primary == "#fff"
        assert palette.text_secondary == "#aaa"


class TestPreviewRequest:
    def test_full_payload(self, preview_payload):
        req = PreviewRequest.model_validate(preview_payload)
        assert req.app_name == "Inkwell"
        assert req.colors.accent == "#7c6fff"
        assert req.font_heading == "Fraunces"
        assert req.font_body == "Inter Tight"
        assert req.pages == ["Landing", "Editor", "Settings", "Billing"]

    def test_required_fields_default_to_none(self):
        req = PreviewRequest.model_validate({})
        assert req.app_name is None
        assert req.colors is None
        assert req.pages is None
