"""VibeUI backend - gated mood-board and UI-preview image generation."""

__version__ = "1.0.0"
