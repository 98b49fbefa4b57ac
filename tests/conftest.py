"""Shared pytest fixtures for VibeUI tests."""

import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Generator

import pytest
from fastapi.testclient import TestClient

from vibeui.api.main import create_app
from vibeui.core.config import VibeUIConfig
from vibeui.core.generation import GenerationClient

# PNG signature plus padding; nothing in the app decodes the image.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class FakeModels:
    """Stand-in for ``client.aio.models`` recording every call."""

    def __init__(self, response: Any) -> None:
        self.response = response
        self.error: Exception | None = None
        self.calls: list[dict] = []

    async def generate_content(self, *, model: str, contents: Any, config: Any) -> Any:
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeGenAIClient:
    """Stand-in for ``google.genai.Client`` exposing only the async surface."""

    def __init__(self, response: Any) -> None:
        self.models = FakeModels(response)
        self.aio = SimpleNamespace(models=self.models)


def _image_part(data: Any = PNG_BYTES, mime_type: str | None = "image/png") -> SimpleNamespace:
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def _text_part(text: str) -> SimpleNamespace:
    return SimpleNamespace(text=text, inline_data=None)


def _make_response(*parts: Any) -> SimpleNamespace:
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


@pytest.fixture
def image_part() -> Callable[..., SimpleNamespace]:
    """Factory for response parts carrying inline image data."""
    return _image_part


@pytest.fixture
def text_part() -> Callable[[str], SimpleNamespace]:
    """Factory for text-only response parts."""
    return _text_part


@pytest.fixture
def make_response() -> Callable[..., SimpleNamespace]:
    """Factory for provider responses with one candidate."""
    return _make_response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def static_dir(temp_dir: Path) -> Path:
    """Create a static directory with an entry document and one asset.

    Returns:
        Path to the static directory
    """
    static = temp_dir / "static"
    (static / "assets").mkdir(parents=True)
    (static / "index.html").write_text("<!DOCTYPE html><title>VibeUI test shell</title>")
    (static / "assets" / "app.js").write_text("console.log('vibeui');")
    # A file next to, not inside, the static directory.
    (temp_dir / "secret.txt").write_text("do not serve")
    return static


@pytest.fixture
def test_config(static_dir: Path) -> VibeUIConfig:
    """Create a configuration for the public variant.

    Every client address is trusted to forward headers so tests can choose
    their identity through ``X-Forwarded-For``.
    """
    return VibeUIConfig(
        _env_file=None,
        gemini_api_key="test-key",
        gemini_model="test-image-model",
        auth_enabled=False,
        static_dir=str(static_dir),
        forwarded_allow_ips="*",
    )


@pytest.fixture
def auth_config(test_config: VibeUIConfig) -> VibeUIConfig:
    """Configuration for the authenticated variant."""
    return test_config.model_copy(
        update={
            "auth_enabled": True,
            "auth_user": "operator",
            "auth_pass": "s3cret",
            "session_secret": "test-session-secret",
        }
    )


@pytest.fixture
def fake_genai() -> FakeGenAIClient:
    """Fake provider answering with commentary followed by one PNG."""
    return FakeGenAIClient(_make_response(_text_part("Here is your image."), _image_part()))


@pytest.fixture
def generation_client(fake_genai: FakeGenAIClient, test_config: VibeUIConfig) -> GenerationClient:
    return GenerationClient(
        test_config.gemini_api_key,
        test_config.gemini_model,
        client=fake_genai,
    )


@pytest.fixture
def test_client(
    test_config: VibeUIConfig, generation_client: GenerationClient
) -> Generator[TestClient, None, None]:
    """TestClient for the public (no-auth) variant."""
    app = create_app(test_config, generation_client=generation_client)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_client(
    auth_config: VibeUIConfig, generation_client: GenerationClient
) -> Generator[TestClient, None, None]:
    """TestClient for the authenticated variant, not yet logged in."""
    app = create_app(auth_config, generation_client=generation_client)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def moodboard_payload() -> dict:
    return {
        "appName": "Inkwell",
        "appDesc": "a calm journaling app",
        "vibes": ["brutalist", "playful"],
        "techStack": "React",
    }


@pytest.fixture
def preview_payload() -> dict:
    return {
        "appName": "Inkwell",
        "appDesc": "a calm journaling app",
        "audience": "writers",
        "vibes": ["minimal", "warm"],
        "colors": {
            "bg": "#0c0c0f",
            "surface": "#14141a",
            "textPrimary": "#f0f0f5",
            "textSecondary": "#7070a0",
            "accent": "#7c6fff",
            "border": "#2a2a35",
        },
        "fontHeading": "Fraunces",
        "fontBody": "Inter Tight",
        "pages": ["Landing", "Editor", "Settings", "Billing"],
        "radius": "large",
    }
