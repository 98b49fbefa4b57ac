"""Image generation through the Gemini API.

This module provides :class:`GenerationClient`, the single point of contact
with the image provider.  Callers hand it a fully built prompt and get back a
:class:`GenerationResult` holding the first image the model produced.

Key Responsibilities
--------------------
- **Multimodal request** — every call asks for both ``TEXT`` and ``IMAGE``
  response modalities; image models answer with a mix of commentary parts
  and inline image parts.
- **First-image extraction** — :func:`extract_first_image` scans the ordered
  response parts and keeps the first one carrying inline binary data.  It
  only relies on parts exposing ``inline_data.data`` and
  ``inline_data.mime_type``, so any provider answering in that shape works.
- **Error mapping** — any failure of the provider call (network, auth,
  quota, malformed response) and an image-less answer are both raised as
  :class:`~vibeui.core.errors.ProviderError`.

No timeout and no retry are applied: a transient provider failure surfaces
immediately and a hung call blocks only the request awaiting it.

Usage
-----
::

    from vibeui.core.generation import GenerationClient

    client = GenerationClient(api_key="...", model="gemini-3-pro-image-preview")
    result = await client.generate("A mood board for a calm journaling app")
    payload = {"image": result.image_base64, "mimeType": result.mime_type}
"""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from google import genai
from google.genai import types

from vibeui.core.errors import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/png"
NO_IMAGE_MESSAGE = "No image generated"
GENERIC_FAILURE_MESSAGE = "Generation failed"
RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


@dataclass(frozen=True)
class GenerationResult:
    """An image returned by the provider.

    Attributes:
        image_data: Raw image bytes.
        mime_type: Media type declared by the provider, ``image/png`` when
            it declared none.
    """

    image_data: bytes
    mime_type: str = DEFAULT_MIME_TYPE

    @property
    def image_base64(self) -> str:
        """The image encoded as base64 text for JSON transport."""
        return base64.b64encode(self.image_data).decode("ascii")

    def to_response(self) -> dict[str, str]:
        return {"image": self.image_base64, "mimeType": self.mime_type}


def _as_bytes(data: Any) -> bytes:
    # The SDK decodes inline data to bytes; raw REST payloads keep it as
    # base64 text.
    if isinstance(data, str):
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as exc:
            raise ProviderError(f"Malformed image data: {exc}") from exc
    return bytes(data)


def extract_first_image(parts: Iterable[Any]) -> GenerationResult | None:
    """Return the first part carrying inline binary data.

    Parts without ``inline_data`` (or with empty data) are skipped, so text
    commentary preceding the image does not matter.

    Args:
        parts: Ordered response parts.  Each may expose ``inline_data`` with
            ``data`` and ``mime_type`` attributes.

    Returns:
        The first image found, or ``None`` if no part has inline data.
    """
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        data = getattr(inline_data, "data", None)
        if not data:
            continue
        mime_type = getattr(inline_data, "mime_type", None) or DEFAULT_MIME_TYPE
        return GenerationResult(image_data=_as_bytes(data), mime_type=mime_type)
    return None


def response_parts(response: Any) -> list[Any]:
    """Return the ordered content parts of the first candidate.

    Missing candidates, content, or parts all yield an empty list.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


class GenerationClient:
    """Thin async wrapper around the provider's ``generate_content`` call.

    Args:
        api_key: Provider credential.
        model: Model identifier sent with every request.
        client: Pre-built ``genai.Client``.  Tests pass a fake here; when
            omitted one is created from *api_key*.
    """

    def __init__(self, api_key: str, model: str, client: Any | None = None) -> None:
        self.model = model
        self._client = client if client is not None else genai.Client(api_key=api_key)

    def _config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(response_modalities=RESPONSE_MODALITIES)

    async def generate(self, prompt: str) -> GenerationResult:
        """Submit *prompt* and return the first generated image.

        Args:
            prompt: Fully built generation prompt.

        Returns:
            The first inline image in the response.

        Raises:
            ProviderError: If the provider call fails, in which case the
                message is the provider's own, or if the response holds no
                image.
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config(),
            )
        except Exception as exc:
            raise ProviderError(str(exc) or GENERIC_FAILURE_MESSAGE) from exc

        result = extract_first_image(response_parts(response))
        if result is None:
            raise ProviderError(NO_IMAGE_MESSAGE)

        logger.info(f"Generated {result.mime_type} image ({len(result.image_data)} bytes) with {self.model}")
        return result
