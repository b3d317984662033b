"""Single vision request: image + fixed instruction prompt → raw model text."""

from __future__ import annotations

import logging

from ..common.providers.base import ProviderResult
from ..common.router import ResolvedConfig

logger = logging.getLogger(__name__)

ALTTEXT_PROMPT = """Analyze this image and return strict JSON with keys:
- accessible (<=1 sentence, helpful for screen readers)
- short (<=8 words)
- seo (<=1 sentence with relevant nouns)

Return ONLY valid JSON, no markdown, no extra text."""


async def request_vision_text(
    image_base64: str,
    mime_type: str,
    config: ResolvedConfig,
) -> ProviderResult:
    """Send one alt-text request to the resolved provider.

    No retry happens here; ``EndpointUnavailable`` / ``EndpointError`` from
    the provider propagate unchanged.
    """
    logger.debug(
        "Requesting alt text: provider=%s model=%s mime=%s payload_len=%d",
        config.provider.name,
        config.model,
        mime_type,
        len(image_base64),
    )
    return await config.provider.generate(
        ALTTEXT_PROMPT,
        images=[image_base64],
        model=config.model,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        timeout_seconds=config.timeout_seconds,
    )
