"""Alt-text generation service with a one-retry budget and filename fallback.

Flow per request:
  - Validate input (``MissingInput`` before any network call).
  - Request + resolve. A ``MalformedResponse`` on the first attempt retries the
    whole cycle once; anything else ends the vision path.
  - When the vision path ends without a result, derive alt text from the
    filename. The caller always gets three strings once input is valid.
"""

from __future__ import annotations

import logging
import time

from ..common import router as ai_router
from ..common.audit import log_ai_run
from ..common.errors import AltTextError, MalformedResponse, MissingInput
from ..common.providers.base import ProviderResult
from .contracts import AltTextServiceResult
from .fallback import generate_placeholder_alt_text
from .requester import ALTTEXT_PROMPT, request_vision_text
from .resolver import resolve_alt_text

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_FILENAME = "image"

# First attempt plus one retry after unparsable output. Not configurable.
MAX_VISION_ATTEMPTS = 2


def _require_input(image_base64: str | None, mime_type: str | None) -> None:
    if not image_base64 or not image_base64.strip() or not mime_type or not mime_type.strip():
        raise MissingInput("Missing base64 or mimeType")


def _fallback_result(
    filename: str | None,
    *,
    attempts: int,
    error: AltTextError | None,
    provider: str,
    model: str,
    t0: float,
) -> AltTextServiceResult:
    fallback_name = filename or DEFAULT_FALLBACK_FILENAME
    reason = error.kind if error else "unknown"
    logger.warning(
        "Vision path abandoned after %d attempt(s) (%s), using filename fallback for %r",
        attempts,
        reason,
        fallback_name,
    )

    return AltTextServiceResult(
        alt_text=generate_placeholder_alt_text(fallback_name),
        source="fallback",
        attempts=attempts,
        provider=provider,
        model=model,
        total_latency_ms=round((time.monotonic() - t0) * 1000, 2),
        fallback_reason=reason,
    )


async def generate_alt_text(
    image_base64: str | None,
    mime_type: str | None,
    filename: str | None = None,
) -> AltTextServiceResult:
    """Generate alt text for an uploaded image.

    Only ``MissingInput`` and errors outside the ``AltTextError`` hierarchy
    escape; every inference-path failure turns into a fallback result.
    """
    _require_input(image_base64, mime_type)

    t0 = time.monotonic()

    try:
        config = ai_router.resolve("alttext")
    except AltTextError as exc:
        logger.warning("No usable provider (%s): %s", exc.kind, exc)
        return _fallback_result(filename, attempts=0, error=exc, provider="", model="", t0=t0)

    attempts = 0
    last_result: ProviderResult | None = None
    last_error: AltTextError | None = None

    while attempts < MAX_VISION_ATTEMPTS:
        attempts += 1
        last_result = None
        try:
            last_result = await request_vision_text(image_base64, mime_type, config)
            alt_text = resolve_alt_text(last_result.raw_text)
        except MalformedResponse as exc:
            last_error = exc
            logger.warning("Attempt %d: %s", attempts, exc)
            if attempts == 1:
                continue
            break
        except AltTextError as exc:
            last_error = exc
            logger.warning("Attempt %d failed (%s): %s", attempts, exc.kind, exc)
            break

        total_ms = round((time.monotonic() - t0) * 1000, 2)
        log_ai_run(
            scope="alttext",
            provider_result=last_result,
            prompt_text=ALTTEXT_PROMPT,
            extra_meta={"attempts": attempts, "source": "vision", "mime_type": mime_type},
        )
        return AltTextServiceResult(
            alt_text=alt_text,
            source="vision",
            attempts=attempts,
            provider=last_result.provider,
            model=last_result.model,
            total_latency_ms=total_ms,
        )

    if last_result is not None:
        log_ai_run(
            scope="alttext",
            provider_result=last_result,
            prompt_text=ALTTEXT_PROMPT,
            extra_meta={
                "attempts": attempts,
                "source": "fallback",
                "fallback_reason": last_error.kind if last_error else "unknown",
            },
        )

    return _fallback_result(
        filename,
        attempts=attempts,
        error=last_error,
        provider=last_result.provider if last_result else config.provider.name,
        model=last_result.model if last_result else config.model,
        t0=t0,
    )
