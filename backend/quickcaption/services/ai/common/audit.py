"""AI audit: one structured log line per model run."""

from __future__ import annotations

import hashlib
import logging
from typing import Any

from quickcaption.core.config import get_settings

from .providers.base import ProviderResult

logger = logging.getLogger("quickcaption.audit")

# Scope-dependent audit actions. Falls back to "AI_RUN" for unknown scopes.
SCOPE_ACTIONS: dict[str, str] = {
    "alttext": "AI_ALTTEXT_GENERATED",
}


def _hash_bytes(text: str) -> bytes:
    # Model output may hold lone surrogates; hash them rather than fail.
    return text.encode("utf-8", "surrogatepass")


def build_ai_run_metadata(
    *,
    scope: str,
    provider_result: ProviderResult,
    prompt_text: str,
    extra_meta: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the metadata dict describing a single model run.

    * Prompt and response are always hashed; raw text is only included when
      ``AI_DEBUG_LOG_RAW=true``.
    """
    settings = get_settings()

    metadata: dict[str, Any] = {
        "action": SCOPE_ACTIONS.get(scope, "AI_RUN"),
        "scope": scope,
        "provider": provider_result.provider,
        "model": provider_result.model,
        "prompt_tokens": provider_result.prompt_tokens,
        "completion_tokens": provider_result.completion_tokens,
        "latency_ms": provider_result.latency_ms,
        "prompt_hash": hashlib.sha256(_hash_bytes(prompt_text)).hexdigest(),
        "response_hash": hashlib.sha256(_hash_bytes(provider_result.raw_text)).hexdigest(),
    }

    if settings.ai_debug_log_raw:
        metadata["prompt_raw"] = prompt_text
        metadata["response_raw"] = provider_result.raw_text

    if extra_meta:
        metadata.update(extra_meta)

    return metadata


def log_ai_run(
    *,
    scope: str,
    provider_result: ProviderResult,
    prompt_text: str,
    extra_meta: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Log an audit entry for one model run and return its metadata."""
    metadata = build_ai_run_metadata(
        scope=scope,
        provider_result=provider_result,
        prompt_text=prompt_text,
        extra_meta=extra_meta,
    )
    logger.info(
        "%s provider=%s model=%s latency_ms=%s",
        metadata["action"],
        metadata["provider"],
        metadata["model"],
        metadata["latency_ms"],
        extra={"ai_run": metadata},
    )
    return metadata
