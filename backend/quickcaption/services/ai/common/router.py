"""AI Router: resolves provider + model + call options from settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quickcaption.core.config import get_settings

from .providers import BaseProvider, get_provider

logger = logging.getLogger(__name__)

# Settings attribute naming the provider for each scope.
SCOPE_PROVIDER_SETTINGS: dict[str, str] = {
    "alttext": "ai_alttext_provider",
}


@dataclass(frozen=True)
class ResolvedConfig:
    """Final resolved provider + model for one request."""

    provider: BaseProvider
    model: str
    temperature: float
    max_tokens: int
    timeout_seconds: float


def resolve(scope: str) -> ResolvedConfig:
    """Resolve provider + model for a given *scope*.

    Settings are read at call time, so environment changes picked up by a
    fresh ``get_settings()`` apply to the next request.
    """
    if scope not in SCOPE_PROVIDER_SETTINGS:
        raise ValueError(f"Unknown AI scope: {scope!r}")

    settings = get_settings()
    provider_name = getattr(settings, SCOPE_PROVIDER_SETTINGS[scope])

    model = settings.ollama_model.strip() if provider_name == "ollama" else ""

    logger.debug("Resolved scope=%s provider=%s model=%s", scope, provider_name, model or "-")

    return ResolvedConfig(
        provider=get_provider(provider_name),
        model=model,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
        timeout_seconds=settings.ollama_timeout_seconds,
    )
