"""Provider factory: returns the configured provider instance."""

from __future__ import annotations

import logging

from quickcaption.core.config import get_settings

from ..errors import EndpointUnavailable
from .base import BaseProvider, ProviderResult
from .mock import MockProvider

logger = logging.getLogger(__name__)

__all__ = ["get_provider", "BaseProvider", "ProviderResult", "MockProvider"]

KNOWN_PROVIDERS = ("ollama", "mock")


def get_provider(provider_name: str) -> BaseProvider:
    """Return a provider instance for *provider_name*.

    An unknown name raises ``EndpointUnavailable`` so the caller takes the
    filename fallback instead of reporting mock output as a vision result.
    """
    settings = get_settings()
    name = provider_name.lower().strip()

    if name == "mock":
        return MockProvider()

    if name == "ollama":
        from .ollama import OllamaProvider

        return OllamaProvider(base_url=settings.ollama_api_url)

    logger.warning("Unknown provider %r (known: %s)", name, ", ".join(KNOWN_PROVIDERS))
    raise EndpointUnavailable(
        f"Unknown AI provider {name!r}",
        hint=f"Set AI_ALTTEXT_PROVIDER to one of: {', '.join(KNOWN_PROVIDERS)}",
    )
