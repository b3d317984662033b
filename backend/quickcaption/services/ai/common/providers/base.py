"""Abstract base for all AI providers."""

from __future__ import annotations

import abc
from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderResult:
    """Immutable result returned by every provider."""

    raw_text: str
    model: str
    provider: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    latency_ms: float = 0.0


class BaseProvider(abc.ABC):
    """Contract that every vision provider must implement."""

    name: str = "base"

    @abc.abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        images: list[str],
        model: str = "",
        temperature: float = 0.7,
        max_tokens: int = 200,
        timeout_seconds: float = 60.0,
    ) -> ProviderResult:
        """Send *prompt* with base64 *images* and return a ``ProviderResult``.

        Implementations raise ``EndpointUnavailable`` when the service cannot
        be reached and ``EndpointError`` for any non-success answer.
        """
