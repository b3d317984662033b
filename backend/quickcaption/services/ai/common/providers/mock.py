"""Mock provider: deterministic responses for tests and offline development."""

from __future__ import annotations

import json
import time

from .base import BaseProvider, ProviderResult

MOCK_ALT_TEXT = {
    "accessible": "A placeholder image used while no vision model is configured.",
    "short": "Placeholder image",
    "seo": "Placeholder image for alt text generation.",
}


class MockProvider(BaseProvider):
    name = "mock"

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
        t0 = time.monotonic()
        text = json.dumps(MOCK_ALT_TEXT)
        elapsed = (time.monotonic() - t0) * 1000
        return ProviderResult(
            raw_text=text,
            model=model or "mock-v1",
            provider=self.name,
            prompt_tokens=len(prompt.split()),
            completion_tokens=len(text.split()),
            latency_ms=round(elapsed, 2),
        )
