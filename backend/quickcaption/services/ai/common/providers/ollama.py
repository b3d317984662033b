"""Local Ollama provider (``/api/generate`` with inline base64 images)."""

from __future__ import annotations

import logging
import time

from ..errors import EndpointError, EndpointUnavailable
from .base import BaseProvider, ProviderResult

logger = logging.getLogger(__name__)


class OllamaProvider(BaseProvider):
    name = "ollama"

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def generate_url(self) -> str:
        return f"{self._base_url}/api/generate"

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
        import httpx

        model = model or "llava"
        t0 = time.monotonic()

        try:
            async with httpx.AsyncClient(timeout=timeout_seconds) as client:
                resp = await client.post(
                    self.generate_url,
                    headers={"Content-Type": "application/json"},
                    json={
                        "model": model,
                        "prompt": prompt,
                        "images": images,
                        "stream": False,
                        "options": {
                            "temperature": temperature,
                            "num_predict": max_tokens,
                        },
                    },
                )
        except httpx.TransportError as exc:
            logger.warning("Ollama unreachable at %s: %s", self._base_url, exc)
            raise EndpointUnavailable() from exc

        if not resp.is_success:
            body = resp.text
            logger.warning("Ollama returned HTTP %d: %s", resp.status_code, body[:500])
            raise EndpointError(status=resp.status_code, body=body)

        try:
            data = resp.json()
        except ValueError as exc:
            raise EndpointError("Ollama returned a non-JSON body", status=resp.status_code, body=resp.text) from exc

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise EndpointError("No content returned from Ollama", status=resp.status_code, body=resp.text)

        elapsed = (time.monotonic() - t0) * 1000

        return ProviderResult(
            raw_text=text.strip(),
            model=model,
            provider=self.name,
            prompt_tokens=data.get("prompt_eval_count", 0) or 0,
            completion_tokens=data.get("eval_count", 0) or 0,
            latency_ms=round(elapsed, 2),
        )
