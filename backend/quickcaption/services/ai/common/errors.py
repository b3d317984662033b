"""Error taxonomy for the alt-text pipeline.

Every failure carries a stable ``kind`` so callers branch on type, never on
message text.
"""

from __future__ import annotations

OLLAMA_REMEDIATION_HINT = (
    "Ollama is not running. Please start Ollama and ensure a vision model is "
    "installed (e.g., `ollama pull llava`)"
)


class AltTextError(Exception):
    """Base class for all expected alt-text failures."""

    kind: str = "alttext_error"
    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind)
        self.message = message or self.kind


class MissingInput(AltTextError):
    """Image payload or media type absent; raised before any network call."""

    kind = "missing_input"
    status_code = 400


class EndpointUnavailable(AltTextError):
    """The inference service could not be reached (refused, DNS, timeout)."""

    kind = "endpoint_unavailable"
    status_code = 503

    def __init__(self, message: str = "", *, hint: str = OLLAMA_REMEDIATION_HINT) -> None:
        super().__init__(message or hint)
        self.hint = hint


class EndpointError(AltTextError):
    """The inference service answered, but not with a usable success."""

    kind = "endpoint_error"
    status_code = 502

    def __init__(self, message: str = "", *, status: int | None = None, body: str = "") -> None:
        super().__init__(message or f"Ollama API error: {body}")
        self.status = status
        self.body = body


class MalformedResponse(AltTextError):
    """Model text did not contain parseable JSON. Eligible for one retry."""

    kind = "malformed_response"
    status_code = 502


class InvalidShape(AltTextError):
    """JSON parsed but lacks string ``accessible`` / ``short`` / ``seo``."""

    kind = "invalid_shape"
    status_code = 502
