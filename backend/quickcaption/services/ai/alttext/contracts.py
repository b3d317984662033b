"""Alt-text scope contracts: AltTextResult + model output schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

SHORT_MAX_WORDS = 8

AltTextSource = Literal["vision", "fallback"]


class AltTextResult(BaseModel):
    """The three alt-text variants returned to the caller."""

    model_config = ConfigDict(frozen=True)

    accessible: str = Field(..., min_length=1)
    short: str = Field(..., min_length=1)
    seo: str = Field(..., min_length=1)


class AltTextPayload(BaseModel):
    """Schema the model's JSON must satisfy.

    Fields must be real JSON strings; numbers or lists are rejected instead of
    being coerced. Extra keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    accessible: StrictStr
    short: StrictStr
    seo: StrictStr

    @field_validator("accessible", "short", "seo")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        # json.loads lets lone surrogate escapes through; they cannot be sent back.
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("must be valid UTF-8 text") from exc
        return v

    def to_result(self) -> AltTextResult:
        return AltTextResult(accessible=self.accessible, short=self.short, seo=self.seo)


@dataclass(frozen=True)
class AltTextServiceResult:
    """Result from ``generate_alt_text`` including metadata."""

    alt_text: AltTextResult
    source: AltTextSource
    attempts: int
    provider: str
    model: str
    total_latency_ms: float
    fallback_reason: str | None = None
