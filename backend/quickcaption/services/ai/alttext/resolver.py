"""Turn raw model text into a validated ``AltTextResult``."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..common.errors import InvalidShape
from ..common.json_tools import parse_json_candidate
from .contracts import AltTextPayload, AltTextResult

logger = logging.getLogger(__name__)


def resolve_alt_text(raw_text: str) -> AltTextResult:
    """Extract, parse and validate the model's JSON answer.

    Raises:
        MalformedResponse: no parseable JSON could be found.
        InvalidShape: JSON parsed, but ``accessible``/``short``/``seo`` are
            missing, not strings, or blank.
    """
    parsed = parse_json_candidate(raw_text)

    if not isinstance(parsed, dict):
        raise InvalidShape(f"Invalid response structure: expected object, got {type(parsed).__name__}")

    try:
        payload = AltTextPayload.model_validate(parsed)
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        logger.debug("Alt-text payload rejected on fields %s", fields)
        raise InvalidShape(f"Invalid response structure: {', '.join(fields) or 'payload'}") from exc

    return payload.to_result()
