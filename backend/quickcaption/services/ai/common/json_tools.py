"""JSON extraction from free-form model text.

Models wrap JSON in different ways, so candidates are tried in a fixed order:

1. the interior of a fenced code block (```` ```json ... ``` ````),
2. the greedy span from the first ``{`` to the last ``}``,
3. the whole trimmed text.

Only the first matching heuristic is used; a later one is never consulted
when an earlier one matched.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from .errors import MalformedResponse

logger = logging.getLogger(__name__)

_FENCED_BLOCK_RE = re.compile(r"```(?:[A-Za-z0-9_+-]+)?\s*([\s\S]*?)\s*```")
_BRACE_SPAN_RE = re.compile(r"\{[\s\S]*\}")


def extract_json_candidate(text: str) -> str:
    """Return the substring of *text* that should be parsed as JSON."""
    fenced = _FENCED_BLOCK_RE.search(text)
    if fenced:
        return fenced.group(1)

    span = _BRACE_SPAN_RE.search(text)
    if span:
        return span.group(0)

    return text.strip()


def parse_json_candidate(text: str) -> Any:
    """Extract and parse JSON from *text*, raising ``MalformedResponse``."""
    candidate = extract_json_candidate(text)
    try:
        return json.loads(candidate)
    except (json.JSONDecodeError, ValueError) as exc:
        logger.debug("JSON candidate rejected: %r", candidate[:200])
        raise MalformedResponse(f"Failed to parse JSON: {exc}") from exc
