"""Deterministic, network-free alt text derived from the upload's filename."""

from __future__ import annotations

import re

from .contracts import SHORT_MAX_WORDS, AltTextResult

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_SEPARATOR_RE = re.compile(r"[-_]")


def filename_tokens(filename: str) -> list[str]:
    """Split a filename into words: drop the extension, treat ``-``/``_`` as spaces."""
    name = _EXTENSION_RE.sub("", filename)
    name = _SEPARATOR_RE.sub(" ", name)
    return name.split()


def generate_placeholder_alt_text(filename: str) -> AltTextResult:
    """Build alt text from *filename* alone.

    ``"sunset-beach.jpg"`` gives ``"An image showing sunset beach."``,
    ``"sunset beach"`` and ``"sunset beach image."``.

    An empty name yields ``seo == " image."`` with a leading space; this is
    kept as-is.
    """
    words = filename_tokens(filename)
    joined = " ".join(words)

    return AltTextResult(
        accessible=f"An image showing {joined or 'content'}.",
        short=" ".join(words[:SHORT_MAX_WORDS]) or "Image",
        seo=f"{joined} image.",
    )
