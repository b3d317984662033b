"""Alt-text endpoint: POST /api/v1/alttext."""

from __future__ import annotations

from fastapi import APIRouter, Response
from pydantic import BaseModel, ConfigDict, Field

from quickcaption.services.ai.alttext.contracts import AltTextResult
from quickcaption.services.ai.alttext.service import generate_alt_text

router = APIRouter()


class AltTextRequest(BaseModel):
    """Upload payload as produced by the browser page.

    ``base64`` and ``mimeType`` are optional at the schema level so that their
    absence is reported as a 400 ``MissingInput`` instead of a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    base64: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")
    filename: str | None = None


@router.post(
    "/alttext",
    response_model=AltTextResult,
    summary="Generate accessible, short and SEO alt text for an image",
)
async def alttext_endpoint(body: AltTextRequest, response: Response):
    result = await generate_alt_text(body.base64, body.mime_type, body.filename)

    response.headers["X-AltText-Source"] = result.source
    response.headers["X-AltText-Attempts"] = str(result.attempts)
    return result.alt_text
