import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from quickcaption.api.v1.alttext import router as alttext_router
from quickcaption.core.config import get_settings
from quickcaption.core.logging import setup_logging
from quickcaption.services.ai.common.errors import AltTextError

settings = get_settings()
setup_logging()

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal error"

app = FastAPI(
    title="QuickCaption API",
    version="0.1.0",
    docs_url="/docs" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
        expose_headers=["X-AltText-Source", "X-AltText-Attempts"],
    )

app.include_router(alttext_router, prefix="/api/v1", tags=["alttext"])

STATIC_DIR = Path(__file__).resolve().parent / "static"


@app.exception_handler(AltTextError)
async def _alttext_error_handler(request: Request, exc: AltTextError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Alt text generation error")
    message = str(exc) if get_settings().expose_error_details else GENERIC_ERROR_MESSAGE
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to generate alt text", "message": message},
    )


def _page_headers() -> dict:
    return {
        "Cache-Control": "no-store",
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data: blob:; "
            "connect-src 'self'"
        ),
    }


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.get("/")
async def upload_page():
    return FileResponse(STATIC_DIR / "index.html", headers=_page_headers())


def run() -> None:
    """Serve the app with uvicorn on ``HOST``/``PORT``."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
