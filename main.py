"""FastAPI application exposing the CSS selector builder.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import os
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env next to this file so SELECTOR_KIT_* settings are set
load_dotenv(Path(__file__).resolve().parent / ".env")

from builder.compose import compose
from builder.errors import SelectorError
from models.rectangle import Rectangle, RectangleResponse
from models.selectors import ErrorResponse, SelectorRequest, SelectorResponse

APP_TITLE = os.getenv("SELECTOR_KIT_TITLE", "Selector Kit")


def resolve_log_level(name: str) -> int:
    """Map a level name to its number, falling back to INFO if unknown."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.INFO


LOG_LEVEL = resolve_log_level(os.getenv("SELECTOR_KIT_LOG_LEVEL", "INFO"))


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("path", "selector", "category", "status"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("selector_kit")
# Module reloads must not stack handlers
if not logger.handlers:
    logger.addHandler(_handler)
logger.setLevel(LOG_LEVEL)
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title=APP_TITLE)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(SelectorError)
async def selector_error_handler(request: Request, exc: SelectorError) -> JSONResponse:
    """Reject selectors that break ordering or uniqueness with a 422."""
    category = getattr(exc, "category", None)
    logger.warning(
        "selector rejected: %s",
        exc,
        extra={
            "path": request.url.path,
            "category": category.value if category is not None else None,
            "status": 422,
        },
    )
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a generic 500."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
        extra={"path": request.url.path, "status": 500},
    )
    body = ErrorResponse(error="InternalError", detail="internal server error")
    return JSONResponse(status_code=500, content=body.model_dump())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/selectors", response_model=SelectorResponse)
async def build_selector(request: SelectorRequest) -> SelectorResponse:
    """Render a selector expression to text.

    Compound selectors are validated part by part; combined selectors are
    rendered recursively.
    """
    text = compose(request.selector).stringify()
    logger.info("selector built", extra={"selector": text, "status": 200})
    return SelectorResponse(selector=text)


@app.post("/rectangles", response_model=RectangleResponse)
async def create_rectangle(request: Rectangle) -> RectangleResponse:
    """Return the rectangle's dimensions together with its area."""
    area = request.get_area()
    logger.info("rectangle created", extra={"status": 200})
    return RectangleResponse(width=request.width, height=request.height, area=area)
