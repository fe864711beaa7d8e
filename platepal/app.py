from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .errors import PlatePalError
from .llm.config import LLMConfig
from .llm.gemini_client import ensure_configured, generate_text
from .proxy.dependencies import get_http_client, get_llm_config
from .proxy.models import ErrorResponse, ProxyRequest, ProxyResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    async with httpx.AsyncClient() as client:
        app.state.http = client
        yield
    app.state.http = None


app = FastAPI(title="PlatePal API", version="1.0.0", lifespan=lifespan)


def _error(message: str) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=500)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/api/platepal",
    response_model=ProxyResponse,
    responses={500: {"model": ErrorResponse}},
)
async def platepal(
    request: Request,
    config: LLMConfig = Depends(get_llm_config),
    http: httpx.AsyncClient = Depends(get_http_client),
):
    # The body is read by hand so a missing key wins over a malformed body.
    try:
        ensure_configured(config)
        body = ProxyRequest.model_validate(await request.json())
        text = await generate_text(body.prompt, http, config=config)
        return ProxyResponse(text=text)
    except PlatePalError as exc:
        return _error(str(exc))
    except Exception as exc:
        logger.error("API route error", exc_info=True)
        return _error(f"Internal server error: {str(exc) or 'Unknown error'}")


def main() -> None:
    import uvicorn

    logging.basicConfig(level=os.environ.get("PLATEPAL_LOG_LEVEL", "INFO").upper())
    uvicorn.run(
        app,
        host=os.environ.get("PLATEPAL_API_HOST", "0.0.0.0"),
        port=int(os.environ.get("PLATEPAL_API_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
