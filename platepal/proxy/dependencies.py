from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Request

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig


def get_llm_config() -> LLMConfig:
    return DEFAULT_LLM_CONFIG


async def get_http_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the app-wide client, or a short-lived one when lifespan never ran."""
    shared = getattr(request.app.state, "http", None)
    if shared is not None:
        yield shared
        return
    async with httpx.AsyncClient() as client:
        yield client
