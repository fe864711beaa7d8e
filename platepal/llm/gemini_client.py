from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..errors import ConfigurationError, UpstreamError
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

_PROMPT_LOG_CHARS = 100


def build_payload(prompt: str) -> dict[str, Any]:
    """Single-turn generateContent body."""
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_text(data: Any) -> str:
    """
    Return ``candidates[0].content.parts[0].text`` from a Gemini response.

    Any missing or mistyped segment along the way yields ``""``.
    """
    node: Any = data
    for key in ("candidates", 0, "content", "parts", 0, "text"):
        if isinstance(key, int):
            if not isinstance(node, list) or len(node) <= key:
                return ""
        elif not isinstance(node, dict) or key not in node:
            return ""
        node = node[key]
    if node is None:
        return ""
    return node if isinstance(node, str) else str(node)


def ensure_configured(config: LLMConfig) -> None:
    """Raise ``ConfigurationError`` when the Gemini API key is missing."""
    if not config.api_key:
        logger.error("GEMINI_API_KEY environment variable is not set")
        raise ConfigurationError("API key not configured")


async def generate_text(
    prompt: str,
    http: httpx.AsyncClient,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """
    Forward ``prompt`` to Gemini and return the first text fragment.

    Raises ``ConfigurationError`` before any network traffic when the API key
    is missing, and ``UpstreamError`` when Gemini answers with a non-2xx
    status. Transport errors propagate unchanged.
    """
    ensure_configured(config)

    logger.info("Making request to Gemini with prompt: %s...", prompt[:_PROMPT_LOG_CHARS])

    resp = await http.post(
        config.endpoint,
        params={"key": config.api_key},
        headers={"Content-Type": "application/json"},
        json=build_payload(prompt),
        timeout=config.timeout,
    )
    logger.info("Gemini response status: %s", resp.status_code)

    if not resp.is_success:
        logger.error("Gemini API error: %s", resp.text)
        raise UpstreamError(resp.status_code, resp.text)

    data = resp.json()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Gemini response data: %s", json.dumps(data, indent=2))

    return extract_text(data)
