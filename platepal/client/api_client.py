from __future__ import annotations

import logging

import httpx

from ..errors import RequestFailedError
from .config import DEFAULT_CLIENT_CONFIG, ClientConfig

logger = logging.getLogger(__name__)

PROXY_PATH = "/api/platepal"


async def request_completion(
    http: httpx.AsyncClient,
    prompt: str,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
) -> str:
    """POST the prompt to the proxy and return the raw model text."""
    resp = await http.post(
        f"{config.api_url.rstrip('/')}{PROXY_PATH}",
        json={"prompt": prompt},
        timeout=config.timeout,
    )
    if not resp.is_success:
        logger.error("Proxy returned %s: %s", resp.status_code, resp.text)
        raise RequestFailedError(resp.status_code)
    data = resp.json()
    text = data.get("text") if isinstance(data, dict) else None
    return text if isinstance(text, str) else ""
