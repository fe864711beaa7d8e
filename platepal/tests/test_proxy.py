from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from platepal.app import app
from platepal.llm.config import LLMConfig
from platepal.proxy.dependencies import get_http_client, get_llm_config

client = TestClient(app)

CONFIGURED = LLMConfig(
    api_key="test-key",
    model="gemini-2.5-flash",
    base_url="https://generativelanguage.googleapis.com/v1",
)
UNCONFIGURED = LLMConfig(api_key="")


def _gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _use_upstream(config: LLMConfig, handler) -> list[httpx.Request]:
    """Route the proxy's outbound calls to ``handler`` and record them."""
    calls: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    async def _client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(recording)) as http:
            yield http

    app.dependency_overrides[get_llm_config] = lambda: config
    app.dependency_overrides[get_http_client] = _client
    return calls


@pytest.fixture(autouse=True)
def _clear_overrides():
    yield
    app.dependency_overrides.clear()


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ── Configuration errors ─────────────────────────────────────────────────


def test_missing_api_key_returns_500_without_outbound_call():
    calls = _use_upstream(UNCONFIGURED, lambda r: httpx.Response(200, json=_gemini_body("x")))
    resp = client.post("/api/platepal", json={"prompt": "vegan near 10001"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "API key not configured"}
    assert calls == []


def test_missing_api_key_wins_over_malformed_body():
    calls = _use_upstream(UNCONFIGURED, lambda r: httpx.Response(200, json=_gemini_body("x")))
    resp = client.post("/api/platepal", json={"not_prompt": 1})
    assert resp.status_code == 500
    assert resp.json() == {"error": "API key not configured"}
    assert calls == []


# ── Upstream success ─────────────────────────────────────────────────────


def test_forwards_prompt_and_returns_first_text():
    calls = _use_upstream(
        CONFIGURED, lambda r: httpx.Response(200, json=_gemini_body('[{"name": "Leaf"}]'))
    )
    resp = client.post("/api/platepal", json={"prompt": "vegan near 10001"})

    assert resp.status_code == 200
    assert resp.json() == {"text": '[{"name": "Leaf"}]'}

    assert len(calls) == 1
    outbound = calls[0]
    assert outbound.method == "POST"
    assert outbound.url.path == "/v1/models/gemini-2.5-flash:generateContent"
    assert outbound.url.params["key"] == "test-key"
    assert json.loads(outbound.content) == {"contents": [{"parts": [{"text": "vegan near 10001"}]}]}


def test_missing_text_segment_returns_empty_string():
    _use_upstream(CONFIGURED, lambda r: httpx.Response(200, json={"candidates": []}))
    resp = client.post("/api/platepal", json={"prompt": "halal"})
    assert resp.status_code == 200
    assert resp.json() == {"text": ""}


# ── Upstream and unexpected failures ─────────────────────────────────────


def test_upstream_error_embeds_status_and_body():
    _use_upstream(CONFIGURED, lambda r: httpx.Response(429, text="quota exceeded"))
    resp = client.post("/api/platepal", json={"prompt": "keto"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Gemini request failed: 429 - quota exceeded"}


def test_transport_failure_is_reported_generically():
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _use_upstream(CONFIGURED, boom)
    resp = client.post("/api/platepal", json={"prompt": "keto"})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Internal server error: connection refused"


def test_malformed_body_is_reported_generically():
    calls = _use_upstream(CONFIGURED, lambda r: httpx.Response(200, json=_gemini_body("x")))
    resp = client.post("/api/platepal", json={"prompt": None})
    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Internal server error:")
    assert calls == []


def test_non_json_upstream_body_is_reported_generically():
    _use_upstream(CONFIGURED, lambda r: httpx.Response(200, text="<html>oops</html>"))
    resp = client.post("/api/platepal", json={"prompt": "raw"})
    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Internal server error:")
