from __future__ import annotations

import asyncio

import httpx
import pytest

from platepal.errors import ConfigurationError, UpstreamError
from platepal.llm.config import LLMConfig
from platepal.llm.gemini_client import build_payload, extract_text, generate_text

ENABLED_CONFIG = LLMConfig(api_key="test-key", base_url="https://gemini.test/v1", model="m")


@pytest.mark.parametrize(
    "data",
    [
        {},
        None,
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{}]}}]},
        {"candidates": [{"content": {"parts": [{"text": None}]}}]},
        {"candidates": "nope"},
    ],
)
def test_extract_text_missing_segment_is_empty(data):
    assert extract_text(data) == ""


def test_extract_text_takes_first_fragment_only():
    data = {
        "candidates": [
            {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
            {"content": {"parts": [{"text": "other candidate"}]}},
        ]
    }
    assert extract_text(data) == "first"


def test_build_payload_is_single_turn():
    assert build_payload("hi") == {"contents": [{"parts": [{"text": "hi"}]}]}


def test_endpoint_joins_base_and_model():
    config = LLMConfig(api_key="k", base_url="https://x.test/v1/", model="gemini-2.5-flash")
    assert config.endpoint == "https://x.test/v1/models/gemini-2.5-flash:generateContent"


def _run(prompt, handler, config=ENABLED_CONFIG):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await generate_text(prompt, http, config=config)

    return asyncio.run(go())


def test_generate_text_without_key_never_calls_out():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(ConfigurationError, match="API key not configured"):
        _run("vegan", handler, config=LLMConfig(api_key=""))
    assert calls == []


def test_generate_text_raises_upstream_error():
    with pytest.raises(UpstreamError) as excinfo:
        _run("vegan", lambda r: httpx.Response(503, text="overloaded"))
    assert excinfo.value.status_code == 503
    assert excinfo.value.body == "overloaded"
    assert str(excinfo.value) == "Gemini request failed: 503 - overloaded"


def test_generate_text_returns_text():
    body = {"candidates": [{"content": {"parts": [{"text": "hello"}]}}]}
    assert _run("vegan", lambda r: httpx.Response(200, json=body)) == "hello"
