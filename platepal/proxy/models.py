from __future__ import annotations

from pydantic import BaseModel


class ProxyRequest(BaseModel):
    prompt: str


class ProxyResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
