"""
Proxy endpoint package.

Responsibilities:
- Define the request/response bodies of ``POST /api/platepal``.
- Provide the FastAPI dependencies the route resolves (config, HTTP client).
"""
