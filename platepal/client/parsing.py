from __future__ import annotations

import json
import logging
import re

from ..errors import ParseError
from .models import Restaurant

logger = logging.getLogger(__name__)

# Greedy: first "[" through last "]" so nested arrays stay intact.
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")

PARSE_ERROR_MESSAGE = "Could not parse restaurant data from response"


def parse_restaurants(text: str) -> list[Restaurant]:
    """Extract the JSON array of restaurants buried in the model's reply."""
    match = _ARRAY_RE.search(text or "")
    if not match:
        raise ParseError(PARSE_ERROR_MESSAGE)

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.warning("Model reply held an invalid JSON array: %s", exc)
        raise ParseError(PARSE_ERROR_MESSAGE) from exc

    if not isinstance(parsed, list):
        raise ParseError(PARSE_ERROR_MESSAGE)

    return [Restaurant.model_validate(item) for item in parsed if isinstance(item, dict)]
