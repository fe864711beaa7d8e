from __future__ import annotations

import logging

import httpx

from ..errors import PlatePalError, SearchValidationError
from .api_client import request_completion
from .config import DEFAULT_CLIENT_CONFIG, ClientConfig
from .models import Restaurant, SearchForm
from .parsing import parse_restaurants
from .prompts import build_prompt
from .sorting import sort_restaurants

logger = logging.getLogger(__name__)


def validate(form: SearchForm) -> None:
    """Raise ``SearchValidationError`` unless the form has a preference and a location."""
    if not form.diet_prefs.strip() and not form.has_customizations:
        raise SearchValidationError("Please enter your dietary preferences")
    if form.location is None and not form.zipcode.strip():
        raise SearchValidationError("Please get your location or enter a zipcode")


async def run_search(
    form: SearchForm,
    http: httpx.AsyncClient,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
) -> SearchForm:
    """
    Run one search against the proxy and store the outcome on ``form``.

    Failures land in ``form.error`` and leave the previous results in place.
    A search started while another is loading is ignored.
    """
    if form.loading:
        logger.info("Search already in progress; ignoring request")
        return form

    form.error = None
    try:
        validate(form)
    except SearchValidationError as exc:
        form.error = str(exc)
        return form

    form.loading = True
    try:
        text = await request_completion(http, build_prompt(form), config=config)
        form.restaurants = parse_restaurants(text)
    except PlatePalError as exc:
        logger.error("Search failed: %s", exc)
        form.error = str(exc)
    except httpx.HTTPError as exc:
        logger.error("Search request failed: %s", exc)
        form.error = f"Network error: {exc}" if str(exc) else "Network error"
    except ValueError as exc:
        logger.error("Proxy sent an unreadable response: %s", exc)
        form.error = "Received an unreadable response from the server"
    finally:
        form.loading = False
    return form


async def refresh(
    form: SearchForm,
    http: httpx.AsyncClient,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
) -> SearchForm:
    """Re-run the search, only once both coordinates and preferences are set."""
    if form.location is None or not form.diet_prefs.strip():
        return form
    return await run_search(form, http, config=config)


def dismiss_error(form: SearchForm) -> SearchForm:
    form.error = None
    return form


def visible_restaurants(form: SearchForm) -> list[Restaurant]:
    """Results in the order the current sort mode asks for."""
    return sort_restaurants(form.restaurants, form.sort_mode)
