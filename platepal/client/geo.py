from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from .config import DEFAULT_CLIENT_CONFIG, ClientConfig
from .models import Location, Restaurant, SearchForm

logger = logging.getLogger(__name__)

# Options handed to navigator.geolocation.getCurrentPosition.
GEOLOCATION_OPTIONS = {"enableHighAccuracy": True, "timeout": 15000}

# Characters encodeURIComponent leaves alone on top of quote()'s defaults.
_URI_COMPONENT_SAFE = "!*'()"


def maps_url(restaurant: Restaurant, config: ClientConfig = DEFAULT_CLIENT_CONFIG) -> str:
    """Map-search link for a result card, built from name and address."""
    query = quote(f"{restaurant.name} {restaurant.address or ''}".strip(), safe=_URI_COMPONENT_SAFE)
    return f"{config.maps_search_url}?api=1&query={query}"


async def reverse_geocode(
    http: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
) -> str | None:
    """
    Look up the postcode for a coordinate pair.

    Returns ``None`` when the lookup fails or carries no postcode; failures
    are logged, never raised.
    """
    try:
        resp = await http.get(
            config.reverse_geocode_url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "localityLanguage": "en",
            },
            timeout=config.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Failed to get zipcode: %s", exc)
        return None

    postcode = data.get("postcode") if isinstance(data, dict) else None
    return str(postcode) if postcode else None


async def apply_position(
    form: SearchForm,
    http: httpx.AsyncClient,
    latitude: float | None,
    longitude: float | None,
    config: ClientConfig = DEFAULT_CLIENT_CONFIG,
) -> SearchForm:
    """
    Store a browser position on the form and fill the zipcode from it.

    A missing position means geolocation was denied or unavailable: the form
    is left as it was so the zipcode box still works.
    """
    if latitude is None or longitude is None:
        logger.warning("Geolocation unavailable; keeping the zipcode fallback")
        return form

    form.location = Location(latitude=latitude, longitude=longitude)
    postcode = await reverse_geocode(http, latitude, longitude, config=config)
    if postcode:
        form.zipcode = postcode
    return form
