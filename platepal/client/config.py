from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ClientConfig:
    api_url: str = os.getenv("PLATEPAL_API_URL", "http://localhost:8000")
    reverse_geocode_url: str = os.getenv(
        "PLATEPAL_REVERSE_GEOCODE_URL",
        "https://api.bigdatacloud.net/data/reverse-geocode-client",
    )
    maps_search_url: str = "https://www.google.com/maps/search/"
    timeout: float = float(os.getenv("PLATEPAL_CLIENT_TIMEOUT", "90"))
    ui_host: str = os.getenv("PLATEPAL_UI_HOST", "0.0.0.0")
    ui_port: int = int(os.getenv("PLATEPAL_UI_PORT", "7860"))


DEFAULT_CLIENT_CONFIG = ClientConfig()
