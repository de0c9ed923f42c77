"""Configuration loading for collection-browser."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_API_KEY = "9pufSer3"
DEFAULT_BASE_URL = "https://www.rijksmuseum.nl/api/en"
DEFAULT_FAVORITES_PATH = Path.home() / ".collection_browser" / "favorites.json"


class SourceConfig(BaseModel):
    api_key: str = DEFAULT_API_KEY
    base_url: str = DEFAULT_BASE_URL
    page_size: int = 10
    timeout_s: float = 20.0


class AppConfig(BaseModel):
    source: SourceConfig = SourceConfig()
    debounce_s: float = 0.5
    favorites_path: Path = DEFAULT_FAVORITES_PATH
    auto_select_first: bool = False


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_config(env_path: str | Path | None = None) -> AppConfig:
    """Load configuration from environment variables (.env file)."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    source = SourceConfig(
        api_key=os.getenv("RIJKS_API_KEY") or DEFAULT_API_KEY,
        base_url=os.getenv("RIJKS_BASE_URL") or DEFAULT_BASE_URL,
        page_size=int(os.getenv("RIJKS_PAGE_SIZE", "10")),
        timeout_s=float(os.getenv("RIJKS_TIMEOUT_S", "20.0")),
    )

    favorites_path = os.getenv("FAVORITES_PATH")

    return AppConfig(
        source=source,
        debounce_s=float(os.getenv("SEARCH_DEBOUNCE_S", "0.5")),
        favorites_path=Path(favorites_path).expanduser()
        if favorites_path
        else DEFAULT_FAVORITES_PATH,
        auto_select_first=_env_bool("AUTO_SELECT_FIRST", False),
    )
