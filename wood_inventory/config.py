import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st

from wood_inventory.core.constants import DEFAULT_API_URL

# Mapping of configuration keys to their corresponding environment variables
_API_ENV_VARS = {
    "url": "API_URL",
    "download_dir": "DOWNLOAD_DIR",
}


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_API_URL
    download_dir: Path = Path(".")


def _secret(key: str) -> Optional[str]:
    """Return ``st.secrets["api"][key]`` or ``None`` when not configured."""
    try:
        if "api" in st.secrets:
            return st.secrets["api"].get(key)
    except FileNotFoundError:
        return None
    return None


def _setting(key: str) -> Optional[str]:
    return os.getenv(_API_ENV_VARS[key]) or _secret(key)


def load_api_config() -> ApiConfig:
    """Return API configuration from environment, Streamlit secrets or defaults."""
    base_url = (_setting("url") or DEFAULT_API_URL).rstrip("/")
    download_dir = Path(_setting("download_dir") or ".")
    return ApiConfig(base_url=base_url, download_dir=download_dir)
