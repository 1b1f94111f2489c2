from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens for the dashboard UI.
# - Centralized here so components/styles.py and Plotly charts agree.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F5F6F8",     # page background
    "bg_card": "#FFFFFF",        # card surface
    # Accents
    "accent_primary": "#2563EB",    # blue 600
    "navy_900": "#0B1220",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Invoice status colors
    "success": "#067647",
    "warning": "#F59E0B",
}


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class AppConfig:
    # Required: the app cannot start without a database
    postgres_url: str

    # Optional connection tuning
    postgres_schema: str
    postgres_sslmode: Optional[str]
    pool_max_size: int
    pool_timeout: float

    log_level: str

    @property
    def fq_schema(self) -> str:
        # Quoted so mixed-case schema names survive
        return '"{}"'.format(self.postgres_schema.replace('"', '""'))


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Raises ConfigError when POSTGRES_URL is missing; callers must not catch it
    """
    load_dotenv(override=False)

    postgres_url = _getenv("POSTGRES_URL")
    if not postgres_url:
        raise ConfigError("POSTGRES_URL is not set in environment variables.")

    return AppConfig(
        postgres_url=postgres_url,
        postgres_schema=_getenv("POSTGRES_SCHEMA", "public") or "public",
        postgres_sslmode=_getenv("POSTGRES_SSLMODE"),
        pool_max_size=int(_getenv("POSTGRES_POOL_MAX", "10") or "10"),
        pool_timeout=float(_getenv("POSTGRES_POOL_TIMEOUT", "30") or "30"),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
