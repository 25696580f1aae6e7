# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Runtime Settings
# © 2026 Aparajita Parihar. All rights reserved.
#
# Reads engine options from the process environment. A .env file at the
# repository root is loaded first (python-dotenv), so local overrides never
# need to be exported by hand. Real environment variables win over .env.
#
# Malformed values never crash start-up: they are logged and replaced by the
# defaults from config/constants.py.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from config.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CACHE_MAX_AGE_S,
    DEFAULT_CACHE_MAX_ENTRIES,
    DEFAULT_PROJECT_LIFE_YEARS,
)

logger = logging.getLogger(__name__)

_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
load_dotenv(_env_path)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d: must be >= %d, using %d", name, value, minimum, default)
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logger.warning("Ignoring %s=%r: not a boolean, using %s", name, raw, default)
    return default


@dataclass(frozen=True)
class EngineSettings:
    project_life_years: int = DEFAULT_PROJECT_LIFE_YEARS
    batch_size: int = DEFAULT_BATCH_SIZE
    cache_max_age_s: int = DEFAULT_CACHE_MAX_AGE_S
    cache_max_entries: int = DEFAULT_CACHE_MAX_ENTRIES
    prefer_external: bool = False
    include_module_d: bool = True
    include_sequestration: bool = True
    scope2_method: str = "location"
    enable_recommendations: bool = True
    epd_api_url: Optional[str] = None
    epd_api_key: Optional[str] = None
    epd_timeout_s: int = 10

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from CI_* / EPD_* environment variables."""
        method = os.getenv("CI_SCOPE2_METHOD", "location").strip().lower() or "location"
        if method not in ("location", "market"):
            logger.warning("Ignoring CI_SCOPE2_METHOD=%r: expected 'location' or 'market'", method)
            method = "location"
        return cls(
            project_life_years=_env_int("CI_PROJECT_LIFE_YEARS", DEFAULT_PROJECT_LIFE_YEARS, minimum=1),
            batch_size=_env_int("CI_BATCH_SIZE", DEFAULT_BATCH_SIZE, minimum=1),
            cache_max_age_s=_env_int("CI_CACHE_MAX_AGE_S", DEFAULT_CACHE_MAX_AGE_S),
            cache_max_entries=_env_int("CI_CACHE_MAX_ENTRIES", DEFAULT_CACHE_MAX_ENTRIES, minimum=1),
            prefer_external=_env_bool("CI_PREFER_EXTERNAL", False),
            include_module_d=_env_bool("CI_INCLUDE_MODULE_D", True),
            include_sequestration=_env_bool("CI_INCLUDE_SEQUESTRATION", True),
            scope2_method=method,
            enable_recommendations=_env_bool("CI_ENABLE_RECOMMENDATIONS", True),
            epd_api_url=os.getenv("EPD_API_URL", "").strip().rstrip("/") or None,
            epd_api_key=os.getenv("EPD_API_KEY", "").strip() or None,
            epd_timeout_s=_env_int("EPD_TIMEOUT_S", 10, minimum=1),
        )
