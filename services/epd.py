"""EPD registry integration layer.
Provides a production-safe coefficient provider backed by a remote
Environmental Product Declaration registry (EC3-style JSON API). The core
treats it as an optional override of the local coefficient table.

Endpoint utilized:

GET {EPD_API_URL}/materials?category=<category>&type=<type_id>

Any transport, HTTP or payload failure yields ``None`` so the caller can fall
back to local data; this module never raises for remote problems.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests
from requests import Response

from config.constants import CATEGORY_UNITS
from core.models import CarbonCoefficient, MaterialCategory
from services.coefficients import CoefficientProvider

logger = logging.getLogger(__name__)

EPD_API_URL_ENV = "EPD_API_URL"
EPD_API_KEY_ENV = "EPD_API_KEY"
VALID_CONFIDENCE = {"low", "medium", "high"}


def _to_float(value: Any, default: Optional[float]) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _normalize_confidence(raw: Any) -> str:
    conf = str(raw or "medium").strip().lower()
    return conf if conf in VALID_CONFIDENCE else "medium"


class EpdRegistryProvider(CoefficientProvider):
    """Looks coefficients up in a remote EPD registry over HTTPS."""

    name = "epd"

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None, timeout_s: int = 10):
        self.base_url = (base_url or os.getenv(EPD_API_URL_ENV, "")).strip().rstrip("/")
        self.api_key = (api_key or os.getenv(EPD_API_KEY_ENV, "")).strip()
        self.timeout_s = timeout_s

    @classmethod
    def from_settings(cls, settings) -> "EpdRegistryProvider":
        return cls(settings.epd_api_url, settings.epd_api_key, settings.epd_timeout_s)

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    def _request(self, category: str, type_id: str) -> Response:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return requests.get(
            f"{self.base_url}/materials",
            params={"category": category, "type": type_id},
            headers=headers,
            timeout=self.timeout_s,
        )

    def get(self, category: MaterialCategory, type_id: str) -> Optional[CarbonCoefficient]:
        if not self.configured:
            return None
        category = MaterialCategory(category)
        try:
            resp = self._request(category.value, type_id)
            resp.raise_for_status()
            payload = resp.json() if resp.content else {}
        except (requests.RequestException, ValueError, TypeError) as exc:
            logger.warning("EPD registry lookup failed for %s/%s: %s", category.value, type_id, exc)
            return None

        # Accept a direct record as well as the paged {"results": [...]} shape.
        if isinstance(payload, dict) and "results" in payload:
            rows = payload.get("results") or []
            record = rows[0] if rows and isinstance(rows[0], dict) else None
        else:
            record = payload if isinstance(payload, dict) else None
        if not record:
            logger.info("EPD registry has no record for %s/%s", category.value, type_id)
            return None

        rate = _to_float(record.get("gwp_per_unit", record.get("rate")), None)
        if rate is None or rate < 0:
            logger.warning("EPD registry returned an unusable rate for %s/%s: %r",
                           category.value, type_id, record.get("gwp_per_unit", record.get("rate")))
            return None
        biogenic = _to_float(record.get("biogenic_storage", record.get("biogenic")), None)
        if biogenic is not None and biogenic > 0:
            biogenic = -biogenic

        return CarbonCoefficient(
            category=category,
            type_id=type_id,
            rate=rate,
            unit=str(record.get("unit") or CATEGORY_UNITS[category.value]),
            biogenic_storage=biogenic,
            source="external",
            confidence=_normalize_confidence(record.get("confidence")),
            base_rate=rate,
        )
