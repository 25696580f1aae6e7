# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Shared Test Fixtures
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import copy
import dataclasses
import os
import sys
import threading
import time
from datetime import datetime, timezone

import pytest

_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root not in sys.path:
    sys.path.insert(0, _root)

from config.settings import EngineSettings
from core.engine import CarbonIntelligenceCore
from core.models import (
    BuildingType,
    CarbonCoefficient,
    Location,
    MaterialCategory,
    MaterialLineItem,
    Project,
)
from services.coefficients import CoefficientProvider


class FakeProvider(CoefficientProvider):
    """In-memory provider. Records calls and the peak number of concurrent lookups."""

    name = "fake"

    def __init__(self, rates=None, fail=False, delay_s=0.0):
        self.rates = dict(rates or {})
        self.fail = fail
        self.delay_s = delay_s
        self.calls: list[tuple[str, str]] = []
        self.in_flight = 0
        self.peak_in_flight = 0
        self._lock = threading.Lock()

    def get(self, category, type_id):
        with self._lock:
            self.calls.append((MaterialCategory(category).value, type_id))
            self.in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            if self.delay_s:
                time.sleep(self.delay_s)
            if self.fail:
                raise RuntimeError("provider unavailable")
            rate = self.rates.get(type_id)
            if rate is None:
                return None
            return CarbonCoefficient(
                category=MaterialCategory(category),
                type_id=type_id,
                rate=rate,
                unit="unit",
                source="external",
                base_rate=rate,
            )
        finally:
            with self._lock:
                self.in_flight -= 1


BASE_PAYLOAD = {
    "id": "p-001",
    "name": "Harbour Office Tower",
    "location": {"city": "Sydney", "state": "NSW"},
    "gfa": 10_000,
    "buildingType": "office",
    "materials": [
        {"category": "concrete", "type": "concrete-32mpa", "quantity": 1200, "unit": "m³"},
    ],
}


@pytest.fixture
def fake_provider():
    return FakeProvider({"timber-framing": 150.0})


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def make_payload():
    def _make(**overrides) -> dict:
        payload = copy.deepcopy(BASE_PAYLOAD)
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def make_project():
    base = Project(
        project_id="p-001",
        name="Harbour Office Tower",
        location=Location(city="Sydney", state="nsw"),
        gfa_m2=10_000.0,
        building_type=BuildingType.OFFICE,
        materials=(MaterialLineItem(MaterialCategory.CONCRETE, "concrete-32mpa", 1200.0, "m³"),),
    )

    def _make(**overrides) -> Project:
        return dataclasses.replace(base, **overrides)
    return _make


@pytest.fixture
def core():
    return CarbonIntelligenceCore(
        settings=EngineSettings(),
        clock=lambda: datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith(("CI_", "EPD_")):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
