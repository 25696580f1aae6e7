# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — EPD Registry Provider Tests
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import json

import pytest
import requests

from config.settings import EngineSettings
from core.models import MaterialCategory
from services import epd
from services.epd import EpdRegistryProvider


class FakeResponse:
    def __init__(self, payload=None, status=200):
        self._payload = payload
        self.status_code = status
        self.content = b"" if payload is None else json.dumps(payload).encode()

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


@pytest.fixture
def registry(monkeypatch):
    """Patch requests.get and record the calls made through it."""
    calls = []

    def install(response=None, exc=None):
        def fake_get(url, params=None, headers=None, timeout=None):
            calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
            if exc is not None:
                raise exc
            return response
        monkeypatch.setattr(epd.requests, "get", fake_get)
        return calls

    return install


class TestEpdRegistryProvider:
    def test_unconfigured_provider_makes_no_request(self, registry, clean_env):
        calls = registry(FakeResponse({"rate": 1.0}))
        provider = EpdRegistryProvider()
        assert provider.configured is False
        assert provider.get(MaterialCategory.TIMBER, "timber-framing") is None
        assert calls == []

    def test_paged_results_shape(self, registry):
        calls = registry(FakeResponse({"results": [
            {"gwp_per_unit": 150.0, "unit": "m³", "biogenic_storage": 700, "confidence": "HIGH"},
        ]}))
        provider = EpdRegistryProvider("https://epd.example.test/api/", timeout_s=5)
        coef = provider.get("timber", "timber-framing")
        assert coef.rate == 150.0
        assert coef.base_rate == 150.0
        assert coef.unit == "m³"
        assert coef.biogenic_storage == -700.0
        assert coef.confidence == "high"
        assert coef.source == "external"
        assert calls[0]["url"] == "https://epd.example.test/api/materials"
        assert calls[0]["params"] == {"category": "timber", "type": "timber-framing"}
        assert calls[0]["timeout"] == 5

    def test_direct_record_shape_and_default_unit(self, registry):
        registry(FakeResponse({"rate": "1.2", "confidence": "dubious"}))
        coef = EpdRegistryProvider("https://epd.example.test").get("steel", "steel-hollow-section")
        assert coef.rate == 1.2
        assert coef.unit == "kg"
        assert coef.confidence == "medium"

    def test_connection_error_returns_none(self, registry, caplog):
        registry(exc=requests.ConnectionError("network down"))
        with caplog.at_level("WARNING"):
            assert EpdRegistryProvider("https://epd.example.test").get("steel", "steel-recycled") is None
        assert "network down" in caplog.text

    def test_http_error_returns_none(self, registry):
        registry(FakeResponse({"detail": "nope"}, status=503))
        assert EpdRegistryProvider("https://epd.example.test").get("steel", "steel-recycled") is None

    @pytest.mark.parametrize("payload", [
        {"results": []},
        {"results": [{"rate": -3.0}]},
        {"rate": "n/a"},
        None,
    ])
    def test_unusable_payloads_return_none(self, registry, payload):
        registry(FakeResponse(payload))
        assert EpdRegistryProvider("https://epd.example.test").get("concrete", "concrete-32mpa") is None

    def test_api_key_sent_as_bearer_token(self, registry):
        calls = registry(FakeResponse({"rate": 1.0}))
        EpdRegistryProvider("https://epd.example.test", api_key="secret").get("steel", "steel-recycled")
        assert calls[0]["headers"]["Authorization"] == "Bearer secret"

    def test_no_authorization_without_key(self, registry, clean_env):
        calls = registry(FakeResponse({"rate": 1.0}))
        EpdRegistryProvider("https://epd.example.test").get("steel", "steel-recycled")
        assert "Authorization" not in calls[0]["headers"]

    def test_from_settings(self):
        settings = EngineSettings(epd_api_url="https://epd.example.test", epd_api_key="k", epd_timeout_s=3)
        provider = EpdRegistryProvider.from_settings(settings)
        assert provider.base_url == "https://epd.example.test"
        assert provider.api_key == "k"
        assert provider.timeout_s == 3
