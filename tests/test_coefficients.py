# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Coefficient Source Tests
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from core.errors import MissingCoefficientError
from core.models import CarbonCoefficient, MaterialCategory, MaterialLineItem
from services.coefficients import (
    CoefficientCache,
    CoefficientSource,
    LocalCoefficientTable,
    regional_multiplier,
)


def _coef(rate: float = 1.0) -> CarbonCoefficient:
    return CarbonCoefficient(MaterialCategory.OTHER, "x", rate, "unit")


# ─────────────────────────────────────────────────────────────────────────────
# LOCAL TABLE & REGIONAL ADJUSTMENT
# ─────────────────────────────────────────────────────────────────────────────

class TestLocalLookup:
    def test_local_coefficient(self):
        coef = CoefficientSource().get("concrete", "concrete-32mpa")
        assert coef.rate == 320.0
        assert coef.unit == "m³"
        assert coef.source == "local"
        assert coef.regional_multiplier == 1.0

    def test_biogenic_storage_carried(self):
        coef = CoefficientSource().get(MaterialCategory.TIMBER, "timber-clt")
        assert coef.biogenic_storage == -750.0

    def test_missing_key_names_the_key(self):
        with pytest.raises(MissingCoefficientError, match="concrete/unobtainium") as excinfo:
            CoefficientSource().get("concrete", "unobtainium")
        assert excinfo.value.category == "concrete"
        assert excinfo.value.type_id == "unobtainium"

    def test_category_mismatch_is_missing(self):
        with pytest.raises(MissingCoefficientError):
            CoefficientSource().get("steel", "concrete-32mpa")

    def test_local_table_membership(self):
        table = LocalCoefficientTable()
        assert ("concrete", "concrete-32mpa") in table
        assert ("steel", "concrete-32mpa") not in table


class TestRegionalAdjustment:
    def test_multiplier_applied(self):
        coef = CoefficientSource().get("concrete", "concrete-32mpa", region="vic")
        assert coef.rate == pytest.approx(320.0 * 1.05)
        assert coef.base_rate == 320.0
        assert coef.regional_multiplier == 1.05

    def test_biogenic_scaled_with_rate(self):
        coef = CoefficientSource().get("timber", "timber-clt", region="vic")
        assert coef.biogenic_storage == pytest.approx(-750.0 * 1.10)

    @pytest.mark.parametrize("state, category", [
        ("nsw", "insulation"),   # no factor for the category
        ("zz", "concrete"),      # unknown state
        (None, "steel"),         # no region
    ])
    def test_absent_factor_is_noop(self, state, category):
        assert regional_multiplier(state, category) == 1.0


# ─────────────────────────────────────────────────────────────────────────────
# EXTERNAL PROVIDER
# ─────────────────────────────────────────────────────────────────────────────

class TestProvider:
    def test_provider_used_when_not_local(self, fake_provider):
        source = CoefficientSource(provider=fake_provider)
        coef = source.get("timber", "timber-framing")
        assert coef.rate == 150.0
        assert coef.source == "external"

    def test_provider_not_consulted_for_local_key(self, make_provider):
        provider = make_provider({"concrete-32mpa": 300.0})
        coef = CoefficientSource(provider=provider).get("concrete", "concrete-32mpa")
        assert coef.rate == 320.0
        assert provider.calls == []

    def test_prefer_external_overrides_local(self, make_provider):
        provider = make_provider({"concrete-32mpa": 300.0})
        coef = CoefficientSource(provider=provider, prefer_external=True).get("concrete", "concrete-32mpa")
        assert coef.rate == 300.0
        assert coef.source == "external"

    def test_provider_results_are_cached(self, fake_provider):
        source = CoefficientSource(provider=fake_provider)
        first = source.get("timber", "timber-framing")
        second = source.get("timber", "timber-framing")
        assert first == second
        assert len(fake_provider.calls) == 1
        assert source.cache.stats["hits"] == 1

    def test_provider_failure_falls_back_to_local(self, make_provider, caplog):
        provider = make_provider(fail=True)
        source = CoefficientSource(provider=provider, prefer_external=True)
        with caplog.at_level("WARNING"):
            coef = source.get("concrete", "concrete-32mpa")
        assert coef.rate == 320.0
        assert coef.source == "local"
        assert "provider unavailable" in caplog.text

    def test_provider_failure_without_local_raises(self, make_provider):
        source = CoefficientSource(provider=make_provider(fail=True))
        with pytest.raises(MissingCoefficientError, match="timber/timber-framing"):
            source.get("timber", "timber-framing")

    def test_provider_empty_answer_without_local_raises(self, make_provider):
        source = CoefficientSource(provider=make_provider())
        with pytest.raises(MissingCoefficientError):
            source.get("other", "mystery-panel")

    def test_empty_answer_is_not_cached(self, make_provider):
        provider = make_provider()
        source = CoefficientSource(provider=provider)
        for _ in range(2):
            with pytest.raises(MissingCoefficientError):
                source.get("other", "mystery-panel")
        assert len(provider.calls) == 2


# ─────────────────────────────────────────────────────────────────────────────
# CACHE
# ─────────────────────────────────────────────────────────────────────────────

class TestCoefficientCache:
    def test_entries_expire(self):
        now = [0.0]
        cache = CoefficientCache(max_age_s=10, clock=lambda: now[0])
        cache.set("k", _coef())
        now[0] = 5.0
        assert cache.get("k") is not None
        now[0] = 16.0
        assert cache.get("k") is None
        assert cache.stats["expirations"] == 1
        assert len(cache) == 0

    def test_lru_eviction(self):
        cache = CoefficientCache(max_entries=2)
        cache.set("a", _coef(1.0))
        cache.set("b", _coef(2.0))
        cache.get("a")
        cache.set("c", _coef(3.0))
        assert cache.get("b") is None
        assert cache.get("a").rate == 1.0
        assert cache.stats["evictions"] == 1

    def test_stats(self):
        cache = CoefficientCache()
        cache.get("missing")
        cache.set("k", _coef())
        cache.get("k")
        assert cache.stats == {"hits": 1, "misses": 1, "sets": 1, "evictions": 0, "expirations": 0}

    def test_concurrent_loads_of_one_key_run_once(self):
        cache = CoefficientCache()
        calls = []
        lock = threading.Lock()

        def loader():
            with lock:
                calls.append(1)
            time.sleep(0.02)
            return _coef(7.0)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: cache.get_or_load("k", loader), range(8)))
        assert len(calls) == 1
        assert all(r.rate == 7.0 for r in results)

    def test_clear_drops_entries_and_key_locks(self):
        cache = CoefficientCache()
        for key in ("a", "b", "c"):
            cache.get_or_load(key, _coef)
        assert len(cache._key_locks) == 3
        cache.clear()
        assert len(cache) == 0
        assert cache._key_locks == {}
        assert cache.get_or_load("a", lambda: _coef(2.0)).rate == 2.0


# ─────────────────────────────────────────────────────────────────────────────
# BATCH RESOLUTION
# ─────────────────────────────────────────────────────────────────────────────

class TestResolveBatch:
    def test_order_preserved(self):
        items = [
            MaterialLineItem(MaterialCategory.STEEL, "steel-recycled", 10.0),
            MaterialLineItem(MaterialCategory.CONCRETE, "concrete-40mpa", 5.0),
            MaterialLineItem(MaterialCategory.TIMBER, "timber-clt", 2.0),
            MaterialLineItem(MaterialCategory.GLAZING, "window-aluminium", 30.0),
            MaterialLineItem(MaterialCategory.MASONRY, "brick-clay", 40.0),
        ]
        coefs = CoefficientSource().resolve_batch(items, region="qld")
        assert [c.type_id for c in coefs] == [i.type_id for i in items]

    def test_batch_bounds_concurrency(self, make_provider):
        rates = {f"panel-{n}": float(n) for n in range(7)}
        provider = make_provider(rates, delay_s=0.02)
        items = [MaterialLineItem(MaterialCategory.OTHER, key, 1.0) for key in rates]
        coefs = CoefficientSource(provider=provider, batch_size=3).resolve_batch(items)
        assert [c.rate for c in coefs] == [float(n) for n in range(7)]
        assert provider.peak_in_flight <= 3
        assert len(provider.calls) == 7

    def test_missing_key_fails_the_batch(self):
        items = [
            MaterialLineItem(MaterialCategory.STEEL, "steel-recycled", 10.0),
            MaterialLineItem(MaterialCategory.OTHER, "unobtainium", 1.0),
        ]
        with pytest.raises(MissingCoefficientError, match="other/unobtainium"):
            CoefficientSource().resolve_batch(items)

    def test_empty_input(self):
        assert CoefficientSource().resolve_batch([]) == []

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError, match="batch_size"):
            CoefficientSource(batch_size=0)
