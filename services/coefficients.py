# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Coefficient Source
# © 2026 Aparajita Parihar. All rights reserved.
#
# Resolution order for a (category, type) material key:
#   1. Local table (config/constants.MATERIAL_COEFFICIENTS)
#   2. External provider: only when the key is not local, or prefer_external
#      is set. Results are memoised per key with a max age.
#   3. Provider failure → local entry if present, else MissingCoefficientError.
#
# Regional adjustment multiplies the base rate by a (state, category) factor;
# a missing factor is a 1.0 no-op.
#
# Batch resolution runs lookups in bounded batches on a thread pool. Every
# lookup in a batch is submitted together and awaited before the next batch.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import abc
import logging
import threading
import time
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Hashable, Optional, Sequence

from config.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CACHE_MAX_AGE_S,
    DEFAULT_CACHE_MAX_ENTRIES,
    MATERIAL_COEFFICIENTS,
    REGIONAL_MATERIAL_MULTIPLIERS,
)
from core.errors import MissingCoefficientError
from core.models import CarbonCoefficient, MaterialCategory, MaterialLineItem

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# PROVIDERS
# ─────────────────────────────────────────────────────────────────────────────

class CoefficientProvider(abc.ABC):
    """
    Contract for anything that can supply a carbon coefficient.

    Implementations must be idempotent for a given key so that their answers
    can be cached. Returning ``None`` means "no data for this key".
    """

    name: str = "provider"

    @abc.abstractmethod
    def get(self, category: MaterialCategory, type_id: str) -> Optional[CarbonCoefficient]:
        raise NotImplementedError


class LocalCoefficientTable(CoefficientProvider):
    """The embedded coefficient table. Never performs I/O."""

    name = "local"

    def __init__(self, table: Optional[dict[str, dict]] = None):
        self._table = MATERIAL_COEFFICIENTS if table is None else table

    def __contains__(self, key: tuple[str, str]) -> bool:
        category, type_id = key
        entry = self._table.get(type_id)
        return entry is not None and entry["category"] == MaterialCategory(category).value

    def get(self, category: MaterialCategory, type_id: str) -> Optional[CarbonCoefficient]:
        category = MaterialCategory(category)
        entry = self._table.get(type_id)
        if entry is None or entry["category"] != category.value:
            return None
        return CarbonCoefficient(
            category=category,
            type_id=type_id,
            rate=float(entry["rate"]),
            unit=entry["unit"],
            biogenic_storage=entry.get("biogenic"),
            source="local",
            confidence=entry.get("confidence", "medium"),
            base_rate=float(entry["rate"]),
        )


# ─────────────────────────────────────────────────────────────────────────────
# CACHE — TTL + LRU, single writer per key
# ─────────────────────────────────────────────────────────────────────────────

class CoefficientCache:
    def __init__(
        self,
        max_age_s: float = DEFAULT_CACHE_MAX_AGE_S,
        max_entries: int = DEFAULT_CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_age_s = max_age_s
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[Hashable, tuple[CarbonCoefficient, float]] = OrderedDict()
        self._lock = threading.Lock()
        self._key_locks: dict[Hashable, threading.Lock] = {}
        self._stats = {"hits": 0, "misses": 0, "sets": 0, "evictions": 0, "expirations": 0}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def stats(self) -> dict[str, int]:
        with self._lock:
            return dict(self._stats)

    def get(self, key: Hashable) -> Optional[CarbonCoefficient]:
        with self._lock:
            hit = self._entries.get(key)
            if hit is None:
                self._stats["misses"] += 1
                return None
            value, stored_at = hit
            if self._clock() - stored_at > self.max_age_s:
                del self._entries[key]
                self._stats["expirations"] += 1
                self._stats["misses"] += 1
                return None
            self._entries.move_to_end(key)
            self._stats["hits"] += 1
            return value

    def set(self, key: Hashable, value: CarbonCoefficient) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock())
            self._entries.move_to_end(key)
            self._stats["sets"] += 1
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
                self._stats["evictions"] += 1

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._key_locks.clear()

    def _lock_for(self, key: Hashable) -> threading.Lock:
        with self._lock:
            return self._key_locks.setdefault(key, threading.Lock())

    def get_or_load(
        self,
        key: Hashable,
        loader: Callable[[], Optional[CarbonCoefficient]],
    ) -> Optional[CarbonCoefficient]:
        """Return the cached value or load it. Concurrent loads of one key run once."""
        value = self.get(key)
        if value is not None:
            return value
        with self._lock_for(key):
            value = self.get(key)
            if value is not None:
                return value
            value = loader()
            if value is not None:
                self.set(key, value)
            return value


# ─────────────────────────────────────────────────────────────────────────────
# COEFFICIENT SOURCE
# ─────────────────────────────────────────────────────────────────────────────

def regional_multiplier(state: Optional[str], category: MaterialCategory | str) -> float:
    if not state:
        return 1.0
    return REGIONAL_MATERIAL_MULTIPLIERS.get(state.lower(), {}).get(MaterialCategory(category).value, 1.0)


class CoefficientSource:
    def __init__(
        self,
        local: Optional[CoefficientProvider] = None,
        provider: Optional[CoefficientProvider] = None,
        cache: Optional[CoefficientCache] = None,
        prefer_external: bool = False,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1.")
        self.local = local if local is not None else LocalCoefficientTable()
        self.provider = provider
        self.cache = cache if cache is not None else CoefficientCache()
        self.prefer_external = prefer_external
        self.batch_size = batch_size

    @classmethod
    def from_settings(cls, settings, provider: Optional[CoefficientProvider] = None) -> "CoefficientSource":
        return cls(
            provider=provider,
            cache=CoefficientCache(settings.cache_max_age_s, settings.cache_max_entries),
            prefer_external=settings.prefer_external,
            batch_size=settings.batch_size,
        )

    def _external(self, category: MaterialCategory, type_id: str) -> Optional[CarbonCoefficient]:
        try:
            return self.cache.get_or_load(
                (category.value, type_id),
                lambda: self.provider.get(category, type_id),
            )
        except Exception as exc:
            logger.warning("Coefficient provider '%s' failed for %s/%s: %s",
                           getattr(self.provider, "name", "provider"), category.value, type_id, exc)
            return None

    def base(self, category: MaterialCategory | str, type_id: str) -> CarbonCoefficient:
        """Unadjusted coefficient for a key. Raises MissingCoefficientError."""
        category = MaterialCategory(category)
        local = self.local.get(category, type_id)
        if self.provider is not None and (local is None or self.prefer_external):
            external = self._external(category, type_id)
            if external is not None:
                return external
            if local is not None:
                logger.warning("Falling back to local coefficient for %s/%s", category.value, type_id)
        if local is None:
            raise MissingCoefficientError(category.value, type_id)
        return local

    def get(
        self,
        category: MaterialCategory | str,
        type_id: str,
        region: Optional[str] = None,
    ) -> CarbonCoefficient:
        coefficient = self.base(category, type_id)
        return coefficient.adjusted(regional_multiplier(region, coefficient.category))

    def resolve_batch(
        self,
        items: Sequence[MaterialLineItem],
        region: Optional[str] = None,
        batch_size: Optional[int] = None,
    ) -> list[CarbonCoefficient]:
        """
        Resolve coefficients for many line items, preserving input order.

        At most ``batch_size`` lookups are in flight at once; a batch is fully
        awaited before the next one is issued. The first failure (in input
        order) propagates once its batch has settled.
        """
        size = batch_size or self.batch_size
        if size < 1:
            raise ValueError("batch_size must be >= 1.")
        results: list[CarbonCoefficient] = []
        if not items:
            return results
        with ThreadPoolExecutor(max_workers=size, thread_name_prefix="coefficients") as pool:
            for start in range(0, len(items), size):
                batch = items[start:start + size]
                futures = [pool.submit(self.get, item.category, item.type_id, region) for item in batch]
                wait(futures)
                results.extend(future.result() for future in futures)
        return results
