"""
ArcCache: Adaptive Replacement Cache backing launcher recommendations.

Four ordered lists, oldest first:
    T1  live entries seen once recently
    T2  live entries seen at least twice (the "recommended" set)
    B1  ghosts demoted from T1
    B2  ghosts demoted from T2

``p`` is the adaptive target size of T1. A hit on a B1 ghost means recency
was undervalued and grows ``p``; a hit on a B2 ghost shrinks it.

Usage:
    arc = ArcCache(capacity=5)
    arc.access("steam", {"name": "Steam"})
    arc.get_recommended()        # T2 payloads, most recent first
    state = arc.export()         # JSON-ready dict
    ArcCache.from_export(state)  # fresh cache if state is malformed

Not internally locked: callers serialize ``access`` (see LauncherSession).
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from ..errors import ArcStateError
from ..schemas import ArcSnapshot

logger = logging.getLogger(__name__)

_LIST_NAMES = ("t1", "t2", "b1", "b2")


# ═══════════════════════════════════════════════════════════════════════════
#  Data Classes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class CacheEntry:
    """One tracked key. Owned by exactly one list at a time."""
    key: str
    payload: Any
    last_accessed_at: float
    access_count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "payload": self.payload,
            "last_accessed_at": self.last_accessed_at,
            "access_count": self.access_count,
        }


@dataclass(frozen=True)
class ArcStats:
    t1_size: int
    t2_size: int
    b1_size: int
    b2_size: int
    p: int


# ═══════════════════════════════════════════════════════════════════════════
#  Cache
# ═══════════════════════════════════════════════════════════════════════════

class ArcCache:

    def __init__(self, capacity: int = 5, clock: Callable[[], float] = time.time):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self.p = 0
        self._clock = clock
        self._t1: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._t2: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._b1: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._b2: "OrderedDict[str, CacheEntry]" = OrderedDict()

    # ─────────────────────────────────────────────────────────────────────────
    #  access
    # ─────────────────────────────────────────────────────────────────────────
    def access(self, key: str, payload: Any) -> None:
        """Record one use of ``key``."""
        now = self._clock()

        if key in self._t1:
            entry = self._t1.pop(key)
            self._touch(entry, payload, now)
            self._t2[key] = entry
            self._replace(bias_toward_t1=False)
            return

        if key in self._t2:
            entry = self._t2.pop(key)
            self._touch(entry, payload, now)
            self._t2[key] = entry
            self._replace(bias_toward_t1=False)
            return

        if key in self._b1:
            self.p = min(self.capacity, self.p + min(len(self._b2), 1))
            self._replace(bias_toward_t1=True)
            del self._b1[key]
            self._t2[key] = CacheEntry(key, payload, now)
            return

        if key in self._b2:
            self.p = max(0, self.p - min(len(self._b1), 1))
            self._replace(bias_toward_t1=False)
            del self._b2[key]
            self._t2[key] = CacheEntry(key, payload, now)
            return

        # Miss
        l1_size = len(self._t1) + len(self._b1)
        total = l1_size + len(self._t2) + len(self._b2)

        if l1_size == self.capacity:
            if len(self._t1) < self.capacity:
                self._b1.popitem(last=False)
                self._replace(bias_toward_t1=False)
            else:
                # B1 is empty here; a demoted ghost would push |T1|+|B1| past capacity.
                evicted, _ = self._t1.popitem(last=False)
                logger.debug("[ArcCache] dropped %s from full T1", evicted)
        elif total >= self.capacity:
            if total >= 2 * self.capacity and self._b2:
                self._b2.popitem(last=False)
            self._replace(bias_toward_t1=False)

        self._t1[key] = CacheEntry(key, payload, now)

    @staticmethod
    def _touch(entry: CacheEntry, payload: Any, now: float) -> None:
        entry.payload = payload
        entry.access_count += 1
        entry.last_accessed_at = now

    def _replace(self, bias_toward_t1: bool) -> None:
        """Demote one live entry to its ghost list."""
        if self._t1 and (bias_toward_t1 or len(self._t1) > self.p):
            key, entry = self._t1.popitem(last=False)
            self._b1[key] = entry
        elif self._t2:
            key, entry = self._t2.popitem(last=False)
            self._b2[key] = entry

    # ─────────────────────────────────────────────────────────────────────────
    #  Reads
    # ─────────────────────────────────────────────────────────────────────────
    def recommended_entries(self) -> List[CacheEntry]:
        """T2 entries, most recently accessed first."""
        return list(reversed(self._t2.values()))

    def get_recommended(self) -> List[Any]:
        return [entry.payload for entry in self.recommended_entries()]

    def get_all(self) -> List[CacheEntry]:
        """Live entries: T1 then T2, oldest first within each."""
        return [*self._t1.values(), *self._t2.values()]

    def get_entry(self, key: str) -> Optional[CacheEntry]:
        return self._t1.get(key) or self._t2.get(key)

    def get(self, key: str) -> Any:
        entry = self.get_entry(key)
        return entry.payload if entry is not None else None

    def has(self, key: str) -> bool:
        return key in self._t1 or key in self._t2

    __contains__ = has

    def __len__(self) -> int:
        return len(self._t1) + len(self._t2)

    def location(self, key: str) -> Optional[str]:
        """Name of the list holding ``key`` ("t1", "t2", "b1", "b2") or None."""
        for name in _LIST_NAMES:
            if key in getattr(self, f"_{name}"):
                return name
        return None

    def keys(self, list_name: str) -> List[str]:
        """Keys of one list, oldest first."""
        if list_name not in _LIST_NAMES:
            raise ValueError(f"unknown list {list_name!r}")
        return list(getattr(self, f"_{list_name}"))

    def stats(self) -> ArcStats:
        return ArcStats(
            t1_size=len(self._t1),
            t2_size=len(self._t2),
            b1_size=len(self._b1),
            b2_size=len(self._b2),
            p=self.p,
        )

    def clear(self) -> None:
        for name in _LIST_NAMES:
            getattr(self, f"_{name}").clear()
        self.p = 0

    # ─────────────────────────────────────────────────────────────────────────
    #  Persistence
    # ─────────────────────────────────────────────────────────────────────────
    def export(self) -> Dict[str, Any]:
        state: Dict[str, Any] = {
            name: [[key, entry.to_dict()] for key, entry in getattr(self, f"_{name}").items()]
            for name in _LIST_NAMES
        }
        state["p"] = self.p
        state["capacity"] = self.capacity
        return state

    def import_state(self, data: Any) -> None:
        """
        Replace this cache's state with ``data`` (as produced by ``export``).

        Raises:
            ArcStateError: ``data`` is malformed. The cache is left unchanged.
        """
        try:
            snapshot = ArcSnapshot.model_validate(data)
        except ValidationError as e:
            raise ArcStateError(f"invalid recommendation cache state: {e}") from e

        lists = {
            name: OrderedDict(
                (key, CacheEntry(key, model.payload, model.last_accessed_at, model.access_count))
                for key, model in getattr(snapshot, name)
            )
            for name in _LIST_NAMES
        }
        # Validation is complete; nothing below can fail.
        self._t1, self._t2, self._b1, self._b2 = (lists[name] for name in _LIST_NAMES)
        self.p = snapshot.p
        self.capacity = snapshot.capacity

    @classmethod
    def from_export(
        cls,
        data: Any,
        capacity: int = 5,
        clock: Callable[[], float] = time.time,
    ) -> "ArcCache":
        """Hydrate a cache, or return an empty one if ``data`` is malformed."""
        cache = cls(capacity, clock=clock)
        if data is None:
            return cache
        try:
            cache.import_state(data)
        except ArcStateError as e:
            logger.warning("[ArcCache] discarding persisted state: %s", e)
        return cache

    def __repr__(self) -> str:
        s = self.stats()
        return (
            f"ArcCache(capacity={self.capacity}, p={s.p}, "
            f"t1={s.t1_size}, t2={s.t2_size}, b1={s.b1_size}, b2={s.b2_size})"
        )
