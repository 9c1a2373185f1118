# chuk_ai_tool_hints/ledger.py
"""
Bounded, time-expiring key/value ledger.

Both usage trackers keep their records here. The ledger is a fixed-capacity
map with two ways for an entry to disappear:

- capacity: inserting a new key into a full ledger evicts the least recently
  inserted entry
- age: an entry older than the TTL reads as absent and is dropped on the
  next read (lazy expiry, no background sweeping)

Writing an existing key re-inserts it: the entry gets a fresh timestamp and
moves to the newest position. Reads never change age or order, so insertion
order and timestamp order always agree.

No I/O, no locking. Callers that share a ledger across threads serialize
access themselves.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Hashable
from datetime import UTC, datetime, timedelta
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from chuk_ai_tool_hints.models.stats import LedgerStats

log = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class LedgerConfig(BaseModel):
    """Capacity and retention of a ledger."""

    max_entries: int = Field(..., gt=0, description="Maximum live entries")
    ttl: timedelta = Field(..., description="Retention window, measured from insertion")

    @field_validator("ttl")
    @classmethod
    def _positive_ttl(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("ttl must be positive")
        return value

    @classmethod
    def from_seconds(cls, max_entries: int, ttl_seconds: float) -> LedgerConfig:
        return cls(max_entries=max_entries, ttl=timedelta(seconds=ttl_seconds))


class _Slot(Generic[V]):
    __slots__ = ("value", "inserted_at")

    def __init__(self, value: V, inserted_at: datetime) -> None:
        self.value = value
        self.inserted_at = inserted_at


class BoundedTTLLedger(Generic[K, V]):
    """
    Fixed-capacity map whose entries expire a fixed time after insertion.

    Typical usage:
        ledger = BoundedTTLLedger(LedgerConfig.from_seconds(50, 86400))
        ledger.set(("posix", "git"), record)
        record = ledger.get(("posix", "git"))  # None once expired or evicted
    """

    def __init__(self, config: LedgerConfig, clock: Clock | None = None) -> None:
        self.config = config
        self._clock: Clock = clock or utc_now
        # OrderedDict keeps insertion order; the oldest entry is always first
        self._entries: OrderedDict[K, _Slot[V]] = OrderedDict()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "expirations": 0,
        }

    @property
    def max_entries(self) -> int:
        return self.config.max_entries

    @property
    def ttl(self) -> timedelta:
        return self.config.ttl

    def now(self) -> datetime:
        return self._clock()

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        slot = self._entries.get(key)  # type: ignore[arg-type]
        if slot is None:
            return False
        if self._is_expired(slot, self.now()):
            self._expire(key)  # type: ignore[arg-type]
            return False
        return True

    # --- Core contract ---

    def set(self, key: K, value: V) -> None:
        """Insert or re-insert a value, evicting the oldest entry if full."""
        now = self.now()
        self._purge_expired(now)

        if key in self._entries:
            del self._entries[key]
        else:
            while len(self._entries) >= self.config.max_entries:
                self._evict_oldest()

        self._entries[key] = _Slot(value, now)

    def get(self, key: K) -> V | None:
        """Return the live value for a key, or None if absent or expired."""
        slot = self._entries.get(key)
        if slot is None:
            self._stats["misses"] += 1
            return None

        if self._is_expired(slot, self.now()):
            self._expire(key)
            self._stats["misses"] += 1
            return None

        self._stats["hits"] += 1
        return slot.value

    def keys(self) -> list[K]:
        """Live keys, oldest insertion first."""
        self._purge_expired()
        return list(self._entries.keys())

    def delete(self, key: K) -> bool:
        """Remove a key. Returns True if a live entry was removed."""
        slot = self._entries.pop(key, None)
        if slot is None:
            return False
        return not self._is_expired(slot, self.now())

    # --- Conveniences ---

    def items(self) -> list[tuple[K, V]]:
        """Live (key, value) pairs, oldest insertion first."""
        self._purge_expired()
        return [(key, slot.value) for key, slot in self._entries.items()]

    def inserted_at(self, key: K) -> datetime | None:
        slot = self._entries.get(key)
        if slot is None or self._is_expired(slot, self.now()):
            return None
        return slot.inserted_at

    def clear(self) -> int:
        """Drop every entry. Returns the number removed."""
        count = len(self._entries)
        self._entries.clear()
        return count

    @property
    def hit_rate(self) -> float:
        total = self._stats["hits"] + self._stats["misses"]
        if total == 0:
            return 0.0
        return self._stats["hits"] / total

    def get_stats(self) -> LedgerStats:
        size = len(self)
        return LedgerStats(
            size=size,
            max_size=self.config.max_entries,
            utilization=size / self.config.max_entries,
            hits=self._stats["hits"],
            misses=self._stats["misses"],
            evictions=self._stats["evictions"],
            expirations=self._stats["expirations"],
            hit_rate=self.hit_rate,
        )

    # --- Internals ---

    def _is_expired(self, slot: _Slot[V], now: datetime) -> bool:
        return now > slot.inserted_at + self.config.ttl

    def _expire(self, key: K) -> None:
        del self._entries[key]
        self._stats["expirations"] += 1

    def _purge_expired(self, now: datetime | None = None) -> int:
        """Drop expired entries from the old end. Returns the number dropped."""
        now = now or self.now()
        dropped = 0
        while self._entries:
            key, slot = next(iter(self._entries.items()))
            if not self._is_expired(slot, now):
                break
            self._expire(key)
            dropped += 1
        return dropped

    def _evict_oldest(self) -> K | None:
        if not self._entries:
            return None
        key, _ = self._entries.popitem(last=False)
        self._stats["evictions"] += 1
        log.debug(f"Ledger full ({self.config.max_entries}), evicted {key!r}")
        return key
