# scriptbridge/core/engine/cache.py
"""
Bounded in-memory caches for translation results and script detection.

Goals
=====
- Hard upper bound on entries; eviction is atomic with insertion.
- Eviction order is a pluggable strategy (FIFO by default, LRU available).
- Thread-safe for hosts that run handlers on worker threads.

Nothing here is persisted; `clear()` is the only way entries leave besides
eviction.
"""

from __future__ import annotations

import hashlib
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Dict, Generic, Hashable, Optional, Tuple, TypeVar

V = TypeVar("V")

CacheKey = Tuple[str, str, str, int]


class EvictionPolicy(ABC):
    """Decides how reads reorder entries. Eviction always pops the front."""

    name = "base"

    @abstractmethod
    def on_hit(self, entries: "OrderedDict[Hashable, Any]", key: Hashable) -> None:
        ...


class FifoEviction(EvictionPolicy):
    """Oldest insertion leaves first; reads do not refresh an entry."""

    name = "fifo"

    def on_hit(self, entries, key):
        return None


class LruEviction(EvictionPolicy):
    """Least recently read (or written) entry leaves first."""

    name = "lru"

    def on_hit(self, entries, key):
        entries.move_to_end(key)


_POLICIES = {"fifo": FifoEviction, "lru": LruEviction}


def make_policy(name: str) -> EvictionPolicy:
    try:
        return _POLICIES[(name or "fifo").strip().lower()]()
    except KeyError:
        raise ValueError(f"Unknown eviction policy '{name}'. Expected one of: {sorted(_POLICIES)}")


class BoundedCache(Generic[V]):
    def __init__(self, max_size: int = 5000, policy: Optional[EvictionPolicy] = None):
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self.policy = policy or FifoEviction()
        self._entries: "OrderedDict[Hashable, V]" = OrderedDict()
        self._lock = threading.RLock()

    def get(self, key: Hashable) -> Optional[V]:
        with self._lock:
            if key not in self._entries:
                return None
            self.policy.on_hit(self._entries, key)
            return self._entries[key]

    def set(self, key: Hashable, value: V) -> None:
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                self.policy.on_hit(self._entries, key)
                return
            while len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            return {"size": len(self._entries), "max_size": self.max_size, "policy": self.policy.name}


def text_digest(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()[:16]


def translation_cache_key(source: str, target: str, text: str) -> CacheKey:
    """(source, target, digest, length): the digest alone is not trusted."""
    return (source, target, text_digest(text), len(text))
