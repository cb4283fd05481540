"""
Caching layer for compiled patterns.

Provides:
- Thread-safe LRU cache with TTL
- Cache statistics for monitoring
- A process-wide cache built from ``load_config()``
"""

import logging
import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .compiler.compiler import CompiledPattern, PatternCompiler
from .compiler.parser import parse_pattern
from .config import PatternConfig, load_config
from .diagnostics.errors import PatternSyntaxError

logger = logging.getLogger("uripattern.cache")


@dataclass
class CacheStats:
    """Cache statistics for monitoring."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    errors: int = 0
    total_compile_time: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Export stats as dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "errors": self.errors,
            "total_compile_time": self.total_compile_time,
            "hit_rate": self.hit_rate,
        }


@dataclass
class CacheEntry:
    """Cache entry with metadata."""
    pattern: CompiledPattern
    created_at: float
    last_accessed: float
    access_count: int
    compile_time: float

    def is_expired(self, ttl: Optional[float]) -> bool:
        """Check if entry has expired."""
        if ttl is None:
            return False
        return time.monotonic() - self.created_at > ttl


class PatternCache:
    """Thread-safe LRU cache for compiled patterns with TTL support.

    Entries are keyed by the pattern source. Malformed patterns are never
    cached; they are counted in ``errors`` and the syntax error propagates.
    """

    def __init__(
        self,
        max_size: int = 1000,
        ttl: Optional[float] = None,
        enable_stats: bool = True,
    ):
        self.max_size = max_size
        self.ttl = ttl
        self.enable_stats = enable_stats

        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats()
        self._compiler = PatternCompiler()

    @classmethod
    def from_config(cls, config: PatternConfig) -> "PatternCache":
        return cls(
            max_size=config.cache_size if config.cache_enabled else 0,
            ttl=config.cache_ttl,
            enable_stats=config.cache_stats,
        )

    def get(self, pattern: str) -> Optional[CompiledPattern]:
        """Get compiled pattern from cache, or None if absent or expired."""
        with self._lock:
            entry = self._cache.get(pattern)

            if entry is None:
                if self.enable_stats:
                    self._stats.misses += 1
                return None

            if entry.is_expired(self.ttl):
                del self._cache[pattern]
                logger.debug("Expired cached pattern %r", pattern)
                if self.enable_stats:
                    self._stats.evictions += 1
                    self._stats.misses += 1
                return None

            # Update LRU order
            self._cache.move_to_end(pattern)
            entry.last_accessed = time.monotonic()
            entry.access_count += 1

            if self.enable_stats:
                self._stats.hits += 1

            return entry.pattern

    def put(self, pattern: str, compiled: CompiledPattern, compile_time: float = 0.0):
        """Store compiled pattern in cache."""
        now = time.monotonic()
        with self._lock:
            max_size = self.max_size
            if max_size <= 0:
                return

            # Evict LRU if at capacity
            while self._cache and len(self._cache) >= max_size and pattern not in self._cache:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Evicted pattern %r", evicted)
                if self.enable_stats:
                    self._stats.evictions += 1

            self._cache[pattern] = CacheEntry(
                pattern=compiled,
                created_at=now,
                last_accessed=now,
                access_count=0,
                compile_time=compile_time,
            )
            self._cache.move_to_end(pattern)

    def compile_with_cache(self, pattern: str) -> CompiledPattern:
        """
        Compile pattern with caching.

        Raises:
            PatternSyntaxError: Invalid pattern syntax
        """
        cached = self.get(pattern)
        if cached is not None:
            return cached

        start_time = time.perf_counter()
        try:
            compiled = self._compiler.compile(parse_pattern(pattern))
        except PatternSyntaxError:
            if self.enable_stats:
                with self._lock:
                    self._stats.errors += 1
            raise

        compile_time = time.perf_counter() - start_time
        self.put(pattern, compiled, compile_time)

        if self.enable_stats:
            with self._lock:
                self._stats.total_compile_time += compile_time

        return compiled

    def invalidate(self, pattern: Optional[str] = None):
        """Invalidate one pattern, or everything when ``pattern`` is None."""
        with self._lock:
            if pattern is None:
                self._cache.clear()
            else:
                self._cache.pop(pattern, None)

    def get_stats(self) -> CacheStats:
        """Get a snapshot of cache statistics."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                errors=self._stats.errors,
                total_compile_time=self._stats.total_compile_time,
            )

    def reset_stats(self):
        """Reset statistics counters."""
        with self._lock:
            self._stats = CacheStats()

    @contextmanager
    def disabled(self):
        """Context manager to temporarily stop storing new entries."""
        with self._lock:
            old_size = self.max_size
            self.max_size = 0
        try:
            yield
        finally:
            with self._lock:
                self.max_size = old_size

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, pattern: str) -> bool:
        with self._lock:
            return pattern in self._cache


# Global cache instance
_global_cache: Optional[PatternCache] = None
_global_lock = threading.Lock()


def get_global_cache() -> PatternCache:
    """Get or create global cache instance."""
    global _global_cache
    with _global_lock:
        if _global_cache is None:
            _global_cache = PatternCache.from_config(load_config())
        return _global_cache


def set_global_cache(cache: Optional[PatternCache]):
    """Set global cache instance; None rebuilds it from config on next use."""
    global _global_cache
    with _global_lock:
        _global_cache = cache


def compile_pattern(pattern: str, use_cache: bool = True) -> CompiledPattern:
    """
    Compile a pattern, optionally through the global cache.

    Raises:
        PatternSyntaxError: Invalid pattern syntax
    """
    if use_cache:
        return get_global_cache().compile_with_cache(pattern)
    return PatternCompiler().compile(parse_pattern(pattern))
