"""Cache gate for minified output.

Keys are built from the raw ``files`` query value, not the resolved
paths, so ``/a.css,/b.css`` and ``/b.css,/a.css`` are different entries.

Adapters may be sync or async. Reads are awaited. Writes never fail the
response: with a task group (``Minify.running()``) they run in the
background, without one they are awaited in place. Either way a failing
write is logged and dropped.
"""

import logging
import threading
from collections import OrderedDict
from typing import Any, Protocol

from anyio.abc import TaskGroup

from combo._internal.invoke import invoke

logger = logging.getLogger("combo.cache")


class CacheAdapter(Protocol):
    """Protocol for pluggable cache stores.

    ``get`` returns the stored value or ``None``; ``set`` stores a value.
    Either may return an awaitable. ``prefix``, when set, namespaces keys::

        class RedisCache:
            prefix = "myapp"

            async def get(self, key: str) -> str | None:
                return await redis.get(key)

            async def set(self, key: str, value: str) -> None:
                await redis.set(key, value)
    """

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> Any: ...


def cache_key(files: str, prefix: str | None = None) -> str:
    """Build the cache key for a raw ``files`` query value."""
    if prefix:
        return f"{prefix}:minify:{files}"
    return f"minify:{files}"


class CacheGate:
    """Looks up and stores minified output through an optional adapter.

    *task_group*, when given, runs stores in the background so the
    response goes out without waiting for the adapter.
    """

    __slots__ = ("_adapter", "_task_group")

    def __init__(self, adapter: CacheAdapter | None, task_group: TaskGroup | None = None) -> None:
        self._adapter = adapter
        self._task_group = task_group

    @property
    def enabled(self) -> bool:
        return self._adapter is not None

    def key_for(self, files: str) -> str:
        """Cache key for *files* under this adapter's prefix."""
        return cache_key(files, getattr(self._adapter, "prefix", None))

    async def lookup(self, key: str) -> Any:
        """Return the cached value for *key*, or ``None`` on a miss."""
        if self._adapter is None:
            return None
        value = await invoke(self._adapter.get, key)
        return value or None

    async def store(self, key: str, value: str) -> None:
        """Store *value* under *key*; failures are logged, never raised."""
        if self._adapter is None:
            return
        if self._task_group is None:
            await _write(self._adapter, key, value)
            return
        try:
            self._task_group.start_soon(_write, self._adapter, key, value)
        except Exception:
            logger.warning("Could not schedule cache store for %s", key, exc_info=True)


async def _write(adapter: CacheAdapter, key: str, value: str) -> None:
    # Must not raise: it runs inside the handle's task group
    try:
        await invoke(adapter.set, key, value)
    except Exception:
        logger.warning("Cache store failed for %s", key, exc_info=True)


class MemoryCache:
    """In-process cache adapter.

    Thread-safe. With ``max_entries`` set, the oldest entry is evicted
    once the limit is reached::

        minify.setup(MinifyConfig(www_root="./public", caching=MemoryCache(prefix="app")))
    """

    __slots__ = ("_data", "_lock", "max_entries", "prefix")

    def __init__(self, prefix: str | None = None, *, max_entries: int | None = None) -> None:
        self.prefix = prefix
        self.max_entries = max_entries
        self._data: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            if self.max_entries is not None:
                while len(self._data) > self.max_entries:
                    self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data
