"""Invoke helpers — call sync or async collaborators uniformly.

Cache adapters, file readers and error handlers may be ``def`` or
``async def``. This module keeps the sync/async check in one place.

Usage::

    from combo._internal.invoke import invoke

    cached = await invoke(adapter.get, key)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    Works with both sync and async callables::

        # sync — a dict-backed cache
        def get(key):
            return store.get(key)

        # async — a redis-backed cache
        async def get(key):
            return await redis.get(key)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
