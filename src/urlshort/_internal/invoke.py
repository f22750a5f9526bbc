"""Invoke helpers — call sync or async handlers uniformly.

Fallback handlers can be ``def`` or ``async def``. Any code that calls
a user-provided handler goes through ``invoke`` so the sync/async check
lives in exactly one place.

Usage::

    from urlshort._internal.invoke import invoke

    response = await invoke(fallback, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
