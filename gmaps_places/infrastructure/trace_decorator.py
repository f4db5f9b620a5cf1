"""
Trace decorator for Places client operations.

Provides a @traced decorator that wraps an async client method and logs:
- Span name (e.g. "places.find_places_from_text")
- Duration and success/failure status
- Exception details on errors

Arguments are not recorded, so the API key never reaches the logs.

Usage:
    @traced(span_name="places.find_places_from_text")
    async def find_places_from_text(self, query: str) -> PlaceQueryResponse:
        ...
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable

from loguru import logger


def traced(span_name: str) -> Callable:
    """
    Decorator that times an async client operation.

    Args:
        span_name: The span name (e.g. "places.validate_api_key").
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.monotonic()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.monotonic() - start_time) * 1000
                logger.error(
                    f"[trace] {span_name} failed after {duration_ms:.1f}ms: "
                    f"{type(e).__name__}: {e}"
                )
                raise

            duration_ms = (time.monotonic() - start_time) * 1000
            logger.debug(f"[trace] {span_name} completed in {duration_ms:.1f}ms")
            return result

        return wrapper

    return decorator
