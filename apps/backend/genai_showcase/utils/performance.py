from __future__ import annotations
import logging
import time
from typing import Optional, Any
from contextlib import asynccontextmanager
from genai_showcase.core.config import settings


@asynccontextmanager
async def track_performance(
    operation_type: str,
    operation_name: str,
    metadata: Optional[dict[str, Any]] = None,
):
    """Context manager for timing backend calls.

    Does nothing if performance tracking is disabled.
    When enabled, measures execution time and logs it together with the
    metadata, whether the wrapped block succeeds or raises.
    """
    if not settings.enable_performance_tracking:
        yield
        return

    start_time = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "ok"
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logging.info(
            f"perf {operation_type}.{operation_name} outcome={outcome} "
            f"duration_ms={duration_ms:.1f} metadata={metadata or {}}"
        )
