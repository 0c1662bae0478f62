# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""A value recomputed periodically in the background."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar('T')


class PolledValue(Generic[T]):
    """
    Keeps the last successful result of a producer called every ``period`` seconds.

    The refresh loop is started as a task on the running event loop when the
    instance is created, the first refresh is not delayed. Failures of the
    producer are logged and leave the previous value in place, they never stop
    the loop.

    Parameters
    ----------
    label:
        Name used in log messages.
    producer:
        Coroutine function called without arguments to compute a new value.
    period:
        Time in seconds between the end of a refresh and the start of the next.
    """

    def __init__(
        self,
        label: str,
        producer: Callable[[], Awaitable[T]],
        period: float,
    ) -> None:
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self._label = label
        self._producer = producer
        self._period = period
        # (value, refresh time in ns), replaced as a whole by each refresh
        self._slot: tuple[T, int] | None = None
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name=f"polled-value:{label}"
        )

    @property
    def label(self) -> str:
        return self._label

    @property
    def period(self) -> float:
        return self._period

    @property
    def last_refresh_ns(self) -> int | None:
        """Time of the last successful refresh in ns since the epoch, if any."""
        return None if self._slot is None else self._slot[1]

    @property
    def age_seconds(self) -> float | None:
        """Seconds elapsed since the last successful refresh, if any."""
        if self._slot is None:
            return None
        return (time.time_ns() - self._slot[1]) / 1e9

    @property
    def is_running(self) -> bool:
        return not self._task.done()

    def latest(self) -> T | None:
        """Return the last successfully produced value, or None if there is none."""
        return None if self._slot is None else self._slot[0]

    async def stop(self) -> None:
        """Cancel the refresh loop. The last value stays readable."""
        if self._task.done():
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            # Only the loop's own cancellation is expected here, not ours
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.debug("polled_value_stopped", label=self._label)

    async def _run(self) -> None:
        while True:
            await self._refresh()
            await asyncio.sleep(self._period)

    async def _refresh(self) -> None:
        try:
            value = await self._producer()
        except Exception:
            logger.exception(
                "polled_value_refresh_failed",
                label=self._label,
                has_previous=self._slot is not None,
            )
            return
        self._slot = (value, time.time_ns())
        logger.debug("polled_value_refreshed", label=self._label)
