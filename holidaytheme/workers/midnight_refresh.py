"""
Midnight refresh worker - re-resolves the display's holiday when the local day changes.

One refresher per display session. It holds at most one pending wake-up:
every re-arm cancels the previous one first.
"""
import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from holidaytheme.schemas.holiday_settings import HolidayResolutionConfig
from holidaytheme.services.registry import DEFAULT_REGISTRY, HolidayRegistry
from holidaytheme.services.resolver import HolidayThemeState, resolve_holiday_state
from holidaytheme.utils.logging import log_context
from holidaytheme.utils.timezone import milliseconds_until_next_local_midnight

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_MS = 1000  # Fire just past midnight, never just before


class MidnightRefresher:
    def __init__(
        self,
        config: HolidayResolutionConfig,
        registry: HolidayRegistry = DEFAULT_REGISTRY,
        buffer_ms: int = DEFAULT_BUFFER_MS,
        on_change: Optional[Callable[[HolidayThemeState], None]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config
        self.registry = registry
        self.buffer_ms = buffer_ms
        self.on_change = on_change
        self._clock = clock
        self._state: Optional[HolidayThemeState] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> HolidayThemeState:
        if self._state is None:
            return self.refresh()
        return self._state

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def _now(self) -> Optional[datetime]:
        return self._clock() if self._clock else None

    def refresh(self) -> HolidayThemeState:
        """Resolve now and notify on_change."""
        with log_context(timezone=self.config.timezone):
            state = resolve_holiday_state(self.config, now=self._now(), registry=self.registry)
            logger.info(
                "Holiday state for %s: %s (day %d/%d)",
                state.local_date,
                state.holiday.id if state.holiday else "none",
                state.day_of_holiday,
                state.total_days,
                extra={
                    "holiday_id": state.holiday.id if state.holiday else None,
                    "day_of_holiday": state.day_of_holiday,
                },
            )
        self._state = state
        if self.on_change is not None:
            try:
                self.on_change(state)
            except Exception as e:
                logger.error("Holiday on_change callback failed: %s", str(e))
        return state

    def next_delay_ms(self) -> int:
        return milliseconds_until_next_local_midnight(self.config.timezone, self._now()) + self.buffer_ms

    async def _run(self):
        while True:
            delay_ms = self.next_delay_ms()
            logger.debug(
                "Next holiday check in %d ms", delay_ms,
                extra={"timezone": self.config.timezone, "delay_ms": delay_ms},
            )
            await asyncio.sleep(delay_ms / 1000)
            try:
                self.refresh()
            except Exception as e:
                logger.error("Midnight holiday refresh error: %s", str(e))

    def _arm(self):
        self._cancel()
        self._task = asyncio.create_task(self._run())

    def _cancel(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def start(self) -> HolidayThemeState:
        """Resolve immediately and arm the midnight wake-up. Needs a running event loop."""
        state = self.refresh()
        self._arm()
        return state

    def reconfigure(self, config: HolidayResolutionConfig) -> HolidayThemeState:
        """Swap settings, re-resolve, and re-arm against the new timezone."""
        self._cancel()
        self.config = config
        state = self.refresh()
        self._arm()
        return state

    async def stop(self):
        """Cancel the pending wake-up. Safe to call more than once."""
        task = self._task
        self._cancel()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
        logger.info("Midnight refresher stopped")
