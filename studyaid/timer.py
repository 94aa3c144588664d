"""
Countdown study timer.

The StudyTimer owns the remaining countdown time and a small state machine
(Setting -> Running <-> Paused -> Finished, with reset back to Setting from
anywhere). While Running, a single asyncio task sleeps for one tick interval
and removes one second from the countdown, until it reaches zero.

Every countdown task carries a CountdownToken. Pausing, resetting and
closing the timer invalidate the token and cancel the task; the task checks
its token after each sleep, so a stale task never touches the countdown.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from .constants import DEFAULT_TICK_INTERVAL_SECONDS, TICK_MS
from .events import ChangeNotifier
from .models import TimerSnapshot, TimerState

# Initialize logger
logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[Any]]


def parse_time_part(value: Any) -> int:
    """
    Leniently convert a minutes or seconds input to a non-negative int.

    Values that cannot be read as an integer (e.g. "abc", "" or None)
    become 0, as do negative numbers.

    Parameters:
        value: The raw input, typically the text of an input field or an int.

    Returns:
        int: The parsed value, never negative.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return max(value, 0)
    try:
        parsed = int(str(value).strip())
    except ValueError:
        logger.debug(f"Treating non-numeric time input {value!r} as 0.")
        return 0
    return max(parsed, 0)


def format_remaining(remaining_ms: int) -> str:
    """Render a millisecond duration as zero-padded MM:SS."""
    minutes = remaining_ms // 60000
    seconds = (remaining_ms // 1000) % 60
    return f"{minutes:02d}:{seconds:02d}"


class CountdownToken:
    """Validity flag shared between the timer and one countdown task."""

    __slots__ = ("_valid",)

    def __init__(self) -> None:
        self._valid = True

    @property
    def valid(self) -> bool:
        return self._valid

    def invalidate(self) -> None:
        self._valid = False


class StudyTimer:
    """
    Countdown timer with set/start/pause/resume/reset operations.

    Must be started and resumed from inside a running event loop. Use it as
    an async context manager, or call `close()`/`aclose()` when the owner is
    torn down, so the countdown task never outlives it.
    """

    def __init__(
        self,
        tick_interval: float = DEFAULT_TICK_INTERVAL_SECONDS,
        sleep: Optional[SleepFunc] = None,
    ):
        """
        Create a timer in the Setting state with no time on it.

        Parameters:
            tick_interval (float): Seconds to wait between ticks.
            sleep (Optional[SleepFunc]): Awaitable sleep primitive used by the
                countdown task; defaults to `asyncio.sleep`.
        """
        if tick_interval < 0:
            raise ValueError("tick_interval must not be negative.")
        self.tick_interval = tick_interval
        self._sleep: SleepFunc = sleep or asyncio.sleep
        self._state = TimerState.Setting
        self._remaining_ms = 0
        self._token: Optional[CountdownToken] = None
        self._task: Optional[asyncio.Task] = None
        self._closed = False
        self._notifier: ChangeNotifier[TimerSnapshot] = ChangeNotifier()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def countdown_active(self) -> bool:
        """True while a countdown task is scheduled and not finished."""
        return self._task is not None and not self._task.done()

    def formatted_time(self) -> str:
        """Remaining time as zero-padded MM:SS."""
        return format_remaining(self._remaining_ms)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            state=self._state,
            remaining_ms=self._remaining_ms,
            formatted=self.formatted_time(),
        )

    def subscribe(
        self, listener: Callable[[TimerSnapshot], None]
    ) -> Callable[[], None]:
        """
        Register a listener called with a TimerSnapshot after every change.

        Returns:
            A callable that unsubscribes the listener.
        """
        return self._notifier.subscribe(listener)

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def set_time(self, minutes: Any, seconds: Any) -> int:
        """
        Put a duration on the timer without starting it.

        Only applies in the Setting state. Inputs are parsed with
        `parse_time_part`.

        Returns:
            int: The remaining time in ms after the call.
        """
        if self._state is not TimerState.Setting:
            logger.debug(f"set_time ignored in state {self._state.value}.")
            return self._remaining_ms
        total_seconds = parse_time_part(minutes) * 60 + parse_time_part(seconds)
        self._remaining_ms = total_seconds * TICK_MS
        self._notify()
        return self._remaining_ms

    def start(self, minutes: Any = None, seconds: Any = None) -> bool:
        """
        Start the countdown.

        When `minutes` or `seconds` is given the duration is set first;
        otherwise the duration from `set_time` is used. A total of zero is
        rejected and the timer stays in Setting.

        Returns:
            bool: True if the timer is now Running, False if the call was
            rejected or ignored (already running, paused, finished or closed).
        """
        if self._closed:
            logger.warning("start ignored: timer has been closed.")
            return False
        if self._state is not TimerState.Setting:
            logger.debug(f"start ignored in state {self._state.value}.")
            return False

        remaining_ms = self._remaining_ms
        if minutes is not None or seconds is not None:
            total_seconds = parse_time_part(minutes) * 60 + parse_time_part(
                seconds
            )
            remaining_ms = total_seconds * TICK_MS

        if remaining_ms <= 0:
            self._remaining_ms = 0
            logger.info("start rejected: duration must be greater than zero.")
            return False

        self._launch(remaining_ms)
        logger.info(f"Timer started at {self.formatted_time()}.")
        return True

    def pause(self) -> bool:
        """
        Suspend the countdown. Only applies while Running.

        Returns:
            bool: True if the timer is now Paused.
        """
        if self._state is not TimerState.Running:
            logger.debug(f"pause ignored in state {self._state.value}.")
            return False
        self._cancel_countdown()
        self._state = TimerState.Paused
        logger.info(f"Timer paused at {self.formatted_time()}.")
        self._notify()
        return True

    def resume(self) -> bool:
        """
        Continue a paused countdown from the current remaining time.

        The first tick after resuming comes one full interval later; time
        spent paused is never charged to the countdown.

        Returns:
            bool: True if the timer is Running again.
        """
        if self._closed:
            logger.warning("resume ignored: timer has been closed.")
            return False
        if self._state is not TimerState.Paused:
            logger.debug(f"resume ignored in state {self._state.value}.")
            return False
        self._launch()
        logger.info(f"Timer resumed at {self.formatted_time()}.")
        return True

    def reset(self) -> None:
        """Cancel any countdown and return to Setting with no time left."""
        self._cancel_countdown()
        changed = (
            self._state is not TimerState.Setting or self._remaining_ms != 0
        )
        self._state = TimerState.Setting
        self._remaining_ms = 0
        if changed:
            logger.info("Timer reset.")
            self._notify()

    def tick(self) -> None:
        """
        Apply one elapsed second. Ignored unless the timer is Running.

        Reaching zero moves the timer to Finished and ends the countdown.
        """
        if self._state is not TimerState.Running:
            return
        self._remaining_ms = max(self._remaining_ms - TICK_MS, 0)
        if self._remaining_ms == 0:
            self._state = TimerState.Finished
            if self._token is not None:
                self._token.invalidate()
            logger.info("Timer finished.")
        self._notify()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """
        Tear the timer down: cancel the countdown, reset the state and drop
        all subscribers. Later start/resume calls are ignored.
        """
        if self._closed:
            return
        self._cancel_countdown()
        self._state = TimerState.Setting
        self._remaining_ms = 0
        self._notifier.clear()
        self._closed = True
        logger.debug("Timer closed.")

    async def aclose(self) -> None:
        """Close the timer and wait for the cancelled countdown task to end."""
        task = self._task
        self.close()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def __aenter__(self) -> "StudyTimer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Countdown task
    # ------------------------------------------------------------------

    def _launch(self, remaining_ms: Optional[int] = None) -> None:
        # Fails without a running loop before any state is touched.
        loop = asyncio.get_running_loop()
        if remaining_ms is not None:
            self._remaining_ms = remaining_ms
        self._cancel_countdown()
        token = CountdownToken()
        self._token = token
        self._state = TimerState.Running
        self._task = loop.create_task(self._run_countdown(token))
        self._notify()

    def _cancel_countdown(self) -> None:
        if self._token is not None:
            self._token.invalidate()
            self._token = None
        if self._task is not None:
            if not self._task.done():
                self._task.cancel()
            self._task = None

    def _notify(self) -> None:
        self._notifier.emit(self.snapshot())

    async def _run_countdown(self, token: CountdownToken) -> None:
        while token.valid and self._state is TimerState.Running:
            await self._sleep(self.tick_interval)
            if not token.valid:
                return
            self.tick()
