import asyncio
from typing import Any

from studyaid.cli.timer_ui import run_countdown
from studyaid.timer import StudyTimer


async def _run(minutes: Any, seconds: Any, tick_interval: float) -> bool:
    async with StudyTimer(tick_interval=tick_interval) as timer:
        return await run_countdown(timer, minutes, seconds)


def timer_logic(minutes: Any, seconds: Any, tick_interval: float) -> bool:
    """
    Run a countdown to completion on a fresh event loop.

    The timer is torn down when the countdown ends or is interrupted, so
    no countdown task outlives this call.

    Parameters:
        minutes: Raw minutes input; parsed leniently.
        seconds: Raw seconds input; parsed leniently.
        tick_interval (float): Seconds between ticks.

    Returns:
        bool: True if the countdown finished, False if the duration was rejected.
    """
    return asyncio.run(_run(minutes, seconds, tick_interval))
