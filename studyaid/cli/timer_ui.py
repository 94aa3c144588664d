"""
Command-line interface for the countdown study timer.
"""

import asyncio
import logging
from typing import Any

from rich.console import Console

from studyaid.models import TimerSnapshot, TimerState
from studyaid.timer import StudyTimer

logger = logging.getLogger(__name__)
console = Console()


async def run_countdown(timer: StudyTimer, minutes: Any, seconds: Any) -> bool:
    """
    Start the timer and print the remaining time until it finishes.

    Args:
        timer: A timer in the Setting state.
        minutes: Raw minutes input; parsed leniently.
        seconds: Raw seconds input; parsed leniently.

    Returns:
        True if the countdown ran to the end, False if the duration was
        rejected.
    """
    finished = asyncio.Event()

    def _on_change(snapshot: TimerSnapshot) -> None:
        if snapshot.state is TimerState.Finished:
            console.print(f"[bold red]{snapshot.formatted}[/bold red]")
            finished.set()
        elif snapshot.state is TimerState.Running:
            console.print(f"[bold]{snapshot.formatted}[/bold]")

    unsubscribe = timer.subscribe(_on_change)
    try:
        if not timer.start(minutes, seconds):
            console.print(
                "[bold red]Please enter a study time greater than 00:00.[/bold red]"
            )
            return False
        await finished.wait()
    finally:
        unsubscribe()

    console.print("[bold green]Time's up! Study session complete.[/bold green]")
    return True
