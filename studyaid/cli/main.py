"""
CLI entry point for studyaid.
"""

# Standard library imports
from typing import Optional

# Third-party imports
import typer
from rich.console import Console

# Local application imports
from studyaid.config import get_settings
from studyaid.logging_config import setup_logging
from studyaid.cli._review_logic import review_logic
from studyaid.cli._timer_logic import timer_logic


console = Console()

app = typer.Typer(
    name="studyaid",
    help="Studyaid: flashcard review and a countdown study timer.",
    add_completion=False,
    rich_markup_mode="markdown",
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Root log level (DEBUG, INFO, WARNING, ...). "
        "Falls back to STUDYAID_LOG_LEVEL.",
    ),
):
    """
    Configure logging before any command runs.
    """
    setup_logging(log_level or get_settings().log_level)


# ---------------------------------------------------------------------------
# Review
# ---------------------------------------------------------------------------


@app.command()
def review(
    samples: Optional[bool] = typer.Option(
        None,
        "--samples/--no-samples",
        help="Pre-load the sample flashcards. "
        "Defaults to STUDYAID_LOAD_SAMPLE_CARDS.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for shuffling, for a reproducible card order.",
    ),
):
    """
    Review flashcards interactively.

    Flip a card to see its answer, move to the next card, add new cards or
    reshuffle into a fresh session. Cards exist only for this run.
    """
    settings = get_settings()
    load_samples = settings.load_sample_cards if samples is None else samples
    review_logic(load_samples=load_samples, seed=seed)


# ---------------------------------------------------------------------------
# Timer
# ---------------------------------------------------------------------------


@app.command()
def timer(
    minutes: Optional[str] = typer.Option(
        None,
        "--minutes",
        "-m",
        help="Minutes to count down. Non-numeric input counts as 0.",
    ),
    seconds: Optional[str] = typer.Option(
        None,
        "--seconds",
        "-s",
        help="Seconds to count down. Non-numeric input counts as 0.",
    ),
):
    """
    Run a countdown study timer and print the remaining time every tick.

    Exits with 1 if the total duration is zero. Press Ctrl-C to reset the
    timer and exit.
    """
    settings = get_settings()
    minutes = settings.default_minutes if minutes is None else minutes
    seconds = settings.default_seconds if seconds is None else seconds

    try:
        finished = timer_logic(
            minutes=minutes,
            seconds=seconds,
            tick_interval=settings.tick_interval_seconds,
        )
    except KeyboardInterrupt:
        console.print("[bold yellow]Timer reset.[/bold yellow]")
        raise typer.Exit(code=130)

    if not finished:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
