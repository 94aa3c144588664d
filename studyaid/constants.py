"""
Static constants for the deck and the countdown timer.

No runtime configuration here - see ``studyaid.config`` for that.
"""
from typing import Tuple

# One tick removes exactly one second from the countdown.
TICK_MS: int = 1000

# Default tick interval in seconds for the countdown task.
DEFAULT_TICK_INTERVAL_SECONDS: float = 1.0

# Pre-filled values of the "Set Study Time" inputs.
DEFAULT_MINUTES_INPUT: str = "25"
DEFAULT_SECONDS_INPUT: str = "00"

# Question/answer pairs loaded into a fresh deck at startup.
SAMPLE_FLASHCARDS: Tuple[Tuple[str, str], ...] = (
    ("What is the capital of France?", "Paris"),
    (
        "What is the main function of the heart?",
        "To pump blood throughout the body.",
    ),
    (
        "What does 'val' mean in Kotlin?",
        "It declares a read-only (immutable) variable.",
    ),
    ("What is the largest planet in our solar system?", "Jupiter"),
)
