"""studyaid - an in-memory flashcard deck and a countdown study timer."""

from .models import Flashcard, DeckSnapshot, TimerSnapshot, TimerState
from .deck import Deck
from .timer import StudyTimer, format_remaining, parse_time_part
from .exceptions import StudyAidError, InvalidInputError, EmptyDeckError

__all__ = [
    "Flashcard",
    "DeckSnapshot",
    "TimerSnapshot",
    "TimerState",
    "Deck",
    "StudyTimer",
    "format_remaining",
    "parse_time_part",
    "StudyAidError",
    "InvalidInputError",
    "EmptyDeckError",
]
