"""
Pydantic models shared by the deck, the timer and their subscribers.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TimerState(str, Enum):
    """
    Represents the closed set of states of the study timer.
    """

    Setting = "setting"
    Running = "running"
    Paused = "paused"
    Finished = "finished"


class Flashcard(BaseModel):
    """
    A single question/answer pair.

    Cards are immutable and compare by value; two cards with the same
    question and answer are equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    question: str = Field(..., description="Text shown on the front.")
    answer: str = Field(..., description="Text revealed on the back.")

    @field_validator("question", "answer")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only text."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class DeckSnapshot(BaseModel):
    """
    Immutable view of a deck, delivered to deck subscribers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cards: Tuple[Flashcard, ...] = Field(
        default=(),
        description="Cards in presentation (review) order.",
    )
    index: int = Field(
        default=0,
        ge=0,
        description="Position of the active card in `cards`.",
    )
    answer_visible: bool = Field(
        default=False,
        description="Whether the active card's answer is revealed.",
    )

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def current(self) -> Flashcard | None:
        """The active card, or None for an empty deck."""
        if not self.cards:
            return None
        return self.cards[self.index]


class TimerSnapshot(BaseModel):
    """
    Immutable view of the countdown, delivered to timer subscribers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state: TimerState = Field(..., description="Current timer state.")
    remaining_ms: int = Field(
        ..., ge=0, description="Remaining countdown time in ms."
    )
    formatted: str = Field(
        ..., description="Remaining time rendered as MM:SS."
    )
