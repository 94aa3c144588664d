"""
This module defines the Deck class, which holds the flashcards of a study
session in memory and tracks the card currently under review. Cards are
stored in insertion order and presented in a shuffled order that is
recomputed whenever a card is added or a new session is requested.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from .constants import SAMPLE_FLASHCARDS
from .events import ChangeNotifier
from .exceptions import EmptyDeckError, InvalidInputError
from .models import DeckSnapshot, Flashcard

# Initialize logger
logger = logging.getLogger(__name__)


class Deck:
    """
    In-memory flashcard deck with a cycling review position.

    This class is responsible for:
    - Storing cards in the order they were added.
    - Keeping a shuffled presentation order for review.
    - Cycling through the presentation order one card at a time.
    - Notifying subscribers with a DeckSnapshot after every change.
    """

    def __init__(
        self,
        cards: Optional[Iterable[Flashcard]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Create a deck, optionally pre-filled with cards.

        Parameters:
            cards (Optional[Iterable[Flashcard]]): Initial cards, stored in the given order.
            rng (Optional[random.Random]): Random source used for shuffling; a fresh
                `random.Random()` when omitted.
        """
        self._rng = rng or random.Random()
        self._cards: List[Flashcard] = list(cards or [])
        self._order: List[Flashcard] = self._shuffle(self._cards)
        self._index = 0
        self._answer_visible = False
        self._notifier: ChangeNotifier[DeckSnapshot] = ChangeNotifier()

    @classmethod
    def with_samples(cls, rng: Optional[random.Random] = None) -> "Deck":
        """Build a deck pre-loaded with the built-in sample cards."""
        cards = [Flashcard(question=q, answer=a) for q, a in SAMPLE_FLASHCARDS]
        return cls(cards, rng=rng)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def cards(self) -> Tuple[Flashcard, ...]:
        """Cards in insertion order."""
        return tuple(self._cards)

    @property
    def presentation(self) -> Tuple[Flashcard, ...]:
        """Cards in the current review order."""
        return tuple(self._order)

    @property
    def index(self) -> int:
        return self._index

    @property
    def answer_visible(self) -> bool:
        return self._answer_visible

    def __len__(self) -> int:
        return len(self._cards)

    def snapshot(self) -> DeckSnapshot:
        return DeckSnapshot(
            cards=tuple(self._order),
            index=self._index,
            answer_visible=self._answer_visible,
        )

    def subscribe(
        self, listener: Callable[[DeckSnapshot], None]
    ) -> Callable[[], None]:
        """
        Register a listener called with a DeckSnapshot after every change.

        Returns:
            A callable that unsubscribes the listener.
        """
        return self._notifier.subscribe(listener)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, question: str, answer: str) -> Flashcard:
        """
        Add a new card and restart the review session with it included.

        Parameters:
            question (str): Front text of the card.
            answer (str): Back text of the card.

        Returns:
            Flashcard: The card that was added.

        Raises:
            InvalidInputError: If the question or answer is empty or blank. The
                deck is left unchanged.
        """
        try:
            card = Flashcard(question=question, answer=answer)
        except ValidationError as e:
            fields = ", ".join(
                str(err["loc"][0]) for err in e.errors() if err["loc"]
            )
            raise InvalidInputError(
                f"Flashcard {fields or 'fields'} must not be blank.",
                original_exception=e,
            ) from e

        self._cards.append(card)
        logger.info(f"Added flashcard; deck now holds {len(self._cards)} cards.")
        self._restart()
        return card

    def shuffled_view(self) -> List[Flashcard]:
        """
        Return a new random permutation of all cards.

        Neither the stored order nor the presentation order is changed.
        """
        return self._shuffle(self._cards)

    def new_session(self) -> None:
        """Reshuffle the presentation order and go back to the first card."""
        if not self._cards:
            logger.debug("new_session ignored: deck is empty.")
            return
        self._restart()

    def next(self) -> None:
        """
        Advance to the next card, wrapping to the first after the last.

        The answer of the new card starts hidden. Does nothing on an empty deck.
        """
        if not self._order:
            logger.debug("next ignored: deck is empty.")
            return
        self._index = (self._index + 1) % len(self._order)
        self._answer_visible = False
        self._notify()

    def current(self) -> Flashcard:
        """
        Return the card at the active review position.

        Raises:
            EmptyDeckError: If the deck has no cards.
        """
        if not self._order:
            raise EmptyDeckError("No flashcards to review. Please add some.")
        return self._order[self._index]

    def toggle_answer(self) -> bool:
        """
        Show or hide the answer of the active card.

        Returns:
            bool: The new visibility.

        Raises:
            EmptyDeckError: If the deck has no cards.
        """
        if not self._order:
            raise EmptyDeckError("No flashcards to review. Please add some.")
        self._answer_visible = not self._answer_visible
        self._notify()
        return self._answer_visible

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _shuffle(self, cards: List[Flashcard]) -> List[Flashcard]:
        return self._rng.sample(cards, k=len(cards))

    def _restart(self) -> None:
        self._order = self._shuffle(self._cards)
        self._index = 0
        self._answer_visible = False
        self._notify()

    def _notify(self) -> None:
        self._notifier.emit(self.snapshot())
