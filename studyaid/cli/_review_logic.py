import random
from typing import Optional

from studyaid.cli.review_ui import start_review_flow
from studyaid.deck import Deck


def review_logic(load_samples: bool, seed: Optional[int] = None) -> Deck:
    """
    Build a deck and start the interactive review flow on it.

    Parameters:
        load_samples (bool): Pre-load the built-in sample cards.
        seed (Optional[int]): Seed for the shuffle, for reproducible sessions.

    Returns:
        Deck: The deck after the session ends, including cards added during it.
    """
    rng = random.Random(seed) if seed is not None else None
    deck = Deck.with_samples(rng=rng) if load_samples else Deck(rng=rng)
    start_review_flow(deck)
    return deck
