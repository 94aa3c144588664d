import asyncio
import logging
import os
import random
from typing import List

import pytest

from studyaid.deck import Deck
from studyaid.models import Flashcard


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Run the test with its tmpdir as the working directory, so a stray .env
    file in the repository never leaks into Settings.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers and level set by setup_logging during a test."""
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture(autouse=True)
def clean_studyaid_env(monkeypatch):
    """Remove STUDYAID_* variables inherited from the outer environment."""
    for key in list(os.environ):
        if key.startswith("STUDYAID_"):
            monkeypatch.delenv(key, raising=False)


# --- Deck Fixtures ---
@pytest.fixture
def sample_cards() -> List[Flashcard]:
    """
    Create a small list of distinct flashcards.

    Returns:
        list[Flashcard]: Five cards with questions "Q1".."Q5" and answers "A1".."A5".
    """
    return [Flashcard(question=f"Q{i}", answer=f"A{i}") for i in range(1, 6)]


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def deck(sample_cards: List[Flashcard], seeded_rng: random.Random) -> Deck:
    """A deck holding `sample_cards`, shuffled with a fixed seed."""
    return Deck(sample_cards, rng=seeded_rng)


@pytest.fixture
def empty_deck(seeded_rng: random.Random) -> Deck:
    return Deck(rng=seeded_rng)


# --- Timer Fixtures ---
async def settle(rounds: int = 5) -> None:
    """Let pending tasks run until they block again."""
    for _ in range(rounds):
        await asyncio.sleep(0)


class ManualClock:
    """
    Stand-in for `asyncio.sleep` that only wakes sleepers when advanced.

    Each call to `advance()` releases every task currently sleeping on the
    clock exactly once, i.e. delivers one tick to a running countdown.
    """

    def __init__(self) -> None:
        self._waiters: List[asyncio.Future] = []
        self.sleep_calls: List[float] = []

    async def sleep(self, delay: float) -> None:
        self.sleep_calls.append(delay)
        fut = asyncio.get_running_loop().create_future()
        self._waiters.append(fut)
        await fut

    async def settle(self) -> None:
        await settle()

    @property
    def pending(self) -> int:
        """Number of sleepers that are still waiting."""
        return sum(1 for fut in self._waiters if not fut.done())

    async def advance(self, ticks: int = 1) -> None:
        for _ in range(ticks):
            await settle()
            waiters, self._waiters = self._waiters, []
            for fut in waiters:
                if not fut.done():
                    fut.set_result(None)
            await settle()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
