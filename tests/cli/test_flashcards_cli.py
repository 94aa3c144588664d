from unittest.mock import patch

from studyaid.cli._review_logic import review_logic
from studyaid.cli._timer_logic import timer_logic
from studyaid.constants import SAMPLE_FLASHCARDS
from studyaid.deck import Deck


def test_review_logic_with_samples():
    """Tests that review_logic seeds the deck and hands it to the flow."""
    with patch("studyaid.cli._review_logic.start_review_flow") as mock_flow:
        deck = review_logic(load_samples=True, seed=11)

    mock_flow.assert_called_once_with(deck)
    assert isinstance(deck, Deck)
    assert len(deck) == len(SAMPLE_FLASHCARDS)


def test_review_logic_seed_is_reproducible():
    with patch("studyaid.cli._review_logic.start_review_flow"):
        first = review_logic(load_samples=True, seed=5)
        second = review_logic(load_samples=True, seed=5)
    assert first.presentation == second.presentation


def test_review_logic_without_samples():
    with patch("studyaid.cli._review_logic.start_review_flow"):
        deck = review_logic(load_samples=False)
    assert len(deck) == 0


def test_timer_logic_runs_countdown(capsys):
    assert timer_logic(minutes="0", seconds="1", tick_interval=0) is True
    assert "Time's up!" in capsys.readouterr().out


def test_timer_logic_rejects_zero():
    assert timer_logic(minutes="0", seconds="0", tick_interval=0) is False
