"""
Command-line interface for reviewing flashcards.
"""

import logging

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from studyaid.deck import Deck
from studyaid.exceptions import InvalidInputError
from studyaid.models import DeckSnapshot

logger = logging.getLogger(__name__)
console = Console()

REVIEW_PROMPT = (
    "[bold](f)lip, (n)ext, (a)dd, (l)ist, (s)huffle, (q)uit "
    "[Enter = flip]: [/bold]"
)
EMPTY_PROMPT = "[bold](a)dd, (l)ist, (q)uit: [/bold]"


def _render_snapshot(snapshot: DeckSnapshot) -> None:
    """
    Draw the active card, and its answer when revealed.

    Subscribed to the deck, so it runs after every deck change.
    """
    card = snapshot.current
    if card is None:
        console.print(
            "[bold yellow]No flashcards to review. Please add some.[/bold yellow]"
        )
        return
    console.rule(f"[bold]Card {snapshot.index + 1} of {snapshot.size}[/bold]")
    console.print(
        Panel(escape(card.question), title="Question", border_style="green")
    )
    if snapshot.answer_visible:
        console.print(
            Panel(escape(card.answer), title="Answer", border_style="blue")
        )


def _display_card_list(deck: Deck) -> None:
    """Print every card in the order it was added."""
    if len(deck) == 0:
        console.print("[yellow]No flashcards to display.[/yellow]")
        return
    table = Table(title="Current Flashcards")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Question", style="green")
    table.add_column("Answer", style="blue")
    for number, card in enumerate(deck.cards, start=1):
        table.add_row(str(number), escape(card.question), escape(card.answer))
    console.print(table)


def _add_card(deck: Deck) -> None:
    """Prompt for a question and an answer and add them to the deck."""
    console.print("[bold]Add New Flashcard[/bold]")
    question = console.input("Question: ")
    answer = console.input("Answer: ")
    try:
        deck.add(question, answer)
    except InvalidInputError as e:
        logger.info(f"Rejected new flashcard: {e}")
        console.print(
            f"[bold red]Card not saved: {escape(str(e))}[/bold red]"
        )
        return
    console.print("[green]Card saved. Starting a new shuffled session.[/green]")


def start_review_flow(deck: Deck) -> None:
    """
    Runs the interactive review loop until the user quits.

    Args:
        deck: The deck to review. Cards added here stay in it afterwards.
    """
    console.print("[bold cyan]Starting review session...[/bold cyan]")
    unsubscribe = deck.subscribe(_render_snapshot)
    try:
        _render_snapshot(deck.snapshot())
        while True:
            prompt = EMPTY_PROMPT if len(deck) == 0 else REVIEW_PROMPT
            try:
                choice = console.input(prompt).strip().lower()
            except EOFError:
                break

            if choice == "q":
                break
            if choice == "a":
                _add_card(deck)
                continue
            if choice == "l":
                _display_card_list(deck)
                continue
            if len(deck) == 0:
                console.print(
                    "[bold red]Nothing to review yet. Add a card first.[/bold red]"
                )
                continue

            if choice in ("", "f"):
                deck.toggle_answer()
            elif choice == "n":
                deck.next()
            elif choice == "s":
                deck.new_session()
            else:
                console.print(
                    f"[bold red]Unknown command '{escape(choice)}'.[/bold red]"
                )
    finally:
        unsubscribe()

    console.print("[bold cyan]Review session finished. Well done![/bold cyan]")
