"""Typer entry-point wiring for the carddeck CLI."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..cards import Card, Rank, Suit
from ..config import SORT_MODES, DeckConfig
from ..transforms import InvalidCount
from .render import card_strip, deck_table, reference_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    TABLE = "table"
    PLAIN = "plain"
    LABELS = "labels"


_RANK_ALIASES = {rank.symbol.lower(): rank for rank in Rank} | {rank.title.lower(): rank for rank in Rank}
_SUIT_ALIASES = {suit.symbol.lower(): suit for suit in Suit.standard()} | {
    alias: suit for suit in Suit.standard() for alias in (suit.title.lower(), f"{suit.title.lower()}s")
}


def _parse_rank(value: str) -> Rank:
    try:
        return _RANK_ALIASES[value.strip().lower()]
    except KeyError:
        raise typer.BadParameter(f"unknown rank '{value}'", param_hint="--exclude-rank") from None


def _parse_suit(value: str) -> Suit:
    try:
        return _SUIT_ALIASES[value.strip().lower()]
    except KeyError:
        raise typer.BadParameter(f"unknown suit '{value}'", param_hint="--exclude-suit") from None


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_config(
    decks: int,
    jokers: int,
    exclude_rank: Sequence[str],
    exclude_suit: Sequence[str],
    sort: str | None,
    shuffle: bool,
    seed: int | None,
) -> DeckConfig:
    try:
        return DeckConfig(
            decks=decks,
            jokers=jokers,
            exclude_ranks=tuple(_parse_rank(value) for value in exclude_rank),
            exclude_suits=tuple(_parse_suit(value) for value in exclude_suit),
            sort=sort,
            shuffle=shuffle,
            seed=seed,
        )
    except (InvalidCount, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_cards(cards: Sequence[Card], output: OutputFormat) -> None:
    if output is OutputFormat.PLAIN:
        for card in cards:
            typer.echo(str(card))
    elif output is OutputFormat.LABELS:
        console.print(card_strip(cards))
    else:
        console.print(deck_table(cards))


@app.command()
def build(
    decks: int = typer.Option(1, min=0, help="Number of standard decks to combine."),
    jokers: int = typer.Option(0, min=0, help="Jokers appended after duplication."),
    exclude_rank: list[str] = typer.Option([], "--exclude-rank", help="Rank to remove, e.g. 2, J or queen."),
    exclude_suit: list[str] = typer.Option([], "--exclude-suit", help="Suit to remove, e.g. S or hearts."),
    sort: str | None = typer.Option(None, help=f"Sort mode: {', '.join(SORT_MODES)}."),
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle the finished deck."),
    seed: int | None = typer.Option(
        None,
        envvar="CARDDECK_SEED",
        help="Random seed for reproducible shuffles (omit for randomness).",
    ),
    output: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", help="Output style."),
    debug: bool = typer.Option(False, "--debug", help="Log each pipeline step."),
) -> None:
    """Build a deck and print it."""

    _configure_logging(debug)
    config = _build_config(decks, jokers, exclude_rank, exclude_suit, sort, shuffle, seed)
    logger.debug("building deck from %s", config)
    _print_cards(config.build(), output)


@app.command()
def info() -> None:
    """Show every standard card with its order key."""

    console.print(reference_table())


def main() -> None:
    """Entry-point for ``python -m carddeck.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
