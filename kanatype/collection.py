"""Loading cards of one deck from an Anki collection database."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from typing import overload

from kanatype.card import Card, CardParseError, parse_card_fields

MAX_CARDS = 50

log = logging.getLogger(__name__)

_DECKS_SQL = "SELECT id, name, mtime_secs, usn FROM decks"
_CARDS_SQL = (
    "SELECT n.id, n.flds, c.id "
    "FROM cards c "
    "JOIN notes n ON c.nid = n.id "
    "WHERE c.did = ? "
    "LIMIT ?"
)


class CollectionError(Exception):
    """Raised when a collection cannot be read."""


class DeckNotFoundError(CollectionError):
    """Raised when no deck has the requested name."""


def _as_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def find_deck_by_name(conn: sqlite3.Connection, deck_name: str) -> int | None:
    """Return the id of the deck called ``deck_name``, or None.

    When several decks share the name, the last one listed wins.
    """
    try:
        rows = conn.execute(_DECKS_SQL).fetchall()
    except sqlite3.Error as exc:
        raise CollectionError(f"failed to query decks: {exc}") from exc

    found: int | None = None
    for deck_id, raw_name, mtime, usn in rows:
        name = _as_text(raw_name)
        if name is None:
            continue
        log.info("deck %s %r (mtime %s, usn %s)", deck_id, name, mtime, usn)
        if name == deck_name:
            found = deck_id
    return found


def extract_cards_from_deck(
    conn: sqlite3.Connection, deck_id: int, limit: int = MAX_CARDS
) -> list[Card]:
    """Return the parseable cards among the first ``limit`` cards of a deck."""
    try:
        rows = conn.execute(_CARDS_SQL, (deck_id, limit)).fetchall()
    except sqlite3.Error as exc:
        raise CollectionError(f"failed to query cards: {exc}") from exc

    cards: list[Card] = []
    for note_id, raw_fields, card_id in rows:
        fields = _as_text(raw_fields)
        if fields is None:
            continue
        try:
            card = parse_card_fields(fields)
        except CardParseError as exc:
            log.debug("skipping card %s (note %s): %s", card_id, note_id, exc)
            continue
        log.info("card %s (note %s): %s / %s / %s",
                 card_id, note_id, card.word, card.reading, card.meaning)
        cards.append(card)
    log.info("extracted %d cards from deck %s", len(cards), deck_id)
    return cards


@dataclass
class CardCollection:
    """Cards loaded from one deck, together with the open database."""

    conn: sqlite3.Connection
    cards: list[Card] = field(default_factory=list)

    def close(self) -> None:
        """Close the underlying database connection."""
        self.conn.close()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> list[Card]: ...

    def __getitem__(self, index):
        return self.cards[index]

    def __enter__(self) -> CardCollection:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_collection(db_path: str | PathLike[str], deck_name: str) -> CardCollection:
    """Open a collection database and load the cards of ``deck_name``."""
    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as exc:
        raise CollectionError(f"cannot open database {db_path}: {exc}") from exc

    try:
        deck_id = find_deck_by_name(conn, deck_name)
        if deck_id is None:
            raise DeckNotFoundError(f"deck not found: {deck_name!r}")
        cards = extract_cards_from_deck(conn, deck_id)
    except BaseException:
        conn.close()
        raise
    return CardCollection(conn=conn, cards=cards)