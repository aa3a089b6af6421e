import sqlite3

import pytest

from kanatype.card import Card, FIELD_SEPARATOR
from kanatype.collection import (
    MAX_CARDS,
    CardCollection,
    CollectionError,
    DeckNotFoundError,
    extract_cards_from_deck,
    find_deck_by_name,
    load_collection,
)


def _fields(*parts):
    return FIELD_SEPARATOR.join(parts)


def _make_db(path, decks, notes, cards):
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE decks (id INTEGER PRIMARY KEY, name TEXT,
                            mtime_secs INTEGER, usn INTEGER);
        CREATE TABLE notes (id INTEGER PRIMARY KEY, flds TEXT);
        CREATE TABLE cards (id INTEGER PRIMARY KEY, nid INTEGER, did INTEGER);
        """
    )
    conn.executemany("INSERT INTO decks VALUES (?, ?, 0, 0)", decks)
    conn.executemany("INSERT INTO notes VALUES (?, ?)", notes)
    conn.executemany("INSERT INTO cards VALUES (?, ?, ?)", cards)
    conn.commit()
    return conn


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "collection.anki2"
    conn = _make_db(
        path,
        decks=[(1, "Default"), (1700000000001, "Japanese")],
        notes=[
            (10, _fields("猫", "ねこ", "cat")),
            (11, _fields("犬", "いぬ", "dog")),
            (12, "broken"),
            (13, None),
            (14, _fields("鳥", "とり", "bird")),
        ],
        cards=[
            (100, 10, 1700000000001),
            (101, 11, 1700000000001),
            (102, 12, 1700000000001),
            (103, 13, 1700000000001),
            (104, 14, 1),
        ],
    )
    conn.close()
    return path


def test_find_deck_by_name(db_path):
    with sqlite3.connect(db_path) as conn:
        assert find_deck_by_name(conn, "Japanese") == 1700000000001
        assert find_deck_by_name(conn, "Default") == 1


def test_find_deck_missing(db_path):
    with sqlite3.connect(db_path) as conn:
        assert find_deck_by_name(conn, "Nope") is None


def test_find_deck_last_duplicate_wins(tmp_path):
    conn = _make_db(tmp_path / "dup.db", [(5, "Same"), (6, "Same")], [], [])
    try:
        assert find_deck_by_name(conn, "Same") == 6
    finally:
        conn.close()


def test_find_deck_without_table_is_error(tmp_path):
    conn = sqlite3.connect(tmp_path / "empty.db")
    try:
        with pytest.raises(CollectionError):
            find_deck_by_name(conn, "Japanese")
    finally:
        conn.close()


def test_extract_skips_unparseable_and_null_notes(db_path):
    with sqlite3.connect(db_path) as conn:
        cards = extract_cards_from_deck(conn, 1700000000001)
    assert cards == [Card("猫", "ねこ", "cat"), Card("犬", "いぬ", "dog")]


def test_extract_respects_limit(db_path):
    with sqlite3.connect(db_path) as conn:
        cards = extract_cards_from_deck(conn, 1700000000001, 1)
    assert len(cards) == 1
    assert cards[0].word in {"猫", "犬"}


def test_extract_default_limit_is_max_cards(tmp_path):
    notes = [(i, _fields(f"w{i}", f"r{i}", f"m{i}")) for i in range(1, MAX_CARDS + 11)]
    cards = [(i, i, 7) for i in range(1, MAX_CARDS + 11)]
    conn = _make_db(tmp_path / "big.db", [(7, "Big")], notes, cards)
    try:
        assert len(extract_cards_from_deck(conn, 7)) == MAX_CARDS
    finally:
        conn.close()


def test_extract_unknown_deck_is_empty(db_path):
    with sqlite3.connect(db_path) as conn:
        assert extract_cards_from_deck(conn, 999) == []


def test_load_collection(db_path):
    with load_collection(db_path, "Japanese") as collection:
        assert len(collection) == 2
        assert collection[0] == Card("猫", "ねこ", "cat")
        assert [card.reading for card in collection] == ["ねこ", "いぬ"]
        assert collection[1:] == [Card("犬", "いぬ", "dog")]


def test_load_collection_missing_deck(db_path):
    with pytest.raises(DeckNotFoundError):
        load_collection(db_path, "Missing")


def test_deck_not_found_is_collection_error(db_path):
    with pytest.raises(CollectionError):
        load_collection(db_path, "Missing")


def test_load_collection_without_tables(tmp_path):
    with pytest.raises(CollectionError):
        load_collection(tmp_path / "blank.db", "Japanese")


def test_context_manager_closes_connection(db_path):
    with load_collection(db_path, "Japanese") as collection:
        conn = collection.conn
    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_close_closes_connection():
    conn = sqlite3.connect(":memory:")
    collection = CardCollection(conn=conn, cards=[Card("a", "b", "c")])
    collection.close()
    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")
    assert list(collection) == [Card("a", "b", "c")]