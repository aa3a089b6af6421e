"""Parsing of flashcard note fields."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_SEPARATOR = "\x1f"
MAX_FIELDS = 13
_GLOSSARY_MARKER = "yomitan-glossary"
_DIV_OPEN = "<div>"
_DIV_CLOSE = "</div>"
_C_WHITESPACE = " \t\n\v\f\r"


class CardParseError(ValueError):
    """Raised when note fields do not describe a usable card."""


@dataclass(frozen=True)
class Card:
    """A vocabulary card: the word, its kana reading and its meaning."""

    word: str
    reading: str
    meaning: str


def extract_first_meaning(html: str) -> str:
    """Return the first glossary entry of a meaning field.

    Text without a glossary block is returned unchanged.
    """
    start = html.find(_GLOSSARY_MARKER)
    if start < 0:
        return html
    div = html.find(_DIV_OPEN, start)
    if div < 0:
        raise CardParseError("glossary has no <div> entry")
    content_start = div + len(_DIV_OPEN)
    end = html.find(_DIV_CLOSE, content_start)
    if end < 0:
        raise CardParseError("glossary entry is not closed")
    return html[content_start:end]


def parse_card_fields(fields: str) -> Card:
    """Build a card from a note's separator-joined field string.

    Empty fields are skipped, like consecutive separators; the first three
    remaining fields are the word, its reading and its meaning.
    """
    tokens = [token for token in fields.split(FIELD_SEPARATOR) if token]
    tokens = [token.strip(_C_WHITESPACE) for token in tokens[:MAX_FIELDS]]
    if len(tokens) < 3:
        raise CardParseError(
            f"expected at least 3 fields, found {len(tokens)}"
        )
    word, reading, meaning_html = tokens[:3]
    return Card(word=word, reading=reading, meaning=extract_first_meaning(meaning_html))