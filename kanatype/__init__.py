"""Falling-word typing game for drilling Japanese vocabulary from Anki decks."""

__version__ = "0.1.0"
__all__ = ["app", "card", "collection", "game", "hiragana"]