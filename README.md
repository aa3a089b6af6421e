# kanatype

kanatype is a typing game for practising Japanese vocabulary. Words from one
of your Anki decks fall down the screen. Type each word's reading in romaji,
and the game turns your input into hiragana as you type. Press Enter when the
reading matches a falling word. That word then shows its meaning for two
seconds, and you get 100 points. The game ends when a word reaches the bottom
of the screen.

## Installation

```
pip install .
```

This also installs pygame.

## Running

```
kanatype path/to/collection.anki2 "Deck Name"
```

- `db_path` is the path to an Anki collection database.
- `deck_name` is the exact name of the deck to play.
- `--font PATH` sets a font file that can show Japanese text. The default is
  `assets/fonts/NotoSansJP-Regular.ttf`, relative to the current directory.

While the collection loads, the game logs every deck and every card it reads.
The command exits with status 1 in these cases:

- the database cannot be read
- no deck has the given name
- the window cannot be created
- the font cannot be loaded

### The deck

The game reads the first 50 cards of the deck. It keeps the cards whose note
has at least three non-empty fields. Fields are separated by Anki's `\x1f`
character, empty fields are skipped, and surrounding whitespace is trimmed.
The first three fields are used as:

1. the word
2. its reading in hiragana
3. its meaning

If the meaning contains a `yomitan-glossary` block, only the text of its first
`<div>` is shown.

### Controls

| Key            | Action                                       |
|----------------|----------------------------------------------|
| `a`–`z`        | type romaji                                  |
| Backspace      | delete the last romaji letter                |
| Enter          | submit the current reading                   |
| Escape         | quit                                         |

A new word appears every six seconds, as long as fewer than ten words are on
screen.

### Romaji input

Romaji is converted greedily. A table entry is replaced as soon as the typed
letters form it, so `n` becomes `ん` at once and `na` cannot be typed as `な`.
Doubled consonants (`kk`, `ss`, `tt`, `pp`, `gg`, `zz`, `dd`, `bb`) give a
small `っ`. Letters that cannot start any entry are kept as typed, and so is
an unfinished tail.

## Library use

You can also use the parts of the game on their own:

```python
from kanatype.hiragana import romaji_to_hiragana
from kanatype.collection import load_collection

print(romaji_to_hiragana("kyouha"))   # きょうは

with load_collection("collection.anki2", "Japanese::Core") as cards:
    for card in cards:
        print(card.word, card.reading, card.meaning)
```

- `kanatype.card.parse_card_fields` turns a note's raw field string into a
  frozen `Card` with `word`, `reading` and `meaning`. It raises
  `CardParseError` when fewer than three fields are present, or when a
  glossary block is malformed.
- `kanatype.collection.load_collection` returns a `CardCollection`. A
  `CardCollection` supports `len`, iteration and indexing, and closes its
  database when used as a context manager or when you call `close()`.
  `load_collection` raises `DeckNotFoundError` when no deck has the given
  name, and `CollectionError` when the database cannot be read.
- `find_deck_by_name` and `extract_cards_from_deck` take an open
  `sqlite3.Connection`.
- `kanatype.game.Game` holds the whole game state and does not depend on
  rendering:
  - `tick`, `spawn_enemy`, `update_enemies` and `check_input` advance the game
    using millisecond times that you supply.
  - `type_key` and `backspace` edit the input.
- `kanatype.app` draws the game with pygame. It provides `load_fonts`,
  `render_game`, `run` and `main`.

## Tests

```
pip install ".[test]"
pytest
```