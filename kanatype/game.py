"""Game state for the falling-word typing game, independent of rendering."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from kanatype.card import Card
from kanatype.hiragana import romaji_to_hiragana

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
MAX_ENEMIES = 10
ENEMY_SPEED = 30.0
SPAWN_DELAY = 6000
SHOW_MEANING_DURATION = 2000
INPUT_BUFFER_SIZE = 256
SCORE_PER_HIT = 100
SPAWN_Y = -50.0
SPAWN_MARGIN = 50
BOTTOM_MARGIN = 50


@dataclass
class Enemy:
    """A falling word, or a defeated one still showing its meaning."""

    x: float = 0.0
    y: float = 0.0
    card_index: int = 0
    alive: bool = False
    showing_meaning: bool = False
    death_time: int = 0

    def is_active(self) -> bool:
        """Whether the slot is in use, falling or showing its meaning."""
        return self.alive or self.showing_meaning


@dataclass(init=False)
class Game:
    """Enemies, typed input and score of one game.

    Times are in milliseconds, as given by the caller.
    """

    cards: list[Card]
    rng: random.Random
    enemies: list[Enemy] = field(default_factory=list)
    romaji: str = ""
    kana: str = ""
    score: int = 0
    game_over: bool = False
    last_spawn_time: int = 0

    def __init__(self, cards: Sequence[Card], rng: random.Random | None = None) -> None:
        self.cards = list(cards)
        self.rng = rng if rng is not None else random.Random()
        self.enemies = [Enemy() for _ in range(MAX_ENEMIES)]
        self.romaji = ""
        self.kana = ""
        self.score = 0
        self.game_over = False
        self.last_spawn_time = 0

    def spawn_enemy(self) -> Enemy | None:
        """Start a random card falling in the first free slot, if any."""
        if not self.cards:
            return None
        enemy = next((e for e in self.enemies if not e.is_active()), None)
        if enemy is None:
            return None
        enemy.card_index = self.rng.randrange(len(self.cards))
        enemy.x = float(SPAWN_MARGIN + self.rng.randrange(WINDOW_WIDTH - 2 * SPAWN_MARGIN))
        enemy.y = SPAWN_Y
        enemy.alive = True
        enemy.showing_meaning = False
        enemy.death_time = 0
        return enemy

    def update_enemies(self, delta_time: float, now: int) -> None:
        """Move falling enemies and expire shown meanings."""
        for enemy in self.enemies:
            if enemy.showing_meaning:
                if now - enemy.death_time > SHOW_MEANING_DURATION:
                    enemy.showing_meaning = False
            elif enemy.alive:
                enemy.y += ENEMY_SPEED * delta_time
                if enemy.y > WINDOW_HEIGHT - BOTTOM_MARGIN:
                    self.game_over = True

    def tick(self, now: int, delta_time: float) -> None:
        """Advance the game by one frame unless it is over."""
        if self.game_over:
            return
        if now - self.last_spawn_time > SPAWN_DELAY:
            self.spawn_enemy()
            self.last_spawn_time = now
        self.update_enemies(delta_time, now)

    def check_input(self, now: int) -> Enemy | None:
        """Defeat the first falling enemy whose reading matches the input."""
        if not self.kana:
            return None
        for enemy in self.enemies:
            if not enemy.alive or enemy.showing_meaning:
                continue
            if self.kana == self.cards[enemy.card_index].reading:
                enemy.alive = False
                enemy.showing_meaning = True
                enemy.death_time = now
                self.score += SCORE_PER_HIT
                self._clear_input()
                return enemy
        return None

    def type_key(self, ch: str) -> bool:
        """Append a lower-case letter to the input; return whether it was taken."""
        if len(ch) != 1 or not ("a" <= ch <= "z"):
            return False
        if len(self.romaji) >= INPUT_BUFFER_SIZE - 2:
            return False
        self.romaji += ch
        self.kana = romaji_to_hiragana(self.romaji)
        return True

    def backspace(self) -> bool:
        """Remove the last typed letter; return whether there was one."""
        if not self.romaji:
            return False
        self.romaji = self.romaji[:-1]
        self.kana = romaji_to_hiragana(self.romaji)
        return True

    def _clear_input(self) -> None:
        self.romaji = ""
        self.kana = ""