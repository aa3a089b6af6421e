"""Window, rendering and event loop of the typing game."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

import pygame

from kanatype.collection import CollectionError, load_collection
from kanatype.game import WINDOW_HEIGHT, WINDOW_WIDTH, Game

DEFAULT_FONT_PATH = "assets/fonts/NotoSansJP-Regular.ttf"
WINDOW_TITLE = "Japanese Typing Game"
FRAME_RATE = 60

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
RED = (255, 0, 0)


@dataclass
class Fonts:
    """The three font sizes used on screen."""

    large: pygame.font.Font
    medium: pygame.font.Font
    small: pygame.font.Font


def load_fonts(path: str | None = DEFAULT_FONT_PATH) -> Fonts:
    """Load the font at ``path`` in three sizes; None uses pygame's default."""
    if not pygame.font.get_init():
        pygame.font.init()
    return Fonts(
        large=pygame.font.Font(path, 48),
        medium=pygame.font.Font(path, 32),
        small=pygame.font.Font(path, 24),
    )


def _render_text(screen: pygame.Surface, font: pygame.font.Font, text: str,
                 x: int, y: int, color: tuple[int, int, int]) -> None:
    if not text:
        return
    surface = font.render(text, True, color)
    screen.blit(surface, (x - surface.get_width() // 2, y))


def render_game(screen: pygame.Surface, fonts: Fonts, game: Game) -> None:
    """Draw the whole game onto ``screen``."""
    screen.fill(BLACK)

    for enemy in game.enemies:
        if not enemy.is_active():
            continue
        card = game.cards[enemy.card_index]
        if enemy.showing_meaning:
            _render_text(screen, fonts.medium, card.meaning,
                         int(enemy.x), int(enemy.y), GREEN)
        else:
            _render_text(screen, fonts.large, card.word,
                         int(enemy.x), int(enemy.y), WHITE)

    _render_text(screen, fonts.medium, game.kana,
                 WINDOW_WIDTH // 2, WINDOW_HEIGHT - 120, YELLOW)
    _render_text(screen, fonts.small, game.romaji,
                 WINDOW_WIDTH // 2, WINDOW_HEIGHT - 80, CYAN)
    _render_text(screen, fonts.small, f"Score: {game.score}", 100, 30, WHITE)

    if game.game_over:
        _render_text(screen, fonts.large, "GAME OVER",
                     WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2, RED)


def _handle_key(game: Game, key: int, now: int) -> bool:
    """Apply one key press; return False when the game should stop."""
    if key == pygame.K_BACKSPACE and game.romaji:
        game.backspace()
    elif key == pygame.K_RETURN:
        game.check_input(now)
    elif key == pygame.K_ESCAPE:
        return False
    elif pygame.K_a <= key <= pygame.K_z:
        game.type_key(chr(ord("a") + key - pygame.K_a))
    return True


def run(game: Game, fonts: Fonts, screen: pygame.Surface) -> None:
    """Run the event loop until the window is closed or Escape is pressed."""
    clock = pygame.time.Clock()
    running = True
    last_time = pygame.time.get_ticks()

    while running:
        now = pygame.time.get_ticks()
        delta_time = (now - last_time) / 1000.0
        last_time = now

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and not game.game_over:
                if not _handle_key(game, event.key, now):
                    running = False

        game.tick(now, delta_time)
        render_game(screen, fonts, game)
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def main(argv: list[str] | None = None) -> int:
    """Load a deck from a collection database and play it."""
    parser = argparse.ArgumentParser(
        prog="kanatype",
        description="Type the readings of falling words before they land.",
    )
    parser.add_argument("db_path", help="path to the collection database")
    parser.add_argument("deck_name", help="name of the deck to play")
    parser.add_argument("--font", default=DEFAULT_FONT_PATH,
                        help="font file able to show Japanese text")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        collection = load_collection(args.db_path, args.deck_name)
    except CollectionError as exc:
        print(exc, file=sys.stderr)
        return 1

    with collection:
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            except pygame.error as exc:
                print(f"Window creation failed: {exc}", file=sys.stderr)
                return 1
            pygame.display.set_caption(WINDOW_TITLE)
            try:
                fonts = load_fonts(args.font)
            except (OSError, pygame.error) as exc:
                print(f"Font loading failed: {exc}", file=sys.stderr)
                return 1
            run(Game(collection.cards), fonts, screen)
        finally:
            pygame.quit()
    return 0