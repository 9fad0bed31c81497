"""The playable game: name entry, the main window and its controls."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

import pygame

from .board import TILE_SIZE, Board
from .counter import digitizer, display_timer
from .textures import TextureManager
from .tile import IMAGE_DIR

TITLE = "Minesweeper"
FONT_PATH = "files/font.ttf"
MAX_NAME_LENGTH = 10
PANEL_HEIGHT = 100

FACE_HAPPY = IMAGE_DIR + "face_happy.png"
FACE_WIN = IMAGE_DIR + "face_win.png"
FACE_LOSE = IMAGE_DIR + "face_lose.png"
DEBUG_IMAGE = IMAGE_DIR + "debug.png"
PAUSE_IMAGE = IMAGE_DIR + "pause.png"
PLAY_IMAGE = IMAGE_DIR + "play.png"
LEADERBOARD_IMAGE = IMAGE_DIR + "leaderboard.png"
DIGITS_IMAGE = IMAGE_DIR + "digits.png"

DIGIT_WIDTH = 21
DIGIT_HEIGHT = 32
TIMER_OFFSETS = (0, 21, 43, 64)

BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
GREY = (200, 200, 200)

_BUTTON_RIGHT_OFFSETS = {"debug": 304, "pause": 240, "leaderboard": 176}
_BUTTON_SIZE = 64


@dataclass
class NameEntry:
    """The player's name as typed: letters only, capitalised, at most ten."""

    chars: list[str] = field(default_factory=list)

    def add_char(self, char: str) -> bool:
        """Append a letter; return False if it was refused."""
        if len(char) != 1 or not ("A" <= char <= "Z" or "a" <= char <= "z"):
            return False
        if len(self.chars) >= MAX_NAME_LENGTH:
            return False
        self.chars.append(char.lower() if self.chars else char.upper())
        return True

    def backspace(self) -> None:
        """Remove the last letter, if any."""
        if self.chars:
            self.chars.pop()

    @property
    def text(self) -> str:
        return "".join(self.chars)

    @property
    def display(self) -> str:
        """The name with the typing cursor after it."""
        return self.text + "|"

    def result(self) -> str | None:
        """The finished name, or None while nothing has been typed."""
        return self.text or None


class Button(Enum):
    """Controls in the panel below the minefield."""

    DEBUG = "debug"
    FACE = "face"
    PAUSE = "pause"
    LEADERBOARD = "leaderboard"


def format_leaderboard(leaders: list[str]) -> str:
    """Render leaderboard lines of the form "MM:SS,name" as numbered rows."""
    rows = [
        f"{rank}.\t{line[:5]}\t{line[6:]}"
        for rank, line in enumerate(leaders[:5], start=1)
    ]
    return "\n\n".join(rows)


def tile_index_at(board: Board, x: float, y: float) -> int | None:
    """Row-major index of the tile under a point, or None off the grid."""
    if not (0 <= y < board.height * TILE_SIZE and 0 <= x < board.width * TILE_SIZE):
        return None
    return board.width * (int(y) // TILE_SIZE) + int(x) // TILE_SIZE


def button_bounds(board: Board, button: Button) -> tuple[float, float, float, float]:
    """Clickable area of a button as (left, top, right, bottom), edges excluded."""
    top = board.height * TILE_SIZE + 18
    bottom = board.height * TILE_SIZE + 82
    if button is Button.FACE:
        middle = board.width / 2 * TILE_SIZE
        return (middle - 32, top, middle + 32, bottom)
    left = board.width * TILE_SIZE - _BUTTON_RIGHT_OFFSETS[button.value]
    return (left, top, left + _BUTTON_SIZE, bottom)


def button_at(board: Board, x: float, y: float) -> Button | None:
    """The panel button under a point, or None."""
    for button in Button:
        left, top, right, bottom = button_bounds(board, button)
        if left < x < right and top < y < bottom:
            return button
    return None


def _font(size: int, bold: bool = False, underline: bool = False) -> pygame.font.Font:
    font = pygame.font.Font(FONT_PATH, size)
    font.set_bold(bold)
    font.set_underline(underline)
    return font


def _blit_centered(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    center: tuple[float, float],
) -> None:
    surface = font.render(text, True, color)
    screen.blit(surface, surface.get_rect(center=(int(center[0]), int(center[1]))))


def welcome_window(board: Board) -> str | None:
    """Ask for the player's name; None if the window is closed first."""
    width = board.width * TILE_SIZE
    height = board.height * TILE_SIZE + PANEL_HEIGHT
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    pygame.key.start_text_input()

    title_font = _font(24, bold=True, underline=True)
    prompt_font = _font(20, bold=True)
    input_font = _font(18, bold=True)
    entry = NameEntry()
    center_x = width / 2
    center_y = board.height * TILE_SIZE / 2
    ticker = pygame.time.Clock()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.TEXTINPUT:
                for char in event.text:
                    entry.add_char(char)
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    name = entry.result()
                    if name is not None:
                        return name
                elif event.key == pygame.K_BACKSPACE:
                    entry.backspace()

        screen.fill(BLUE)
        _blit_centered(screen, title_font, "Welcome to Minesweeper!", WHITE, (center_x, center_y - 150))
        _blit_centered(screen, prompt_font, "Enter your name:", WHITE, (center_x, center_y - 75))
        _blit_centered(screen, input_font, entry.display, YELLOW, (center_x, center_y - 45))
        pygame.display.flip()
        ticker.tick(60)


class Game:
    """One player's session: clicks, the mine counter, the timer and results."""

    def __init__(
        self,
        board: Board,
        username: str,
        clock: Callable[[], float] = time.monotonic,
        textures: TextureManager | None = None,
    ) -> None:
        self.board = board
        self.username = username
        self.clock = clock
        self.textures = textures if textures is not None else TextureManager()
        self.face = FACE_HAPPY
        self.mine_digits = digitizer(board.mine_count)
        self.paused = False
        self.show_leaders = False
        self.games_played = 0
        self.started_at: float | None = None
        self.ended_at: float | None = None
        self._recorded = False

    def _start_clock(self) -> None:
        if self.started_at is None:
            self.started_at = self.clock()

    def _refresh_counter(self) -> None:
        self.mine_digits = digitizer(self.board.mine_count - self.board.flag_count)

    @property
    def finished(self) -> bool:
        return self.board.game_over or self.board.victory

    def left_click(self, x: float, y: float) -> None:
        """Reveal a tile or press a panel button."""
        self._start_clock()
        index = tile_index_at(self.board, x, y)
        if index is not None:
            self._reveal(index)
            return
        button = button_at(self.board, x, y)
        if button is Button.DEBUG:
            self.board.toggle_debug()
        elif button is Button.FACE:
            self._restart()
        elif button is Button.PAUSE:
            if not self.board.check_victory() and not self.board.game_over:
                self.board.toggle_pause()
                self.paused = not self.paused
        elif button is Button.LEADERBOARD:
            self.show_leaders = not self.show_leaders

    def _reveal(self, index: int) -> None:
        was_finished = self.finished
        self.board.reveal_tile(self.board.tile(index))
        if was_finished:
            return
        if self.board.check_victory():
            self.ended_at = self.clock()
            self.face = FACE_WIN
            self.mine_digits = [0, 0, 0]
            self.games_played += 1
        if self.board.game_over:
            self.ended_at = self.clock()
            self.face = FACE_LOSE
            self.games_played += 1

    def _restart(self) -> None:
        if self.games_played:
            self.started_at = self.clock()
        self.board.read_board()
        self.face = FACE_HAPPY
        self._refresh_counter()

    def right_click(self, x: float, y: float) -> None:
        """Toggle a flag on the tile under the point."""
        self._start_clock()
        index = tile_index_at(self.board, x, y)
        if index is None:
            return
        self.board.toggle_flag(self.board.tile(index))
        self._refresh_counter()

    def timer_digits(self) -> list[int]:
        """Four timer digits: frozen at the end of a game, running otherwise."""
        if self.started_at is None:
            return display_timer(0)
        if self.finished and self.ended_at is not None:
            span = self.ended_at - self.started_at
        else:
            span = self.clock() - self.started_at
        return display_timer(max(span, 0.0))

    def update(self) -> None:
        """Record the first win of the session on the leaderboard."""
        if not self.board.check_victory() or self._recorded:
            return
        end = self.ended_at if self.ended_at is not None else self.clock()
        start = self.started_at if self.started_at is not None else end
        self.board.add_to_leaders(self.username, end - start)
        self._recorded = True

    def _draw_digit(self, screen: pygame.Surface, digit: int, position: tuple[float, float]) -> None:
        area = pygame.Rect(digit * DIGIT_WIDTH, 0, DIGIT_WIDTH, DIGIT_HEIGHT)
        screen.blit(self.textures.get(DIGITS_IMAGE), position, area)

    def _draw(self, screen: pygame.Surface) -> None:
        right_edge = self.board.width * TILE_SIZE
        bar_y = self.board.height * TILE_SIZE + TILE_SIZE / 2
        screen.fill(GREY)
        screen.blit(self.textures.get(DEBUG_IMAGE), (right_edge - 304, bar_y))
        pause_image = PLAY_IMAGE if self.paused else PAUSE_IMAGE
        screen.blit(self.textures.get(pause_image), (right_edge - 240, bar_y))
        screen.blit(self.textures.get(LEADERBOARD_IMAGE), (right_edge - 176, bar_y))
        face_x = self.board.width / 2 * TILE_SIZE - 32
        screen.blit(self.textures.get(self.face), (face_x, bar_y))

        for offset, digit in enumerate(self.mine_digits):
            self._draw_digit(screen, digit, (33 + offset * DIGIT_WIDTH, bar_y + 16))
        for offset, digit in zip(TIMER_OFFSETS, self.timer_digits()):
            self._draw_digit(screen, digit, (right_edge - 97 + offset, bar_y + 16))
        for tile in self.board.tiles:
            screen.blit(self.textures.get(tile.texture), tile.position)

    def _show_leaderboard(self, screen: pygame.Surface) -> bool:
        """Show the leaderboard until dismissed; False if the player quit."""
        panel_width = self.board.width * 16
        panel_height = self.board.height * 16 + 50
        panel = pygame.Surface((panel_width, panel_height))
        panel.fill(BLUE)
        title_font = _font(20, bold=True, underline=True)
        body_font = _font(20, bold=True)
        center_x = panel_width / 2
        center_y = self.board.height * 16 / 2
        _blit_centered(panel, title_font, "Leaderboard", WHITE, (center_x, center_y - 120))

        lines = format_leaderboard(self.board.load_leaderboard()).split("\n")
        line_height = body_font.get_linesize()
        top = center_y - line_height * len(lines) / 2
        for row, line in enumerate(lines):
            _blit_centered(
                panel, body_font, line.expandtabs(4), WHITE,
                (center_x, top + line_height * (row + 0.5)),
            )

        screen_rect = screen.get_rect()
        screen.blit(panel, panel.get_rect(center=screen_rect.center))
        pygame.display.flip()

        ticker = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
                    return True
            ticker.tick(30)

    def run(self) -> None:
        """Open the game window and play until it is closed."""
        width = self.board.width * TILE_SIZE
        height = self.board.height * TILE_SIZE + PANEL_HEIGHT
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        ticker = pygame.time.Clock()
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    self._start_clock()
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        x, y = event.pos
                        if event.button == 1:
                            self.left_click(x, y)
                        elif event.button == 3:
                            self.right_click(x, y)
                self._draw(screen)
                if self.show_leaders:
                    if not self._show_leaderboard(screen):
                        running = False
                    self.show_leaders = False
                self.update()
                pygame.display.flip()
                ticker.tick(60)
        finally:
            self.textures.clear()


def main(argv: list[str] | None = None) -> int:
    """Ask for a name, then play."""
    parser = argparse.ArgumentParser(prog="minefield", description="Play Minesweeper.")
    parser.parse_args(argv)
    pygame.init()
    try:
        board = Board()
        board.read_board()
        name = welcome_window(board)
        if name is None:
            return 0
        Game(board, name).run()
    finally:
        pygame.quit()
    return 0