"""Program entry: the title loop, the menus and the rhythm stage."""

from __future__ import annotations

import argparse
import time
from typing import Protocol, Sequence

from feedcat.chart import Lane
from feedcat.game import Game, GameState
from feedcat.screens import (
    CHARACTER_INFO,
    MAP_START,
    QUIT,
    START_GAME,
    draw_map_preview,
    draw_map_select,
    draw_title,
    run_map_cursor,
    run_menu,
    show_character,
)
from feedcat.terminal import Key, SoundPlayer, Terminal

TITLE_MUSIC = "title_BGM.wav"
MAP_MUSIC = "map_1.wav"
MENU_COLOR = 7
FRAME_TIMEOUT = 0.01
PAUSE_KEY = "p"
QUIT_KEY = "q"

_LANE_KEYS = {
    Key.LEFT: Lane.LEFT,
    Key.UP: Lane.UP,
    Key.DOWN: Lane.DOWN,
    Key.RIGHT: Lane.RIGHT,
}


class _Sound(Protocol):
    def play_loop(self, path: str) -> bool: ...

    def stop(self) -> None: ...


class _Silence:
    """A sound player that plays nothing."""

    def play_loop(self, path: str) -> bool:
        return False

    def stop(self) -> None:
        pass


def _now_ms() -> float:
    return time.monotonic() * 1000


def play(terminal: Terminal, game: Game, sound: _Sound) -> int:
    """Run the rhythm stage until the round is over and 'q' is pressed; return the score."""
    while True:
        key = terminal.read_key(FRAME_TIMEOUT)
        if key is Key.ENTER:
            game.start(_now_ms())
            sound.play_loop(MAP_MUSIC)
        if key == PAUSE_KEY:
            game.pause()
        lane = _LANE_KEYS.get(key) if isinstance(key, Key) else None
        if lane is not None:
            game.judge(lane)
        if game.state is GameState.RESULT and key == QUIT_KEY:
            return game.score

        now = _now_ms()
        if game.update(now) is GameState.RESULT:
            sound.stop()
        if game.state is not GameState.STOP:
            game.render(terminal, now)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="feedcat", description="FEED CAT, a console rhythm game.")
    parser.add_argument("--mute", action="store_true", help="play without music")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game at the title screen."""
    args = _parse_args(argv)
    sound: _Sound = _Silence() if args.mute else SoundPlayer()
    game = Game()
    with Terminal() as terminal:
        try:
            while True:
                terminal.set_color(MENU_COLOR)
                sound.play_loop(TITLE_MUSIC)
                draw_title(terminal)
                choice = run_menu(terminal)
                if choice == START_GAME:
                    draw_map_select(terminal)
                    sound.play_loop(MAP_MUSIC)
                    draw_map_preview(terminal)
                    if run_map_cursor(terminal) == MAP_START:
                        play(terminal, game, sound)
                        return 0
                elif choice == CHARACTER_INFO:
                    show_character(terminal)
                elif choice == QUIT:
                    return 0
                terminal.clear()
                terminal.flush()
        finally:
            sound.stop()