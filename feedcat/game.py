"""The rhythm stage: timing, scrolling, judging hits and drawing the playfield."""

from __future__ import annotations

from enum import Enum, auto

from feedcat.chart import GAME_SYNC, VISIBLE_ROWS, Chart, Lane, build_chart
from feedcat.terminal import Terminal

STEP_INTERVAL_MS = 52
"""Milliseconds that must pass before the playfield scrolls by one step."""

LEAD_IN_MS = 3100
"""Milliseconds of running time before notes start to fall."""

SONG_LENGTH_MS = 70000
"""Milliseconds of running time after which the game ends."""

PLAYFIELD_COLOR = 14

_WALL = "■"
_GUIDE = "왼쪽부터 ← ↑ ↓ → 로 입력을 받습니다."
_RESULT_MESSAGE = "GAME SET\n\n\t'Q'를 게임이 종료됩니다."


class GameState(Enum):
    """Phases of a round."""

    SET = auto()
    RUNNING = auto()
    STOP = auto()
    RESULT = auto()


class Judgement(Enum):
    """How well a key press met a note, with its text and points."""

    PERFECT = ("PERFECT!!!", 700)
    GREAT = ("GREAT!!", 400)
    GOOD = ("GOOD!", 100)

    def __init__(self, text: str, points: int) -> None:
        self.text = text
        self.points = points


def format_time(run_time_ms: int) -> str:
    """Format running time the way the side panel shows it."""
    run_time_ms = int(run_time_ms)
    return f"TIME : {run_time_ms // 1000}.{run_time_ms % 1000}sec"


class Game:
    """One round of play over a chart."""

    def __init__(self, chart: Chart | None = None) -> None:
        self.chart = chart if chart is not None else build_chart(GAME_SYNC)
        self.state = GameState.SET
        self.score = 0
        self.combo = 0
        self.position = 0
        self.run_time = 0
        self.judgement_text = "  "
        self._start: float | None = None
        self._last_step: float | None = None
        self._window: tuple[Lane | None, Lane | None, Lane | None] = (None, None, None)

    def start(self, now: float) -> None:
        """Begin or resume the round."""
        if self.state is GameState.SET:
            self._start = now
        self.state = GameState.RUNNING

    def pause(self) -> None:
        self.state = GameState.STOP

    def update(self, now: float) -> GameState:
        """Advance the clock and return the resulting state."""
        if self.state is GameState.SET:
            self._start = now
        elif self.state is GameState.RUNNING:
            if self._start is None:
                self._start = now
            self.run_time = int(now - self._start)
            if self.run_time > SONG_LENGTH_MS:
                self.state = GameState.RESULT
        return self.state

    def advance(self, now: float) -> int:
        """Scroll the playfield if enough time has passed; return the current step."""
        if self.state is GameState.RUNNING and self.run_time > LEAD_IN_MS:
            if self._last_step is None or now - self._last_step > STEP_INTERVAL_MS:
                self._last_step = now
                self.position += 1
            self._window = self.chart.hit_window(self.position)
        return self.position

    def judge(self, lane: Lane) -> Judgement | None:
        """Score a key press in a lane; a miss breaks the combo."""
        for judgement, note in zip(Judgement, self._window):
            if note is lane:
                self.score += judgement.points
                self.combo += 1
                self.judgement_text = judgement.text
                return judgement
        self.combo = 0
        return None

    def render(self, terminal: Terminal, now: float) -> None:
        """Draw the whole stage for the current state."""
        terminal.clear()
        terminal.set_color(PLAYFIELD_COLOR)
        self._draw_field(terminal)
        self._draw_panel(terminal)

        if self.state is GameState.SET:
            terminal.write_at(15, 10, "EVERYTHING WILL FREEZE")
            if now % 1000 > 500:
                terminal.write_at(15, 15, "Press Enter to Start")
        elif self.state is GameState.RUNNING:
            position = self.advance(now)
            if self.run_time > LEAD_IN_MS:
                rows = self.chart.visible_rows(position, VISIBLE_ROWS)
                for row, note in enumerate(rows, start=1):
                    terminal.write_at(2, row, note.glyph if note is not None else " ")
        elif self.state is GameState.RESULT:
            terminal.write_at(20, 15, _RESULT_MESSAGE)
        terminal.flush()

    @staticmethod
    def _draw_field(terminal: Terminal) -> None:
        terminal.write_at(0, 0, _WALL * 25)
        for row in range(1, 33):
            terminal.write_at(0, row, _WALL + "\t" * 6 + _WALL)
        terminal.write_at(0, 32, _WALL * 25)
        terminal.write_at(2, 28, "_" * 46)

    def _draw_panel(self, terminal: Terminal) -> None:
        terminal.write_at(60, 7, format_time(self.run_time))
        terminal.write_at(60, 9, f"SCORE : {self.score}")
        terminal.write_at(80, 25, self.judgement_text)
        terminal.write_at(60, 11, f"{self.combo} COMBO")
        terminal.write_at(60, 15, "STOP : press 'P'")
        terminal.write_at(60, 19, _GUIDE)