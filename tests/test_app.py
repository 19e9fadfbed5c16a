import io
import os

import pytest

from feedcat.app import MAP_MUSIC, main, play
from feedcat.game import Game, GameState
from feedcat.terminal import Terminal


class RecordingSound:
    def __init__(self):
        self.events = []

    def play_loop(self, path):
        self.events.append(("play", path))
        return True

    def stop(self):
        self.events.append(("stop", None))


@pytest.fixture
def keyboard():
    read_fd, write_fd = os.pipe()
    output = io.StringIO()
    terminal = Terminal(output=output, input_fd=read_fd)

    def press(data: bytes):
        os.write(write_fd, data)

    yield terminal, press, output
    os.close(read_fd)
    os.close(write_fd)


def test_quit_after_round_finished(keyboard):
    terminal, press, output = keyboard
    game = Game()
    game.state = GameState.RESULT
    press(b"q")
    score = play(terminal, game, RecordingSound())
    assert score == game.score == 0
    assert game.state is GameState.RESULT


def test_miss_in_result_breaks_combo(keyboard):
    terminal, press, _ = keyboard
    game = Game()
    game.state = GameState.RESULT
    game.combo = 5
    press(b"\x1b[D")
    press(b"q")
    play(terminal, game, RecordingSound())
    assert game.combo == 0


def test_round_ends_when_song_time_is_over(keyboard):
    terminal, press, output = keyboard
    game = Game()
    game.start(-1e9)
    sound = RecordingSound()
    press(b"q")
    press(b"q")
    play(terminal, game, sound)
    assert game.state is GameState.RESULT
    assert ("stop", None) in sound.events
    assert "GAME SET" in output.getvalue()


def test_enter_starts_map_music(keyboard):
    terminal, press, _ = keyboard
    game = Game()
    game.start(-1e9)
    sound = RecordingSound()
    press(b"\r")
    press(b"q")
    play(terminal, game, sound)
    assert sound.events[0] == ("play", MAP_MUSIC)
    assert sound.events[-1] == ("stop", None)


def test_pause_then_resume(keyboard):
    terminal, press, _ = keyboard
    game = Game()
    game.start(-1e9)
    sound = RecordingSound()
    press(b"p")
    press(b"\r")
    press(b"q")
    play(terminal, game, sound)
    assert game.state is GameState.RESULT
    assert [event for event in sound.events if event[0] == "play"] == [("play", MAP_MUSIC)]


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2