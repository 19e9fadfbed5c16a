import io
import os
import sys
import time

import pytest

from feedcat.terminal import Key, SoundPlayer, Terminal, decode_key


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    os.close(write_fd)


@pytest.mark.parametrize(
    "data, expected",
    [
        ("\x1b[A", Key.UP),
        ("\x1b[B", Key.DOWN),
        ("\x1b[C", Key.RIGHT),
        ("\x1b[D", Key.LEFT),
        ("\x1bOA", Key.UP),
        (b"\x1b[D", Key.LEFT),
        ("\r", Key.ENTER),
        ("\n", Key.ENTER),
    ],
)
def test_decode_ansi_and_enter(data, expected):
    assert decode_key(data) is expected


def test_decode_console_scan_codes():
    assert decode_key("\xe0" + chr(72)) is Key.UP
    assert decode_key("\xe0" + chr(80)) is Key.DOWN
    assert decode_key("\x00" + chr(75)) is Key.LEFT
    assert decode_key("\xe0" + chr(77)) is Key.RIGHT


def test_decode_plain_and_unknown():
    assert decode_key("p") == "p"
    assert decode_key(b"q") == "q"
    assert decode_key("") is None
    assert decode_key("\x1b[Z") is None
    assert decode_key("\xe0" + chr(1)) is None


def test_key_codes_match_enter():
    assert Key(13) is Key.ENTER
    assert Key.UP == 72


def test_move_is_one_based():
    out = io.StringIO()
    Terminal(out).move(0, 0)
    assert out.getvalue() == "\x1b[1;1H"


def test_write_at_is_move_then_text():
    moved = io.StringIO()
    Terminal(moved).move(60, 7)
    combined = io.StringIO()
    Terminal(combined).write_at(60, 7, "SCORE")
    assert combined.getvalue() == moved.getvalue() + "SCORE"


def test_set_color_bright_yellow():
    out = io.StringIO()
    Terminal(out).set_color(14)
    assert out.getvalue().startswith("\x1b[93")


def test_set_color_distinct_values():
    outputs = set()
    for color in range(16):
        out = io.StringIO()
        Terminal(out).set_color(color)
        outputs.add(out.getvalue())
    assert len(outputs) == 16


def test_set_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Terminal(io.StringIO()).set_color(256)
    with pytest.raises(ValueError):
        Terminal(io.StringIO()).set_color(-1)


def test_hide_and_show_cursor_differ():
    hidden, shown = io.StringIO(), io.StringIO()
    Terminal(hidden).hide_cursor()
    Terminal(shown).show_cursor()
    assert hidden.getvalue() == "\x1b[?25l"
    assert hidden.getvalue() != shown.getvalue()
    assert shown.getvalue().endswith("h")


def test_read_key_from_pipe(pipe):
    read_fd, write_fd = pipe
    terminal = Terminal(io.StringIO(), input_fd=read_fd)
    os.write(write_fd, b"\x1b[B")
    assert terminal.read_key(1.0) is Key.DOWN
    os.write(write_fd, b"p")
    assert terminal.read_key(1.0) == "p"
    os.write(write_fd, b"\r")
    assert terminal.read_key(1.0) is Key.ENTER


def test_read_key_times_out(pipe):
    read_fd, _ = pipe
    terminal = Terminal(io.StringIO(), input_fd=read_fd)
    assert terminal.read_key(0.05) is None


def test_context_manager_hides_then_restores(pipe):
    read_fd, _ = pipe
    out = io.StringIO()
    with Terminal(out, input_fd=read_fd, title="FEED CAT") as terminal:
        entered = out.getvalue()
        assert isinstance(terminal, Terminal)
    shown = io.StringIO()
    Terminal(shown).show_cursor()
    hidden = io.StringIO()
    Terminal(hidden).hide_cursor()
    assert "FEED CAT" in entered
    assert hidden.getvalue() in entered
    assert out.getvalue().endswith(shown.getvalue())


def test_sound_missing_file(tmp_path):
    player = SoundPlayer(command=[sys.executable, "-c", "pass"])
    assert player.play_loop(tmp_path / "missing.wav") is False
    assert player.playing is False


def test_sound_loop_and_stop(tmp_path):
    wav = tmp_path / "title_BGM.wav"
    wav.write_bytes(b"RIFF")
    player = SoundPlayer(command=[sys.executable, "-c", "import time; time.sleep(30)"])
    assert player.play_loop(wav) is True
    assert player.playing is True
    player.stop()
    assert player.playing is False


def test_sound_failing_player_ends(tmp_path):
    wav = tmp_path / "map_1.wav"
    wav.write_bytes(b"RIFF")
    player = SoundPlayer(command=[sys.executable, "-c", "raise SystemExit(1)"])
    assert player.play_loop(wav) is True
    deadline = time.monotonic() + 10
    while player.playing and time.monotonic() < deadline:
        time.sleep(0.05)
    assert player.playing is False