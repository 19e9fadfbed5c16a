"""Console control: cursor, colours, key input and looping background music."""

from __future__ import annotations

import os
import select
import shutil
import subprocess
import sys
import threading
import time
from enum import IntEnum
from typing import IO, Sequence

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

try:
    import winsound
except ImportError:
    winsound = None


class Key(IntEnum):
    """Keys the game reacts to, valued by their console scan codes."""

    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77
    ENTER = 13


_ANSI_KEYS = {
    "\x1b[A": Key.UP,
    "\x1bOA": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1bOB": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1bOC": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOD": Key.LEFT,
}


def decode_key(data: str | bytes) -> Key | str | None:
    """Turn one key press into a Key, a plain character, or None if unrecognised."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", "replace")
    if not data:
        return None
    if data in _ANSI_KEYS:
        return _ANSI_KEYS[data]
    if data in ("\r", "\n", "\r\n"):
        return Key.ENTER
    if len(data) == 2 and data[0] in ("\x00", "\xe0"):
        try:
            return Key(ord(data[1]))
        except ValueError:
            return None
    if data[0] == "\x1b" or len(data) != 1:
        return None
    return data


def _ansi_color(attribute: int) -> int:
    # Console attributes order colour bits blue, green, red; ANSI orders red, green, blue.
    return ((attribute & 4) >> 2) | (attribute & 2) | ((attribute & 1) << 2)


class Terminal:
    """A text console driven with ANSI escape sequences."""

    def __init__(
        self,
        output: IO[str] | None = None,
        input_fd: int | None = None,
        *,
        title: str = "FEED CAT",
        columns: int = 110,
        lines: int = 35,
    ) -> None:
        self._output = output if output is not None else sys.stdout
        self._input_fd = input_fd
        self._title = title
        self._columns = columns
        self._lines = lines
        self._saved_mode = None

    @property
    def _fd(self) -> int:
        return self._input_fd if self._input_fd is not None else sys.stdin.fileno()

    @property
    def _uses_console(self) -> bool:
        return self._input_fd is None and msvcrt is not None

    def move(self, x: int, y: int) -> None:
        """Place the cursor at a zero-based column and row."""
        self._output.write(f"\x1b[{y + 1};{x + 1}H")

    def write(self, text: str) -> None:
        self._output.write(text)

    def write_at(self, x: int, y: int, text: str) -> None:
        self.move(x, y)
        self.write(text)

    def set_color(self, color: int) -> None:
        """Set a console colour attribute: low four bits foreground, high four background."""
        if not 0 <= color <= 0xFF:
            raise ValueError(f"colour attribute must be 0-255, got {color}")
        foreground = color & 0x0F
        background = (color >> 4) & 0x0F
        fg = (90 if foreground & 8 else 30) + _ansi_color(foreground)
        bg = (100 if background & 8 else 40) + _ansi_color(background)
        self._output.write(f"\x1b[{fg};{bg}m")

    def clear(self) -> None:
        self._output.write("\x1b[2J\x1b[H")

    def hide_cursor(self) -> None:
        self._output.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self._output.write("\x1b[?25h")

    def flush(self) -> None:
        self._output.flush()

    def read_key(self, timeout: float | None = None) -> Key | str | None:
        """Wait for a key press; None on timeout or for an unrecognised key."""
        raw = self._read_console(timeout) if self._uses_console else self._read_fd(timeout)
        return decode_key(raw) if raw else None

    def _read_console(self, timeout: float | None) -> str:
        deadline = None if timeout is None else time.monotonic() + timeout
        while not msvcrt.kbhit():
            if deadline is not None and time.monotonic() >= deadline:
                return ""
            time.sleep(0.005)
        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            char += msvcrt.getwch()
        return char

    def _read_fd(self, timeout: float | None) -> bytes:
        fd = self._fd
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return b""
        data = os.read(fd, 1)
        if data == b"\x1b":
            data += self._read_escape(fd)
        elif data and data[0] >= 0xC0:
            extra = 1 if data[0] < 0xE0 else 2 if data[0] < 0xF0 else 3
            if select.select([fd], [], [], 0.05)[0]:
                data += os.read(fd, extra)
        return data

    @staticmethod
    def _read_escape(fd: int) -> bytes:
        sequence = b""
        while len(sequence) < 8 and select.select([fd], [], [], 0.02)[0]:
            byte = os.read(fd, 1)
            if not byte:
                break
            sequence += byte
            if len(sequence) >= 2 and (byte.isalpha() or byte == b"~"):
                break
        return sequence

    def __enter__(self) -> Terminal:
        if not self._uses_console and termios is not None:
            fd = self._fd
            if os.isatty(fd):
                self._saved_mode = termios.tcgetattr(fd)
                tty.setcbreak(fd)
        self._output.write(f"\x1b]0;{self._title}\x07")
        self._output.write(f"\x1b[8;{self._lines};{self._columns}t")
        self.hide_cursor()
        self.clear()
        self.flush()
        return self

    def __exit__(self, *args: object) -> None:
        self._output.write("\x1b[0m")
        self.show_cursor()
        self.flush()
        if self._saved_mode is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None


def _find_player() -> list[str] | None:
    for candidate in (("afplay",), ("paplay",), ("aplay", "-q")):
        if shutil.which(candidate[0]):
            return list(candidate)
    return None


class SoundPlayer:
    """Plays a sound file over and over in the background until stopped."""

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self._command = list(command) if command is not None else None
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._process: subprocess.Popen | None = None
        self._native = False

    @property
    def playing(self) -> bool:
        return self._native or (self._thread is not None and self._thread.is_alive())

    def play_loop(self, path: str | os.PathLike) -> bool:
        """Start looping a sound file, replacing what plays now; False if it cannot play."""
        self.stop()
        path = os.fspath(path)
        if not os.path.isfile(path):
            return False
        if self._command is None and winsound is not None:
            winsound.PlaySound(
                path, winsound.SND_FILENAME | winsound.SND_ASYNC | winsound.SND_LOOP
            )
            self._native = True
            return True
        command = self._command if self._command is not None else _find_player()
        if command is None:
            return False
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._loop, args=([*command, path], self._stop_event), daemon=True
        )
        self._thread.start()
        return True

    def _loop(self, argv: list[str], stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            with self._lock:
                if stop_event.is_set():
                    return
                try:
                    process = subprocess.Popen(
                        argv,
                        stdin=subprocess.DEVNULL,
                        stdout=subprocess.DEVNULL,
                        stderr=subprocess.DEVNULL,
                    )
                except OSError:
                    return
                self._process = process
            if process.wait() != 0:
                return

    def stop(self) -> None:
        """Stop any sound that is playing."""
        if self._native:
            winsound.PlaySound(None, winsound.SND_PURGE)
            self._native = False
        self._stop_event.set()
        with self._lock:
            process, self._process = self._process, None
        if process is not None and process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=2)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
        if self._thread is not None:
            self._thread.join(timeout=2)
            self._thread = None