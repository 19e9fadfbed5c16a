"""Title, menu, character and map-selection screens."""

from __future__ import annotations

import time
from typing import Sequence

from feedcat.terminal import Key, Terminal

MENU_DELAY = 0.1
FRAME_DELAY = 0.12
MAP_ART_DELAY = 0.06
CURSOR_DELAY = 0.05
MARKER = "▶"

MAIN_MENU_LABELS = ("게 임 시 작", " 캐릭터 정보 ", "    종 료    ")
MAP_MENU_LABELS = (" START", " BACK ")

START_GAME, CHARACTER_INFO, QUIT = range(3)
MAP_START, MAP_BACK = range(2)

_TITLE_ART = (
    "           _______  _______  _______  _______      ",
    "          |   ____||   ____||   ____||       A     ",
    "          |  |__   |  |__   |  |__   |  .--.  |    ",
    "          |   __|  |   __|  |   __|  |  |  |  |    ",
    "          |  |     |  |____ |  |____ |  '--'  |    ",
    "          |__|     |_______||_______||_______/     ",
    " " * 52 + "______       ___    .___________.    __   __    ",
    " " * 51 + "/      |     /   A   |           |   |  | |  |   ",
    " " * 50 + "|  ,----'    /  ^  A  `---|  |----`   |  | |  |   ",
    " " * 50 + "|  |        /  A A  A     |  |        |  | |  |   ",
    " " * 50 + "|  `----.  /  _____  A    |  |        |__| |__|   ",
    " " * 51 + "A______| /__/     A__A   |__|        (__) (__)   ",
)

_CAT_SITTING = (
    "@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@:@@@@@@@@@#*@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@ #@@@@@@@= *@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@  @@@@@@@; !@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@*!:~    ,~:=@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@$            :@@@@@@@@@@@@@",
    "@@@@@@@@@@@@,              .;@@@@@@@@@@@",
    "@@@@@@@@@@@-   ~     .~      *@@@@@@@@@@",
    "@@@@@@@@@@.   ~@;    ~@       !@@@@@@@@@",
    "@@@@@@@@;:    ,;     ,;     -;;!@@@@@@@@",
    "@@@@@@@=#        @ @,           ,@@@@@@@",
    "@@@@@@@@:     ,; *$;             ;@@@@@@",
    "@@@@@@@@.     ~~,~@. :            *@@@@@",
    "@@@@@@@@.      ,@,~#$#             @@@@@",
    "@@@@@@@@.       ;  ,=       -@,    -@@@@",
    "@@#@@@@@.       ;# @,         #$    @@@@",
    "@*  !!@@.        ;==           $,    $@@",
    "@.    $@@                      ,@@@;  @@",
    "@:   !=!@~                     #@$    @@",
    "@@   #$ =*                    !@@*   !@@",
    "@@  ;;,  ;$                   #@@    $@@",
    "@@--=     $*                ~@@@*   :@@@",
    "@@@@@@-  .@@@,             $@@@     @@@@",
    "@@@@@@@@!=@@@!=;        ,!@::@@#    @@@@",
    "@@@@@@@@@@@@@-~!@@#**$@@@@@~:@@#..  @@@@",
    "@@@@@@@@@@@@@=$@@@@@@@@#@@@@=@@@@#*$@@@@",
    "@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@",
)

_CAT_WAVING = (
    "@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@:@@@@@@@@@#*@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@ #@@@@@@@= *@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@  @@@@@@@; !@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@@*!:~    ,~:=@@@@@@@@@@@@@@",
    "@@@@@@@@@@@@@$            :@@@@@@@@@@@@@",
    "@@@@@@@@@@@@,              .;@@@@@@@@@@@",
    "@@@@@@@@@@@-   ~     .~      *@@@@@@@@@@",
    "@@@@@@@@@@.   ~@;    ~@       !@@@@@@@@@",
    "@@@@@@@@;:    ,;     ,;     -;;!@@@@@@@@",
    "@@@@@@@=#        @ @,           ,@@@@@@@",
    "@@@@@@@@:     ,; *$;             ;@@@@@@",
    "@@@@@@@@.     ~~,~@. :            *@@@@@",
    "@@   @@@.      ,@,~#$#             @@@@@",
    "@     @@.       ;  ,=       -@,    -@@@@",
    "@@    @@.       ;# @,         #$    @@@@",
    "@*  !!@@.        ;==           $,    $@@",
    "@.    $@@                      ,@@@;  @@",
    "@:   !=!@~                     #@$    @@",
    "@@   #$ =*                    !@@*   !@@",
    "@@* ;;,  ;$                   #@@    $@@",
    "@@@@@@@##@@$*                ~@@@*  :@@@",
    "@@@@@@@@@@@@@,             $@@@     @@@@",
    "@@@@@@@@@@@@@!=;        ,!@::@@#    @@@@",
    "@@@@@@@@@@@@@-~!@@#**$@@@@@@:  @@#..@@@@",
    "@@@@@@@@@@@@@@@=$@@@@@@#@@@@@@@@@#*$@@@@",
    "@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@@",
)

_MAP_SELECT_ART = (
    " __                _   _         ",
    "/ _| _ || _  _||  |  V  | _   _  ",
    "V_V /oA||/oA//| ] |  V  |/oA /oA ",
    "|__/VD L|VD VDL|  |_| |_|V_,]|_/ ",
    "                             L|  ",
)

_MAP_ART = (
    "       ~    -       ",
    "   ~        ,     ",
    "             -    ",
    " ,                ",
    " -             ,   ",
    "               ,   ",
    "  .  -      ;@; --  ",
    " . @@@@    @@@@ ~  ",
    "   @@@@@   $@@@@=~  ",
    " ,@@@@@   #@@@@ ~  ",
    "  ,@@@@, @@ @@@@ -  ",
    " :-@@  .@@   ;* -  ",
    "      , @@@! ,   .  ",
    "        @@@@        ",
    "    -    @#,   -    ",
    "    ,            ",
    "    -        ~     ",
    "     .. ,    ,,     ",
    "      :-   ,.      ",
)


class Menu:
    """A vertical list of options, two rows apart, with one selected."""

    def __init__(self, labels: Sequence[str], x: int, y: int) -> None:
        if not labels:
            raise ValueError("a menu needs at least one option")
        self.labels = tuple(labels)
        self.x = x
        self.y = y
        self.selected = 0

    def row(self, index: int) -> int:
        """Screen row of an option."""
        return self.y + 2 * index

    def move_up(self) -> bool:
        """Select the option above; False if already at the top."""
        if self.selected == 0:
            return False
        self.selected -= 1
        return True

    def move_down(self) -> bool:
        """Select the option below; False if already at the bottom."""
        if self.selected == len(self.labels) - 1:
            return False
        self.selected += 1
        return True

    def handle(self, key: Key | str | None) -> int | None:
        """React to a key; return the chosen option on Enter, else None."""
        if key is Key.UP:
            self.move_up()
        elif key is Key.DOWN:
            self.move_down()
        elif key is Key.ENTER:
            return self.selected
        return None


def draw_title(terminal: Terminal, delay: float = MENU_DELAY) -> None:
    """Draw the title art line by line."""
    terminal.write("\n" * 5)
    for line in _TITLE_ART:
        terminal.write(line + "\n")
        terminal.flush()
        time.sleep(delay)


def draw_menu(terminal: Terminal, menu: Menu) -> None:
    """Draw every option and the marker beside the selected one."""
    for index, label in enumerate(menu.labels):
        terminal.write_at(menu.x, menu.row(index), label)
        terminal.flush()
        time.sleep(MENU_DELAY)
    terminal.write_at(menu.x - 2, menu.row(menu.selected), MARKER)
    terminal.write("\n")
    terminal.flush()


def _run(terminal: Terminal, menu: Menu) -> int:
    draw_menu(terminal, menu)
    while True:
        key = terminal.read_key()
        previous = menu.selected
        choice = menu.handle(key)
        if choice is not None:
            return choice
        if menu.selected != previous:
            terminal.write_at(menu.x - 2, menu.row(previous), "  ")
            terminal.write_at(menu.x - 2, menu.row(menu.selected), MARKER)
            terminal.flush()


def run_menu(terminal: Terminal) -> int:
    """Show the main menu and return START_GAME, CHARACTER_INFO or QUIT."""
    return _run(terminal, Menu(MAIN_MENU_LABELS, 48, 22))


def _draw_frame(terminal: Terminal, art: Sequence[str], indent: int) -> None:
    terminal.write("\n")
    for line in art:
        terminal.write(" " * indent + line + "\n")
    terminal.flush()


def _animate_character(terminal: Terminal) -> None:
    terminal.clear()
    _draw_frame(terminal, _CAT_SITTING, 6)
    time.sleep(FRAME_DELAY)
    terminal.clear()
    terminal.flush()
    time.sleep(FRAME_DELAY)
    terminal.clear()
    _draw_frame(terminal, _CAT_WAVING, 2)
    time.sleep(FRAME_DELAY)


def show_character(terminal: Terminal) -> None:
    """Animate the cat until a key press is followed by Enter."""
    terminal.clear()
    while True:
        _animate_character(terminal)
        _animate_character(terminal)
        terminal.read_key()
        if terminal.read_key() is Key.ENTER:
            break
    terminal.write("\n" * 18)
    terminal.flush()


def draw_map_select(terminal: Terminal) -> None:
    """Clear the screen and draw the map-selection heading."""
    terminal.clear()
    for line in _MAP_SELECT_ART:
        terminal.write(line + "\n")
        terminal.flush()
        time.sleep(MENU_DELAY)


def draw_map_preview(terminal: Terminal) -> None:
    """Draw the first map's picture and its description."""
    terminal.write("\n" * 4)
    for line in _MAP_ART:
        terminal.write("\t\t\t" + line + "\n")
        terminal.flush()
        time.sleep(MAP_ART_DELAY)
    terminal.write_at(55, 13, "난이도 : ★★★★★★★★★★★")
    terminal.flush()
    time.sleep(MAP_ART_DELAY)
    terminal.write_at(55, 15, "EVERYTHING WILL FREEZE")
    terminal.flush()
    time.sleep(MAP_ART_DELAY)


def run_map_cursor(terminal: Terminal) -> int:
    """Ask whether to play this map; return MAP_START or MAP_BACK."""
    return _run(terminal, Menu(MAP_MENU_LABELS, 55, 17))