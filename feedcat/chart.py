"""The note chart: which lane holds a note at each step of the song."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

NOTES = 1000
"""Number of steps a chart can hold."""

VISIBLE_ROWS = 30
"""Rows of the playfield shown at once."""

GAME_SYNC = 1
"""Offset the running game applies to every note of the song."""


class Lane(Enum):
    """One of the four columns a note falls in."""

    LEFT = ("  ■■■■■", 6)
    UP = ("             ■■■■■", 17)
    DOWN = ("                       ■■■■■", 27)
    RIGHT = ("                                ■■■■■ ", 36)

    def __init__(self, glyph: str, column: int) -> None:
        self.glyph = glyph
        self.column = column


_CODES = {"L": Lane.LEFT, "U": Lane.UP, "D": Lane.DOWN, "R": Lane.RIGHT}

# Song steps, each written as <step><lane letter>.
_SCORE = """
30L 40U 50U 60D 70R 71R 72R 73R 74R 75R 80U 85R 88D 92L
94L 95U 97U 100D 105R 103R 104R 107R 112R 115R 117U 121R 125D 130L
134L 137U 138U 139D 142R 145R 147R 148R 149R 150R 155U 157R 160D 161L
164L 165U 167U 170D 173R 174R 176R 177R 178R 179R 182U 184R 186D 188L
189L 192U 195U 197D 199R 202R 205R 210R 214R 217R 220U 222R 223D 227L
230R 235R 240R 243U 247R 250D 254L 255L 256L 257L 258L 263R 266R 270R
275D 276D 277D 278D 280R 283D 288L 289L 295U 300L 301L 305D 310U 312R
315D 320R 323R 325D 330L 334L 337R 340D 345L 349D 351U 353R 357D 360R 365D
370L 373L 376U 380L 382L 386D 389U 392R 395D 400R 405R 410D 412L 416L 420R
425L 426L 427L 428L 435R 437R 439R 441R 443R 444R 450D 451D 452D 453D
458D 460L 465D 470U 476R 478D 482R 485D 487L 489L 493U 496L 497L 500D
505U 507R
510D 515R 517D 520L 523L 528U 530L 531L 535D 540U
545R 546R 547R 548R 549R 553D 554D 555D 556D 557D
561U 562U 563U 564U 565U 566U 567U
570R 571R 572R 573R 574R 575R 576R 577R 579L 580L 581L 583L 584L 585L
586L 587L 589U 590U 591U 592U 593U 597U 598U 599D 601D 602D 604L 605L
606L 607L 608L 609L 610L 611L 612L 613L 614L 615L 620D 621D 622D 623D 624D
630D 634U 635R 637D 640R 645R 647D 649L 651L 653R 657L 660L 661L 661L
663L 664L 665L 666L
670D 672D 675R 677D 678L 680L 682U 684D 687D 690R 691D 693L 694L 697U
699L 702D 705L 710L 711U 713L
715R 720D 723L 726D 727R 730D 732L 733L 734D 736L 738U 739L 740L 742D
745U 750L 752L 753D 755L 760L 763D 767L 770U 775L 780L
"""


def _parse_score(text: str) -> tuple[tuple[int, Lane], ...]:
    return tuple((int(token[:-1]), _CODES[token[-1]]) for token in text.split())


_SCORE_EVENTS = _parse_score(_SCORE)


class Chart:
    """An immutable mapping of step index to lane, with playfield queries."""

    __slots__ = ("_notes", "_length")

    def __init__(self, notes: Mapping[int, Lane], length: int = NOTES) -> None:
        if length < 1:
            raise ValueError(f"chart length must be positive, got {length}")
        for index in notes:
            if not 0 <= index < length:
                raise ValueError(f"note at step {index} lies outside a chart of {length} steps")
        self._notes = MappingProxyType(dict(notes))
        self._length = length

    @property
    def length(self) -> int:
        return self._length

    @property
    def notes(self) -> Mapping[int, Lane]:
        return self._notes

    def note_at(self, index: int) -> Lane | None:
        """Return the lane of the note at a step, or None for an empty step."""
        return self._notes.get(index)

    def visible_rows(self, position: int, rows: int = VISIBLE_ROWS) -> list[Lane | None]:
        """Return the notes shown from the top row down when the playfield sits at a step."""
        if rows < 1:
            raise ValueError(f"rows must be positive, got {rows}")
        return [self.note_at(position + rows - 1 - row) for row in range(rows)]

    def hit_window(self, position: int) -> tuple[Lane | None, Lane | None, Lane | None]:
        """Return the notes judged perfect, great and good at a step."""
        return self.note_at(position), self.note_at(position - 1), self.note_at(position + 1)

    def __iter__(self) -> Iterator[tuple[int, Lane]]:
        for index in sorted(self._notes):
            yield index, self._notes[index]

    def __len__(self) -> int:
        return len(self._notes)

    def __repr__(self) -> str:
        return f"Chart({len(self._notes)} notes, length={self._length})"


def build_chart(sync: int = 0) -> Chart:
    """Build the song chart with every note moved by a sync offset."""
    notes: dict[int, Lane] = {}
    for offset, lane in _SCORE_EVENTS:
        index = offset + sync
        if not 0 <= index < NOTES:
            raise ValueError(f"sync {sync} moves step {offset} outside the chart")
        notes[index] = lane
    return Chart(notes)