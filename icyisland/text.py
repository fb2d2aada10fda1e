"""Bitmap font layout, alignment and scrolling text files."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence

MAX_VELOCITY = 10
SPEED_INCREMENT = 0.01
SCROLL_STEP = 60
ITEMS_SPACE = 4
LINE_GAP = 2
ERASE_CHAR_WIDTH = 8

MISSING_FILE_LINES = (
    "File was not found!",
    "{name}",
    "Shame on the guy, who",
    "forgot to include it",
    "in your SuperTux distribution.",
)


class TextKind(enum.Enum):
    TEXT = 0
    NUM = 1


class HAlign(enum.Enum):
    LEFT = 0
    HMIDDLE = 1
    RIGHT = 2


class VAlign(enum.Enum):
    TOP = 0
    VMIDDLE = 1
    BOTTOM = 2


@dataclass(frozen=True)
class Glyph:
    """Cell of a character in the font sheet."""

    column: int
    row: int


@dataclass(frozen=True)
class DrawOp:
    """Copy a ``width`` x ``height`` block from the font sheet to the screen."""

    src_x: int
    src_y: int
    x: int
    y: int
    width: int
    height: int
    shadow: bool = False


_TEXT_ROWS = (" ", "0", "@", "P", "`", "p")
_TEXT_ROW_ENDS = ("/", "?", "O", "_", "o", "~")


def _glyph_for(kind: TextKind, char: str) -> Optional[Glyph]:
    if kind is TextKind.TEXT:
        for row, (first, last) in enumerate(zip(_TEXT_ROWS, _TEXT_ROW_ENDS)):
            if first <= char <= last:
                return Glyph(ord(char) - ord(first), row)
    elif kind is TextKind.NUM and "0" <= char <= "9":
        return Glyph(ord(char) - ord("0"), 0)
    return None


class Text:
    """A fixed-width bitmap font of ``width`` x ``height`` cells."""

    def __init__(self, kind: TextKind, width: int, height: int) -> None:
        self.kind = kind
        self.w = width
        self.h = height

    def layout(self, text: str, x: int, y: int) -> Iterator[DrawOp]:
        """Yield one blit per drawable character.

        Unknown characters leave a blank cell. A newline moves down by the
        line height plus two pixels; the column counter restarts at zero and
        is then advanced like for any other character.
        """
        column = 0
        for char in text:
            glyph = _glyph_for(self.kind, char)
            if glyph is not None:
                yield DrawOp(
                    glyph.column * self.w,
                    glyph.row * self.h,
                    x + column * self.w,
                    y,
                    self.w,
                    self.h,
                )
            elif char == "\n":
                y += self.h + LINE_GAP
                column = 0
            column += 1

    def draw(self, text: Optional[str], x: int, y: int, shadowsize: int = 1) -> list[DrawOp]:
        """Blits for the shadow (when ``shadowsize`` is not 0) and then the text."""
        if text is None:
            return []
        ops: list[DrawOp] = []
        if shadowsize != 0:
            ops.extend(
                DrawOp(op.src_x, op.src_y, op.x, op.y, op.width, op.height, True)
                for op in self.layout(text, x + shadowsize, y + shadowsize)
            )
        ops.extend(self.layout(text, x, y))
        return ops

    def aligned_origin(self, text: str, x: int, y: int, halign: HAlign, valign: VAlign) -> tuple[int, int]:
        """Top-left corner for text anchored at ``(x, y)``."""
        span = len(text) * self.w
        if halign is HAlign.RIGHT:
            x -= span
        elif halign is HAlign.HMIDDLE:
            x -= span // 2
        if valign is VAlign.BOTTOM:
            y -= self.h
        elif valign is VAlign.VMIDDLE:
            y -= self.h // 2
        return x, y

    def screen_origin(
        self,
        text: str,
        x: int,
        y: int,
        halign: HAlign,
        valign: VAlign,
        screen_width: int,
        screen_height: int,
    ) -> tuple[int, int]:
        """Top-left corner for text aligned to the screen, offset by ``(x, y)``."""
        span = len(text) * self.w
        if halign is HAlign.RIGHT:
            x += screen_width - span
        elif halign is HAlign.HMIDDLE:
            x += screen_width // 2 - span // 2
        if valign is VAlign.BOTTOM:
            y += screen_height - self.h
        elif valign is VAlign.VMIDDLE:
            y += screen_height // 2 - self.h // 2
        return x, y

    def erase_rect(self, text: str, x: int, y: int, shadowsize: int, screen_width: int) -> tuple[int, int, int, int]:
        """Rectangle ``(x, y, w, h)`` covering drawn text, at most the screen wide."""
        width = min(len(text) * self.w + shadowsize, screen_width)
        return x, y, width, self.h

    def centered_erase_rect(self, text: str, y: int, shadowsize: int, screen_width: int) -> tuple[int, int, int, int]:
        x = screen_width // 2 - len(text) * ERASE_CHAR_WIDTH
        return self.erase_rect(text, x, y, shadowsize, screen_width)


class LineStyle(enum.Enum):
    """Font used for a line of a scrolling text file, by its first character."""

    SMALL = " "
    NORMAL = "\t"
    BIG = "-"
    PLAIN = ""

    @property
    def shadowsize(self) -> int:
        return 3 if self is LineStyle.BIG else 1


@dataclass(frozen=True)
class CreditLine:
    style: LineStyle
    text: str


def parse_credits(lines: Sequence[str]) -> list[CreditLine]:
    """Classify lines by their marker character and strip the marker."""
    parsed = []
    for line in lines:
        marker = line[:1]
        if marker in (" ", "\t", "-"):
            parsed.append(CreditLine(LineStyle(marker), line[1:]))
        else:
            parsed.append(CreditLine(LineStyle.PLAIN, line))
    return parsed


def load_text_lines(name: str, files: Mapping[str, str]) -> list[str]:
    """Lines of a bundled text file, or an apology when it is missing."""
    if name not in files:
        return [line.format(name=name) for line in MISSING_FILE_LINES]
    content = files[name]
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class ScrollState:
    """Scroll position and speed of a scrolling text display."""

    def __init__(self, scroll_speed: float) -> None:
        self.scroll = 0.0
        self.speed = scroll_speed / 50
        self.done = False

    def _clamp(self) -> None:
        self.speed = max(-MAX_VELOCITY, min(MAX_VELOCITY, self.speed))

    def press(self, key: str) -> None:
        """React to a key: up, down, space, return or escape."""
        if key == "up":
            self.speed -= SPEED_INCREMENT
        elif key == "down":
            self.speed += SPEED_INCREMENT
        elif key in ("space", "return"):
            if self.speed >= 0:
                self.scroll += SCROLL_STEP
        elif key == "escape":
            self.done = True
        self._clamp()

    def advance(self, elapsed_ms: float) -> None:
        self._clamp()
        self.scroll = max(0.0, self.scroll + self.speed * elapsed_ms)

    def finished(self, screen_height: int, content_height: int) -> bool:
        """True once escaped or when the whole text has scrolled off the top."""
        bottom = screen_height + content_height - self.scroll
        if bottom < 0 and 20 + bottom < 0:
            self.done = True
        return self.done