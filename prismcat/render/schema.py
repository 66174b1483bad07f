"""
Render data model: colors, flag patterns, and the per-stream render state.
Patterns are built once and never mutated; RenderState lives for one input stream.
"""
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Color:
    """RGB color, 8 bits per channel."""
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: int) -> "Color":
        """Unpack 0xRRGGBB."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


class ColorFunction(Enum):
    """Which color function a pattern is painted with."""
    HUE_ROTATION = "hue_rotation"
    STRIPES = "stripes"


@dataclass(frozen=True)
class AnsiPattern:
    """Cyclic sequence of 256-palette codes used in palette mode."""
    codes: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.codes:
            raise ValueError("AnsiPattern needs at least one code")
        for code in self.codes:
            if not 0 <= code <= 255:
                raise ValueError(f"Palette code out of range: {code}")

    @property
    def codes_count(self) -> int:
        return len(self.codes)

    def code_at(self, index: int) -> int:
        return self.codes[index % len(self.codes)]


@dataclass(frozen=True)
class ColorPattern:
    """True-color stripes plus the easing factor used at stripe boundaries."""
    stripes: tuple[Color, ...] = ()
    factor: float = 1.0

    def __post_init__(self) -> None:
        if self.factor <= 0:
            raise ValueError(f"Easing factor must be positive, got {self.factor}")

    @property
    def stripes_count(self) -> int:
        return len(self.stripes)


@dataclass(frozen=True)
class Pattern:
    """One catalog entry: palette codes, true-color stripes, and its color function."""
    name: str
    ansi_pattern: AnsiPattern
    color_pattern: ColorPattern
    color_function: ColorFunction

    def __post_init__(self) -> None:
        if self.color_function is ColorFunction.STRIPES and self.color_pattern.stripes_count < 1:
            raise ValueError(f"Striped pattern {self.name!r} has no stripes")


class EscapeState(Enum):
    """Where the stream is relative to a foreign ANSI escape sequence."""
    OUT = 0    # plain text
    IN = 1     # inside a foreign escape sequence
    LAST = 2   # previous char terminated a foreign escape sequence


@dataclass
class RenderState:
    """Mutable per-stream position and emission state."""
    column: int = 0
    row: int = 0
    last_palette_index: int | None = None
    escape_state: EscapeState = field(default=EscapeState.OUT)

    def newline(self) -> None:
        self.row += 1
        self.column = 0

    def advance(self, width: int) -> None:
        # Control chars report negative widths; never move left.
        if width > 0:
            self.column += width
