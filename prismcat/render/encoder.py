"""
Output encoder: render state -> ANSI color escape. Palette mode skips the escape
when the raw palette index has not changed since the last one emitted.
"""
import logging
from enum import Enum

from .colors import color_at
from .phase import Offsets, palette_index, true_color_phase
from .schema import Color, Pattern, RenderState

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"


class ColorMode(Enum):
    PALETTE = "palette"        # 256-color palette codes
    TRUE_COLOR = "24bit"       # direct RGB


def palette_escape(code: int) -> str:
    return f"\x1b[38;5;{code}m"


def true_color_escape(color: Color) -> str:
    return f"\x1b[38;2;{color.red};{color.green};{color.blue}m"


class OutputEncoder:
    """Computes the escape for the current position of a stream."""

    def __init__(
        self,
        pattern: Pattern,
        mode: ColorMode = ColorMode.PALETTE,
        freq_h: float = 0.23,
        freq_v: float = 0.1,
        offsets: Offsets | None = None,
    ):
        self.pattern = pattern
        self.mode = mode
        self.freq_h = freq_h
        self.freq_v = freq_v
        self.offsets = offsets or Offsets()
        logger.debug(
            "Encoder: pattern=%s mode=%s freq_h=%s freq_v=%s offsets=%s",
            pattern.name, mode.value, freq_h, freq_v, self.offsets,
        )

    def color_escape(self, state: RenderState, *, force: bool = False) -> str:
        """
        Escape to write before the char at (state.column, state.row), or "" if
        palette dedup suppresses it. force=True always emits (used after a
        foreign escape sequence, which may have changed the terminal color).
        """
        if self.mode is ColorMode.TRUE_COLOR:
            theta = true_color_phase(state.column, state.row, self.freq_h, self.freq_v, self.offsets)
            return true_color_escape(color_at(self.pattern, theta))

        ansi = self.pattern.ansi_pattern
        index = palette_index(state.column, state.row, self.freq_h, self.freq_v, self.offsets, ansi.codes_count)
        if not force and index == state.last_palette_index:
            return ""
        state.last_palette_index = index
        return palette_escape(ansi.code_at(self.offsets.random + index))

    def reset_escape(self) -> str:
        return RESET
