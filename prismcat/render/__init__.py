# Render engine: patterns -> colors -> escapes, applied to a character stream

from .colors import color_at, hue_rotation, mix_colors, normalize_phase, stripe_interpolation
from .encoder import RESET, ColorMode, OutputEncoder
from .engine import Colorizer
from .escapes import next_escape_state
from .phase import Offsets, make_offsets, palette_index, true_color_phase
from .schema import AnsiPattern, Color, ColorFunction, ColorPattern, EscapeState, Pattern, RenderState

__all__ = [
    "AnsiPattern",
    "Color",
    "ColorFunction",
    "ColorMode",
    "ColorPattern",
    "Colorizer",
    "EscapeState",
    "Offsets",
    "OutputEncoder",
    "Pattern",
    "RESET",
    "RenderState",
    "color_at",
    "hue_rotation",
    "make_offsets",
    "mix_colors",
    "next_escape_state",
    "normalize_phase",
    "palette_index",
    "stripe_interpolation",
    "true_color_phase",
]
