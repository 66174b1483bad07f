"""
Phase mapping: stream position (column, row) -> where in the color cycle a char falls.
Offsets are computed once per run and passed in explicitly.
"""
import math
import random
import time
from dataclasses import dataclass

# Largest value of the random offset draw (C RAND_MAX on glibc)
RANDOM_MAX = 2**31 - 1
# Wall-clock window (seconds) the base offset cycles through
BASE_OFFSET_WINDOW = 300
# True-color cadence: columns advance the phase 5x slower than rows
HORIZONTAL_DIVISOR = 5.0


@dataclass(frozen=True)
class Offsets:
    """Per-run phase offsets. base in [0, 1); random in [0, RANDOM_MAX]."""
    base: float = 0.0
    random: int = 0


def base_offset(now: float | None = None) -> float:
    """Low bits of wall-clock seconds scaled to [0, 1): run-to-run variety without config."""
    if now is None:
        now = time.time()
    return (int(now) % BASE_OFFSET_WINDOW) / BASE_OFFSET_WINDOW


def random_offset(enabled: bool, seed: int | None = None) -> int:
    """0 unless random colors were requested; otherwise one seeded draw."""
    if not enabled:
        return 0
    if seed is None:
        seed = int(time.time())
    return random.Random(seed).randint(0, RANDOM_MAX)


def make_offsets(random_colors: bool = False, *, seed: int | None = None, now: float | None = None) -> Offsets:
    return Offsets(base=base_offset(now), random=random_offset(random_colors, seed))


def true_color_phase(column: int, row: int, freq_h: float, freq_v: float, offsets: Offsets) -> float:
    """Continuous phase (radians, not yet normalized) for 24-bit mode."""
    shift = (offsets.base + 2.0 * offsets.random / RANDOM_MAX) * math.pi
    return column * freq_h / HORIZONTAL_DIVISOR + row * freq_v + shift


def palette_index(
    column: int, row: int, freq_h: float, freq_v: float, offsets: Offsets, codes_count: int
) -> int:
    """Raw palette index for 256-color mode (before the random shift and wrap)."""
    return math.floor(offsets.base * codes_count + column * freq_h + row * freq_v)
