"""
Phase mapper and output encoder: offsets, palette indices, escape formats, dedup.
"""
import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prismcat.data.flags import RAINBOW, TRANSGENDER
from prismcat.render import ColorMode, Offsets, OutputEncoder, RenderState, palette_index, true_color_phase
from prismcat.render.phase import RANDOM_MAX, base_offset, make_offsets, random_offset


class TestPhase(unittest.TestCase):

    def test_base_offset_uses_300_second_window(self):
        self.assertAlmostEqual(base_offset(1234567.9), 67 / 300)
        self.assertEqual(base_offset(600), 0.0)

    def test_random_offset(self):
        self.assertEqual(random_offset(False, seed=42), 0)
        drawn = random_offset(True, seed=42)
        self.assertEqual(drawn, random_offset(True, seed=42))
        self.assertTrue(0 <= drawn <= RANDOM_MAX)

    def test_make_offsets(self):
        offsets = make_offsets(False, now=150)
        self.assertEqual(offsets, Offsets(base=0.5, random=0))

    def test_true_color_phase(self):
        theta = true_color_phase(10, 2, 0.5, 0.1, Offsets(0.5, 0))
        self.assertAlmostEqual(theta, 1.0 + 0.2 + math.pi / 2)

    def test_true_color_phase_random_shift(self):
        theta = true_color_phase(0, 0, 0.23, 0.1, Offsets(0.0, RANDOM_MAX))
        self.assertAlmostEqual(theta, 2 * math.pi)

    def test_palette_index(self):
        self.assertEqual(palette_index(3, 0, 1.0, 0.0, Offsets(), 30), 3)
        self.assertEqual(palette_index(5, 0, 0.23, 0.1, Offsets(), 30), 1)
        self.assertEqual(palette_index(0, 0, 0.0, 0.0, Offsets(0.5, 0), 10), 5)
        self.assertEqual(palette_index(2, 0, -1.0, 0.0, Offsets(), 30), -2)


class TestPaletteEncoder(unittest.TestCase):

    def test_emits_palette_escape(self):
        encoder = OutputEncoder(RAINBOW, ColorMode.PALETTE, 0.0, 0.0, Offsets())
        self.assertEqual(encoder.color_escape(RenderState()), "\x1b[38;5;39m")

    def test_dedups_on_raw_index(self):
        encoder = OutputEncoder(RAINBOW, ColorMode.PALETTE, 0.0, 0.0, Offsets())
        state = RenderState()
        self.assertNotEqual(encoder.color_escape(state), "")
        self.assertEqual(state.last_palette_index, 0)
        self.assertEqual(encoder.color_escape(state), "")

    def test_dedup_compares_index_not_code(self):
        """Adjacent transgender codes repeat (117, 117); a new index still emits."""
        encoder = OutputEncoder(TRANSGENDER, ColorMode.PALETTE, 1.0, 0.0, Offsets())
        state = RenderState(column=0)
        first = encoder.color_escape(state)
        state.column = 1
        second = encoder.color_escape(state)
        self.assertEqual(first, "\x1b[38;5;117m")
        self.assertEqual(second, "\x1b[38;5;117m")

    def test_force_emits_unchanged_index(self):
        encoder = OutputEncoder(RAINBOW, ColorMode.PALETTE, 0.0, 0.0, Offsets())
        state = RenderState()
        encoder.color_escape(state)
        self.assertEqual(encoder.color_escape(state, force=True), "\x1b[38;5;39m")

    def test_random_offset_shifts_code(self):
        encoder = OutputEncoder(RAINBOW, ColorMode.PALETTE, 0.0, 0.0, Offsets(0.0, 2))
        self.assertEqual(encoder.color_escape(RenderState()), "\x1b[38;5;44m")

    def test_base_offset_shifts_index(self):
        encoder = OutputEncoder(TRANSGENDER, ColorMode.PALETTE, 0.0, 0.0, Offsets(0.5, 0))
        self.assertEqual(encoder.color_escape(RenderState()), "\x1b[38;5;255m")

    def test_negative_index_wraps(self):
        encoder = OutputEncoder(RAINBOW, ColorMode.PALETTE, -1.0, 0.0, Offsets())
        self.assertEqual(encoder.color_escape(RenderState(column=1)), "\x1b[38;5;33m")


class TestTrueColorEncoder(unittest.TestCase):

    def test_emits_rgb_escape(self):
        encoder = OutputEncoder(RAINBOW, ColorMode.TRUE_COLOR, 0.0, 0.0, Offsets())
        self.assertEqual(encoder.color_escape(RenderState()), "\x1b[38;2;128;238;17m")

    def test_never_dedups(self):
        encoder = OutputEncoder(TRANSGENDER, ColorMode.TRUE_COLOR, 0.0, 0.0, Offsets())
        state = RenderState()
        self.assertEqual(encoder.color_escape(state), "\x1b[38;2;85;205;252m")
        self.assertEqual(encoder.color_escape(state), "\x1b[38;2;85;205;252m")
        self.assertIsNone(state.last_palette_index)

    def test_reset(self):
        encoder = OutputEncoder(RAINBOW)
        self.assertEqual(encoder.reset_escape(), "\x1b[0m")


if __name__ == "__main__":
    unittest.main()
