"""
Color functions: phase angle -> RGB. Our algorithms only.
Hue rotation paints the rainbow; stripe interpolation paints striped flags,
blending neighbouring stripes with an eased weight.
"""
import math

import numpy as np

from .schema import Color, ColorFunction, ColorPattern, Pattern

TAU = 2.0 * math.pi

# R, G, B sinusoids are 120 degrees apart
_HUE_OFFSETS = np.array([0.0, TAU / 3.0, 2.0 * TAU / 3.0])


def normalize_phase(theta: float) -> float:
    """Map any angle into [0, 2π)."""
    theta = math.fmod(theta, TAU)
    if theta < 0:
        theta += TAU
    # fmod of a tiny negative angle can round up to exactly TAU
    if theta >= TAU:
        theta = 0.0
    return theta


def _to_color(channels: np.ndarray) -> Color:
    # np.rint rounds half to even
    r, g, b = (int(v) for v in np.clip(np.rint(channels), 0, 255))
    return Color(r, g, b)


def mix_colors(color1: Color, color2: Color, balance: float, factor: float) -> Color:
    """
    Blend two colors. balance=1 gives color1, balance=0 gives color2.
    The weight is balance**factor, so a larger factor keeps color2 longer and
    snaps to color1 only near the start of the blend.
    """
    weight = balance ** factor
    c1 = np.array(color1.as_tuple(), dtype=np.float64)
    c2 = np.array(color2.as_tuple(), dtype=np.float64)
    return _to_color(c1 * weight + c2 * (1.0 - weight))


def hue_rotation(color_pattern: ColorPattern, theta: float) -> Color:
    """Smooth rainbow. Stripe data is ignored."""
    del color_pattern
    theta = normalize_phase(theta)
    return _to_color((0.5 + 0.5 * np.sin(theta + _HUE_OFFSETS)) * 255.0)


def stripe_interpolation(color_pattern: ColorPattern, theta: float) -> Color:
    """Split the circle into one arc per stripe and blend each stripe into the next."""
    theta = normalize_phase(theta)
    stripes = color_pattern.stripes
    count = len(stripes)
    arc = TAU / count
    i = min(int(theta / arc), count - 1)
    balance = 1.0 - (theta - i * arc) / arc
    balance = min(1.0, max(0.0, balance))
    return mix_colors(stripes[i], stripes[(i + 1) % count], balance, color_pattern.factor)


def color_at(pattern: Pattern, theta: float) -> Color:
    """Color of the given pattern at phase theta."""
    if pattern.color_function is ColorFunction.HUE_ROTATION:
        return hue_rotation(pattern.color_pattern, theta)
    if pattern.color_function is ColorFunction.STRIPES:
        return stripe_interpolation(pattern.color_pattern, theta)
    raise ValueError(f"Unknown color function: {pattern.color_function}")
