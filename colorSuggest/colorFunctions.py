"""
Numeric behaviour of the preprocessor color functions the generators try.
Both dialects are scored with the Less definitions.
"""

import math
from typing import Callable

from .colorMath import Color, from_hsl, rgb, s_to_lin, to_hsl

# HSL adjustments ---------------------------------------------------

def lighten(color: Color, amount: float) -> Color:
    h, s, l = to_hsl(color)
    return from_hsl(h, s, l + amount / 100)

def darken(color: Color, amount: float) -> Color:
    h, s, l = to_hsl(color)
    return from_hsl(h, s, l - amount / 100)

def saturate(color: Color, amount: float) -> Color:
    h, s, l = to_hsl(color)
    return from_hsl(h, s + amount / 100, l)

def desaturate(color: Color, amount: float) -> Color:
    h, s, l = to_hsl(color)
    return from_hsl(h, s - amount / 100, l)

def spin(color: Color, degrees: float) -> Color:
    """Rotate the hue; degrees may be negative."""
    h, s, l = to_hsl(color)
    return from_hsl((h + degrees) % 360, s, l)

# Single-argument functions ------------------------------------------

# Luma below this picks the light color
CONTRAST_THRESHOLD = 0.43

def luma(color: Color) -> float:
    """WCAG relative luminance."""
    return 0.2126 * s_to_lin(color.r) + 0.7152 * s_to_lin(color.g) + 0.0722 * s_to_lin(color.b)

def greyscale(color: Color) -> Color:
    return desaturate(color, 100)

def contrast(color: Color) -> Color:
    """Black or white, whichever reads better on top of color."""
    if luma(color) < CONTRAST_THRESHOLD:
        return rgb(255, 255, 255)
    return rgb(0, 0, 0)

def invert(color: Color) -> Color:
    return rgb(255 - color.r, 255 - color.g, 255 - color.b)

def complement(color: Color) -> Color:
    return spin(color, 180)

# Blend modes --------------------------------------------------------
# cb is the backdrop channel, cs the source layer channel, both in [0, 1].

def _multiply(cb: float, cs: float) -> float:
    return cb * cs

def _screen(cb: float, cs: float) -> float:
    return cb + cs - cb * cs

def _overlay(cb: float, cs: float) -> float:
    cb *= 2
    return _multiply(cb, cs) if cb <= 1 else _screen(cb - 1, cs)

def _softlight(cb: float, cs: float) -> float:
    d = 1.0
    e = cb
    if cs > 0.5:
        e = 1.0
        d = math.sqrt(cb) if cb > 0.25 else ((16 * cb - 12) * cb + 4) * cb
    return cb - (1 - 2 * cs) * e * (d - cb)

def _difference(cb: float, cs: float) -> float:
    return abs(cb - cs)

def _exclusion(cb: float, cs: float) -> float:
    return cb + cs - 2 * cb * cs

def _blender(mode: Callable[[float, float], float]) -> Callable[[Color, Color], Color]:
    def blend(color: Color, other: Color) -> Color:
        return rgb(*(mode(cb / 255, cs / 255) * 255 for cb, cs in zip(color.rgb, other.rgb)))
    blend.__name__ = mode.__name__.lstrip("_")
    blend.__doc__ = f"Blend other onto color with the {blend.__name__} mode."
    return blend

multiply = _blender(_multiply)
screen = _blender(_screen)
overlay = _blender(_overlay)
softlight = _blender(_softlight)
difference = _blender(_difference)
exclusion = _blender(_exclusion)
