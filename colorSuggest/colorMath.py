"""
Color value type and the color math the suggestion engine scores with.
Parsing supports hex 3/6 (leading "#" optional), named, rgb/rgba and hsl/hsla.
Distances are CIE76 (Euclidean in CIELAB, D65).
"""

import re
import math
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

# Barely perceptible difference for dE76
SIMILARITY_THRESHOLD = 2.3

class Color(BaseModel):
    """Opaque sRGB color. Channels stay fractional until rendered."""
    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=255.0)
    g: float = Field(ge=0.0, le=255.0)
    b: float = Field(ge=0.0, le=255.0)

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return self.r, self.g, self.b

def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))

def rgb(r: float, g: float, b: float) -> Color:
    """Build a Color, clamping channels into [0, 255]."""
    return Color(r=clamp(r, 0, 255), g=clamp(g, 0, 255), b=clamp(b, 0, 255))

NAMED: Dict[str, str] = {
    "black": "000000",
    "silver": "c0c0c0",
    "gray": "808080",
    "grey": "808080",
    "white": "ffffff",
    "maroon": "800000",
    "red": "ff0000",
    "purple": "800080",
    "fuchsia": "ff00ff",
    "magenta": "ff00ff",
    "green": "008000",
    "lime": "00ff00",
    "olive": "808000",
    "yellow": "ffff00",
    "navy": "000080",
    "blue": "0000ff",
    "teal": "008080",
    "aqua": "00ffff",
    "cyan": "00ffff",
    "orange": "ffa500",
    "rebeccapurple": "663399",
}

# Regular expression patterns
ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
perc = f"{num}%"
comma = f"{ws},{ws}"
# space-separated channels need real whitespace, or one digit run splits into three
sep = r"\s+"
slash = f"{ws}/{ws}"

def pct(x: str) -> float:
    """Convert percentage string to decimal."""
    return float(x.replace("%", "")) / 100

def alpha_of(t: Optional[str]) -> float:
    if t is None or t == "none":
        return 1.0
    return clamp(pct(t), 0, 1) if t.endswith("%") else clamp(float(t), 0, 1)

# HEX -------------------------------------------------------------

# 4 and 8 digit forms carry alpha, so they are not three-channel colors
HEX_RE = re.compile(r"^([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

def parse_hex(s: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse hex digits (no leading "#") to an RGBA tuple."""
    m = HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) == 3:
        h = "".join(c + c for c in h)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), 1.0

# RGB -------------------------------------------------------------

RGB_RE = re.compile(
    f"^rgba?{ws}\\({ws}({num}%?)(?:{comma}|{sep})({num}%?)(?:{comma}|{sep})({num}%?)(?:(?:{comma}|{slash})({num}%?|none))?{ws}\\)$",
    re.IGNORECASE
)

def parse_rgb(s: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse rgb()/rgba(), legacy or modern syntax."""
    m = RGB_RE.match(s)
    if not m:
        return None
    R, G, B, A = m.groups()
    def cv(t: str) -> float:
        return clamp(pct(t) * 255 if t.endswith("%") else float(t), 0, 255)
    return cv(R), cv(G), cv(B), alpha_of(A)

# HSL -------------------------------------------------------------

HSL_RE = re.compile(
    f"^hsla?{ws}\\({ws}({num})(?:deg)?(?:{comma}|{sep})({perc})(?:{comma}|{sep})({perc})(?:(?:{comma}|{slash})({num}%?|none))?{ws}\\)$",
    re.IGNORECASE
)

def parse_hsl(s: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse hsl()/hsla(), legacy or modern syntax."""
    m = HSL_RE.match(s)
    if not m:
        return None
    h_val, s_val, l_val, a_val = m.groups()
    c = from_hsl(float(h_val), pct(s_val), pct(l_val))
    return c.r, c.g, c.b, alpha_of(a_val)

# Top-level parse --------------------------------------------------

def parse_color(input_str: Optional[str]) -> Optional[Color]:
    """
    Parse a color literal. Returns None unless it resolves to exactly three
    opaque RGB channels.
    """
    if input_str is None:
        return None
    s = input_str.strip()
    # "#" only ever prefixes hex digits
    if s.startswith("#"):
        rgba = parse_hex(s[1:])
    else:
        rgba = parse_hex(s)
        if rgba is None and s.lower() in NAMED:
            rgba = parse_hex(NAMED[s.lower()])
        if rgba is None:
            rgba = parse_rgb(s)
        if rgba is None:
            rgba = parse_hsl(s)
    if rgba is None:
        return None

    r, g, b, a = rgba
    # an alpha channel makes it a four-channel color
    if a < 1:
        return None
    return rgb(r, g, b)

# HSL conversions --------------------------------------------------

def to_hsl(color: Color) -> Tuple[float, float, float]:
    """Convert to HSL. h in deg [0, 360), s,l in [0,1]."""
    R, G, B = color.r / 255, color.g / 255, color.b / 255
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    d = max_val - min_val
    l = (max_val + min_val) / 2
    if d == 0:
        return 0.0, 0.0, l
    s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)
    if max_val == R:
        h = (G - B) / d + (6 if G < B else 0)
    elif max_val == G:
        h = (B - R) / d + 2
    else:
        h = (R - G) / d + 4
    return h * 60, s, l

def _hue(h: float, m1: float, m2: float) -> float:
    h = h + 1 if h < 0 else (h - 1 if h > 1 else h)
    if h * 6 < 1:
        return m1 + (m2 - m1) * h * 6
    elif h * 2 < 1:
        return m2
    elif h * 3 < 2:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6
    return m1

def from_hsl(h: float, s: float, l: float) -> Color:
    """Convert HSL to a Color. h in deg (any range), s,l clamped to [0,1]."""
    h = (h % 360) / 360
    s = clamp(s, 0, 1)
    l = clamp(l, 0, 1)
    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2
    return rgb(
        _hue(h + 1 / 3, m1, m2) * 255,
        _hue(h, m1, m2) * 255,
        _hue(h - 1 / 3, m1, m2) * 255,
    )

# LAB --------------------------------------------------------------

def s_to_lin(c: float) -> float:
    """sRGB companding."""
    cs = c / 255
    return cs / 12.92 if cs <= 0.04045 else ((cs + 0.055) / 1.055) ** 2.4

def srgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """sRGB D65 to XYZ."""
    R, G, B = s_to_lin(r), s_to_lin(g), s_to_lin(b)
    x = R * 0.41239079926595 + G * 0.35758433938387 + B * 0.18048078840183
    y = R * 0.21263900587151 + G * 0.71516867876775 + B * 0.07219231536073
    z = R * 0.01933081871559 + G * 0.11919477979462 + B * 0.95053215224966
    return x, y, z

# D65 white
XR, YR, ZR = 0.95047, 1.0, 1.08883

def f_lab(t: float) -> float:
    """LAB forward transform."""
    return t ** (1/3) if t > 216 / 24389 else (841 / 108) * t + 4 / 29

def to_lab(color: Color) -> Tuple[float, float, float]:
    """Convert to CIELAB."""
    x, y, z = srgb_to_xyz(color.r, color.g, color.b)
    fx, fy, fz = f_lab(x / XR), f_lab(y / YR), f_lab(z / ZR)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

def lab_distance(a: Tuple[float, float, float], b: Tuple[float, float, float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))

def difference(a: Color, b: Color) -> float:
    """CIE76 delta E between two colors."""
    return lab_distance(to_lab(a), to_lab(b))

def is_similar(a: Color, b: Color) -> bool:
    """True when the two colors are at most barely distinguishable."""
    return difference(a, b) < SIMILARITY_THRESHOLD

# Rendering --------------------------------------------------------

def to_hex(color: Color) -> str:
    """Render as #rrggbb."""
    def h(n: float) -> str:
        return format(int(clamp(round(n), 0, 255)), "02x")
    return f"#{h(color.r)}{h(color.g)}{h(color.b)}"
