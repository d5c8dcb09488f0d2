"""
Candidate generators.

Each generator is a frozen dataclass with a ``generate(source, target,
dialect)`` method returning at most one Candidate. Sweeps score many
variations internally and hand back only their local winner.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional, Tuple

from . import colorFunctions as fn
from .colorMath import Color, difference, rgb, to_hex, to_hsl
from .dialects import INPUT, Dialect, call, format_template
from .ranking import Candidate, ranked

# A sweep stops at the first step this close to the target
EXACT_MATCH_THRESHOLD = 0.05
# Every blend candidate costs the same whichever grey it uses
BLEND_COMPLEXITY = 50
# Large enough that the composite only wins when nothing simpler is close
COMPOSITE_COMPLEXITY = 1000

def candidate(color: Color, target: Color, complexity: float, template: str, dialect: Dialect,
              diff: Optional[float] = None) -> Candidate:
    return Candidate(
        color=color,
        difference=difference(target, color) if diff is None else diff,
        complexity=complexity,
        template=template,
        expression=format_template(template, dialect),
    )

@dataclass(frozen=True)
class Generator(ABC):
    name: str
    # None means every dialect
    dialects: Optional[FrozenSet[str]] = None

    def available_in(self, dialect: Dialect) -> bool:
        return self.dialects is None or dialect.name in self.dialects

    @abstractmethod
    def generate(self, source: Color, target: Color, dialect: Dialect) -> Optional[Candidate]:
        ...

@dataclass(frozen=True)
class Identity(Generator):
    """The source as-is, so "no change" can win."""

    def generate(self, source, target, dialect):
        return candidate(source, target, 0, INPUT, dialect)

@dataclass(frozen=True)
class Simple(Generator):
    """A function that takes no numeric argument, applied once."""
    transform: Callable[[Color], Color] = field(kw_only=True)

    def generate(self, source, target, dialect):
        return candidate(self.transform(source), target, 0, call(self.name, INPUT), dialect)

@dataclass(frozen=True)
class ParametricSweep(Generator):
    """
    Steps the amount over [start, end] (zero excluded). Complexity is the
    amount's magnitude. The scan stops at the first near-exact match, so the
    winner is the first hit from `start`, not necessarily the closest one.
    """
    transform: Callable[[Color, float], Color] = field(kw_only=True)
    start: int = 1
    end: int = 100
    unit: str = "%"

    def generate(self, source, target, dialect):
        results = []
        for value in range(self.start, self.end + 1):
            if value == 0:
                continue
            c = candidate(
                self.transform(source, value), target, abs(value),
                call(self.name, INPUT, f"{value}{self.unit}"), dialect,
            )
            results.append(c)
            if c.difference < EXACT_MATCH_THRESHOLD:
                break
        return ranked(results)[0] if results else None

# (i, i, i) for i in 1..253
BLEND_GREYS: Tuple[Color, ...] = tuple(rgb(i, i, i) for i in range(1, 254))

@dataclass(frozen=True)
class BlendSweep(Generator):
    """Blends the source with every grey in BLEND_GREYS."""
    transform: Callable[[Color, Color], Color] = field(kw_only=True)

    def generate(self, source, target, dialect):
        results = [
            candidate(
                self.transform(source, grey), target, BLEND_COMPLEXITY,
                call(self.name, INPUT, to_hex(grey)), dialect,
            )
            for grey in BLEND_GREYS
        ]
        return ranked(results)[0]

@dataclass(frozen=True)
class CompositeFallback(Generator):
    """
    Nests spin, saturate/desaturate and lighten/darken to land exactly on the
    target. Abstains when only one HSL component differs; a single-function
    generator covers that case.
    """

    def generate(self, source, target, dialect):
        sh, ss, sl = to_hsl(source)
        th, ts, tl = to_hsl(target)

        hue = -(sh - th)
        saturation = abs(ss - ts) * 100
        saturation_fn = "desaturate" if ss > ts else "saturate"
        lightness = abs(sl - tl) * 100
        lightness_fn = "darken" if sl > tl else "lighten"

        if sum(1 for d in (hue, saturation, lightness) if d) == 1:
            return None

        template = INPUT
        if hue:
            template = call("spin", template, f"{hue:.4f}")
        if saturation:
            template = call(saturation_fn, template, f"{saturation:.4f}")
        if lightness:
            template = call(lightness_fn, template, f"{lightness:.4f}")

        return candidate(target, target, COMPOSITE_COMPLEXITY, template, dialect, diff=0.0)

LESS_ONLY = frozenset({"less"})
SASS_ONLY = frozenset({"sass"})

# Order is the tie-break of last resort
GENERATORS: Tuple[Generator, ...] = (
    Identity("identity"),
    ParametricSweep("lighten", transform=fn.lighten),
    ParametricSweep("darken", transform=fn.darken),
    ParametricSweep("saturate", transform=fn.saturate),
    ParametricSweep("desaturate", transform=fn.desaturate),
    ParametricSweep("spin", transform=fn.spin, start=-359, end=359, unit=""),
    Simple("greyscale", transform=fn.greyscale),

    BlendSweep("multiply", transform=fn.multiply),
    BlendSweep("screen", transform=fn.screen),
    BlendSweep("overlay", transform=fn.overlay),
    BlendSweep("difference", transform=fn.difference),
    BlendSweep("exclusion", transform=fn.exclusion),
    BlendSweep("softlight", transform=fn.softlight),

    Simple("contrast", LESS_ONLY, transform=fn.contrast),
    Simple("invert", SASS_ONLY, transform=fn.invert),
    Simple("complement", SASS_ONLY, transform=fn.complement),

    CompositeFallback("composite"),
)

def generators_for(dialect: Dialect) -> Tuple[Generator, ...]:
    return tuple(g for g in GENERATORS if g.available_in(dialect))
