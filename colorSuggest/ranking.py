"""Candidate expressions and the order they are ranked in."""

from typing import Iterable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .colorMath import Color, is_similar

class Candidate(BaseModel):
    """One proposed expression and how well it reaches the target."""
    model_config = ConfigDict(frozen=True)

    color: Color = Field(..., description="Color the expression evaluates to")
    difference: float = Field(ge=0.0, description="dE76 between color and the target")
    complexity: float = Field(ge=0.0, description="Cost heuristic, lower is simpler")
    template: str = Field(..., description="Dialect-neutral {token} template")
    expression: str = Field(..., description="Template rendered for its dialect")

def rank_key(candidate: Candidate) -> Tuple[float, float]:
    return candidate.difference, candidate.complexity

def ranked(candidates: Iterable[Optional[Candidate]]) -> List[Candidate]:
    """Sort by difference, then complexity. Equal keys keep their input order."""
    return sorted((c for c in candidates if c is not None), key=rank_key)

def best(candidates: Iterable[Optional[Candidate]], target: Color) -> List[Candidate]:
    """Ranked candidates whose color is similar to the target."""
    return [c for c in ranked(candidates) if is_similar(c.color, target)]
