from .colorMath import Color, difference, is_similar, parse_color
from .dialects import DIALECTS, get_dialect
from .engine import suggest
from .errors import MissingInputError, SuggestError, TemplateError, UnknownDialectError
from .ranking import Candidate, best

__all__ = [
    "suggest",
    "Candidate",
    "Color",
    "parse_color",
    "difference",
    "is_similar",
    "best",
    "DIALECTS",
    "get_dialect",
    "SuggestError",
    "MissingInputError",
    "UnknownDialectError",
    "TemplateError",
]
