"""
Suggestion engine: runs every generator available in a dialect and ranks
what they produce.
"""

import logging
from typing import List, Optional

from .colorMath import parse_color
from .dialects import get_dialect
from .errors import MissingInputError
from .generators import generators_for
from .ranking import Candidate, best

logger = logging.getLogger(__name__)


def suggest(source: Optional[str], target: Optional[str], dialect: Optional[str] = None) -> List[Candidate]:
    """
    Suggest expressions that turn `source` into `target`.

    Returns candidates similar to the target, best first (lowest difference,
    then lowest complexity). An empty list means no suggestion is available,
    including when either color cannot be read as an opaque RGB color.

    Raises MissingInputError for an empty source and UnknownDialectError for
    a dialect that is not registered.
    """
    if not source:
        raise MissingInputError()

    resolved = get_dialect(dialect)

    from_color = parse_color(source)
    to_color = parse_color(target)
    if from_color is None or to_color is None:
        logger.info("No suggestion: %r or %r is not an RGB color", source, target)
        return []

    candidates = []
    for generator in generators_for(resolved):
        result = generator.generate(from_color, to_color, resolved)
        if result is not None:
            candidates.append(result)

    suggestions = best(candidates, to_color)
    logger.debug(
        "%s: %d candidates, %d similar, best %s",
        resolved.name, len(candidates), len(suggestions),
        suggestions[0].expression if suggestions else None,
    )
    return suggestions
