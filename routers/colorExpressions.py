"""
Suggest a Less or Sass color expression that turns one CSS color into another.
"""

import logging
from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException

from colorSuggest import MissingInputError, UnknownDialectError, suggest
from colorSuggest.colorMath import to_hex
from colorSuggest.settings import Settings, load_settings
from schemas.requests import SuggestRequest
from schemas.responses import ErrorResponse, Suggestion, SuggestResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@lru_cache()
def get_settings() -> Settings:
    return load_settings()

# Plain def: the search is CPU bound, so FastAPI runs it in the threadpool
@router.post(
    "/suggest_color_expression",
    response_model=SuggestResponse,
    operation_id="suggest_color_expression",
    description="Suggest the simplest Less/Sass color function expression that turns the source color into the target color",
    responses={400: {"model": ErrorResponse}},
)
def suggest_color_expression(request: SuggestRequest, settings: Settings = Depends(get_settings)):
    """Rank candidate expressions for source -> target."""
    try:
        candidates = suggest(request.source, request.target, request.dialect)
    except (MissingInputError, UnknownDialectError) as e:
        logger.warning("Rejected suggestion request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    limit = request.limit or settings.default_limit
    if limit:
        candidates = candidates[:limit]

    return SuggestResponse(
        success=True,
        suggestions=[
            Suggestion(
                expression=c.expression,
                color=to_hex(c.color),
                difference=c.difference,
                complexity=c.complexity,
            )
            for c in candidates
        ],
    )
