from pydantic import BaseModel, Field
from typing import List

class Suggestion(BaseModel):
    expression: str = Field(..., description="Preprocessor expression, e.g. lighten(@input, 20%)")
    color: str = Field(..., description="Hex color the expression evaluates to")
    difference: float = Field(..., description="dE76 distance from the target color")
    complexity: float = Field(..., description="Cost heuristic, lower is simpler")

class SuggestResponse(BaseModel):
    success: bool
    suggestions: List[Suggestion] = Field(default_factory=list, description="Best suggestion first")

class ErrorResponse(BaseModel):
    detail: str
