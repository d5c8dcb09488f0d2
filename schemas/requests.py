from pydantic import BaseModel, Field
from typing import Optional

class SuggestRequest(BaseModel):
    source: str = Field(..., description="The CSS color the expression starts from")
    target: str = Field(..., description="The CSS color the expression should produce")
    dialect: Optional[str] = Field(None, description="Preprocessor dialect: less (default) or sass")
    limit: Optional[int] = Field(None, ge=1, description="Maximum number of suggestions to return")
