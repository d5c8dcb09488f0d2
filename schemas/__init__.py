from .requests import SuggestRequest
from .responses import Suggestion, SuggestResponse, ErrorResponse

__all__ = ["SuggestRequest", "Suggestion", "SuggestResponse", "ErrorResponse"]
