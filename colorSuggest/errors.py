"""Errors raised by the suggestion engine."""

from typing import Iterable


class SuggestError(Exception):
    """Base class for suggestion errors."""


class MissingInputError(SuggestError, ValueError):
    """No source color was given."""

    def __init__(self, message: str = "cannot suggest without input"):
        super().__init__(message)


class UnknownDialectError(SuggestError, KeyError):
    """Dialect name is not in the dialect table."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        self.name = name
        self.known = list(known)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown dialect {self.name!r}; expected one of {', '.join(self.known)}"


class TemplateError(SuggestError):
    """Malformed expression template or token missing from the dialect vocabulary."""
