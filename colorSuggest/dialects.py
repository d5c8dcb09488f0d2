"""
Preprocessor dialects and the `{token}` templates candidates are written in.

A template is plain text with placeholders:

    template   := (text | placeholder)*
    placeholder := "{" identifier "}"
    identifier := [A-Za-z_][A-Za-z0-9_-]*

Generators build templates from canonical tokens (``{input}``, ``{lighten}``,
...). Formatting swaps each token for the dialect's spelling in a single pass,
falling back to the token itself.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple

from .errors import TemplateError, UnknownDialectError

DEFAULT_DIALECT = "less"

# Every token a shipped generator may emit
CANONICAL_TOKENS = frozenset({
    "input",
    "lighten", "darken", "saturate", "desaturate", "spin",
    "greyscale", "contrast", "invert", "complement",
    "multiply", "screen", "overlay", "difference", "exclusion", "softlight",
})

@dataclass(frozen=True)
class Dialect:
    name: str
    spellings: Mapping[str, str]

    def spell(self, token: str) -> str:
        if token not in CANONICAL_TOKENS:
            raise TemplateError(f"Unregistered template token {token!r} for dialect {self.name!r}")
        return self.spellings.get(token, token)

def _dialect(name: str, **spellings: str) -> Dialect:
    unknown = set(spellings) - CANONICAL_TOKENS
    if unknown:
        raise TemplateError(f"Dialect {name!r} spells unknown tokens: {sorted(unknown)}")
    return Dialect(name=name, spellings=MappingProxyType(dict(spellings)))

DIALECTS: Mapping[str, Dialect] = MappingProxyType({
    "less": _dialect("less", input="@input"),
    "sass": _dialect(
        "sass",
        input="$input",
        greyscale="grayscale",
        spin="adjust-hue",
        multiply="blend-multiply",
        screen="blend-screen",
        overlay="blend-overlay",
        difference="blend-difference",
        exclusion="blend-exclusion",
        softlight="blend-softlight",
    ),
})

def get_dialect(name: Optional[str] = None) -> Dialect:
    """Look up a dialect by name, defaulting to Less."""
    if name is None or name == "":
        name = DEFAULT_DIALECT
    try:
        return DIALECTS[name]
    except KeyError:
        raise UnknownDialectError(name, sorted(DIALECTS)) from None

# Template grammar -----------------------------------------------------

def _is_identifier(s: str) -> bool:
    if not s or not (s[0].isascii() and (s[0].isalpha() or s[0] == "_")):
        return False
    return all(c.isascii() and (c.isalnum() or c in "_-") for c in s[1:])

def scan_template(template: str) -> Iterator[Tuple[str, str]]:
    """Yield ("text", chunk) and ("token", name) pieces of a template."""
    pos = 0
    while pos < len(template):
        start = template.find("{", pos)
        if start < 0:
            yield "text", template[pos:]
            return
        if start > pos:
            yield "text", template[pos:start]
        end = template.find("}", start + 1)
        if end < 0:
            raise TemplateError(f"Unclosed placeholder at offset {start} in {template!r}")
        name = template[start + 1:end]
        if not _is_identifier(name):
            raise TemplateError(f"Bad placeholder {{{name}}} in {template!r}")
        yield "token", name
        pos = end + 1

def format_template(template: str, dialect: Dialect) -> str:
    """Render a template in the given dialect."""
    out: List[str] = []
    for kind, value in scan_template(template):
        out.append(dialect.spell(value) if kind == "token" else value)
    return "".join(out)

# Template builders ------------------------------------------------------

INPUT = "{input}"

def call(function: str, *args: str) -> str:
    """Template for function(args...), with the function name as a token."""
    return "{" + function + "}(" + ", ".join(args) + ")"
