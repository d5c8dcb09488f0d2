"""Tests for dialect lookup and {token} template formatting."""

import pytest

from colorSuggest.dialects import (
    CANONICAL_TOKENS,
    DIALECTS,
    INPUT,
    call,
    format_template,
    get_dialect,
    scan_template,
)
from colorSuggest.errors import TemplateError, UnknownDialectError

LESS = DIALECTS["less"]
SASS = DIALECTS["sass"]


def test_default_dialect_is_less():
    assert get_dialect() is LESS
    assert get_dialect(None) is LESS
    assert get_dialect("") is LESS
    assert get_dialect("sass") is SASS


def test_unknown_dialect_raises():
    with pytest.raises(UnknownDialectError) as exc:
        get_dialect("stylus")
    assert exc.value.name == "stylus"
    assert "less" in str(exc.value) and "sass" in str(exc.value)
    assert isinstance(exc.value, KeyError)


def test_call_builds_nested_templates():
    inner = call("spin", INPUT, "10")
    assert inner == "{spin}({input}, 10)"
    assert call("darken", inner, "5%") == "{darken}({spin}({input}, 10), 5%)"
    assert call("greyscale", INPUT) == "{greyscale}({input})"


def test_input_token_spelling():
    assert format_template("{input}", LESS) == "@input"
    assert format_template("{input}", SASS) == "$input"


def test_overrides_and_verbatim_fallback():
    template = call("darken", call("spin", INPUT, "10"), "5%")
    assert format_template(template, LESS) == "darken(spin(@input, 10), 5%)"
    assert format_template(template, SASS) == "darken(adjust-hue($input, 10), 5%)"
    assert format_template(call("greyscale", INPUT), SASS) == "grayscale($input)"
    assert format_template(call("softlight", INPUT, "#808080"), SASS) == "blend-softlight($input, #808080)"
    assert format_template(call("softlight", INPUT, "#808080"), LESS) == "softlight(@input, #808080)"


def test_every_canonical_token_formats_in_every_dialect():
    for dialect in DIALECTS.values():
        for token in CANONICAL_TOKENS:
            assert format_template("{" + token + "}", dialect)


def test_formatting_is_idempotent():
    for dialect in DIALECTS.values():
        once = format_template(call("lighten", INPUT, "20%"), dialect)
        assert format_template(once, dialect) == once


def test_scan_template():
    assert list(scan_template("{lighten}({input}, 20%)")) == [
        ("token", "lighten"), ("text", "("), ("token", "input"), ("text", ", 20%)"),
    ]
    assert list(scan_template("plain")) == [("text", "plain")]
    assert list(scan_template("")) == []


@pytest.mark.parametrize("template", ["{input", "{}", "{ input}", "{1st}", "{a.b}"])
def test_malformed_templates(template):
    with pytest.raises(TemplateError):
        format_template(template, LESS)


def test_unregistered_token_is_an_error():
    with pytest.raises(TemplateError):
        format_template("{mix}({input}, red)", LESS)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DIALECTS["stylus"] = LESS
    with pytest.raises(TypeError):
        SASS.spellings["input"] = "@input"
