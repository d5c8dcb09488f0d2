"""End-to-end tests for suggest()."""

import logging

import pytest

from colorSuggest import MissingInputError, UnknownDialectError, suggest
from colorSuggest.colorMath import SIMILARITY_THRESHOLD, difference, is_similar, parse_color

COLORS = ["#ff0000", "#000000", "#ffffff", "#808080", "#123456", "rgb(10, 200, 30)", "teal"]
PAIRS = [
    ("#000000", "#333333"),
    ("#ff0000", "#cc0000"),
    ("#336699", "#6699cc"),
    ("#ff0000", "#00ff00"),
    ("#abcdef", "#fedcba"),
    ("#808080", "#404040"),
]


@pytest.mark.parametrize("dialect", ["less", "sass"])
@pytest.mark.parametrize("color", COLORS)
def test_same_color_suggests_identity_first(color, dialect):
    results = suggest(color, color, dialect)
    top = results[0]
    assert top.difference == 0
    assert top.complexity == 0
    assert top.template == "{input}"
    assert top.expression == ("@input" if dialect == "less" else "$input")


@pytest.mark.parametrize("dialect", ["less", "sass"])
@pytest.mark.parametrize("source,target", PAIRS)
def test_results_are_similar_and_sorted(source, target, dialect):
    results = suggest(source, target, dialect)
    to_color = parse_color(target)
    for c in results:
        assert is_similar(c.color, to_color)
        assert difference(c.color, to_color) < SIMILARITY_THRESHOLD
    keys = [(c.difference, c.complexity) for c in results]
    assert keys == sorted(keys)


@pytest.mark.parametrize("source,target", PAIRS)
def test_sweeps_never_emit_zero_amounts(source, target):
    for dialect in ("less", "sass"):
        for c in suggest(source, target, dialect):
            assert ", 0%)" not in c.expression
            assert ", 0)" not in c.expression


def test_black_to_dark_grey_lightens():
    results = suggest("#000000", "#333333", "less")
    top = results[0]
    assert top.expression == "lighten(@input, 20%)"
    assert top.difference < 2.3


def test_blend_candidates_cost_fifty():
    results = suggest("#000000", "#333333", "less")
    blends = [c for c in results if c.expression.split("(")[0] in
              ("multiply", "screen", "overlay", "difference", "exclusion", "softlight")]
    assert blends
    assert all(c.complexity == 50 for c in blends)


def test_red_to_red_in_sass_is_identity():
    top = suggest("#ff0000", "#ff0000", "sass")[0]
    assert top.expression == "$input"


def test_single_axis_change_is_not_composed():
    for c in suggest("#000000", "#333333"):
        assert c.complexity != 1000


def test_two_axis_change_falls_back_to_composite():
    results = suggest("#000000", "#ff0000", "less")
    composite = [c for c in results if c.complexity == 1000]
    assert [c.expression for c in composite] == ["lighten(saturate(@input, 100.0000), 50.0000)"]


def test_hue_rotation_uses_first_exact_spin():
    top = suggest("#ff0000", "#00ff00", "less")[0]
    assert top.expression == "spin(@input, -240)"
    top = suggest("#ff0000", "#00ff00", "sass")[0]
    assert top.expression == "adjust-hue($input, -240)"


def test_dialect_defaults_to_less():
    assert suggest("#000000", "#333333")[0].expression == "lighten(@input, 20%)"
    assert suggest("#000000", "#333333", None)[0].expression == "lighten(@input, 20%)"


def test_dialect_only_generators():
    less = {c.expression.split("(")[0] for c in suggest("#ffffff", "#000000", "less")}
    sass = {c.expression.split("(")[0] for c in suggest("#ffffff", "#000000", "sass")}
    assert "contrast" in less
    assert "contrast" not in sass
    assert "invert" in sass
    assert "invert" not in less


@pytest.mark.parametrize("source", ["", None])
def test_missing_source_raises(source):
    with pytest.raises(MissingInputError):
        suggest(source, "#ff0000")


def test_unknown_dialect_raises():
    with pytest.raises(UnknownDialectError):
        suggest("#000000", "#333333", "stylus")


@pytest.mark.parametrize("source,target", [
    ("not-a-color-at-all", "#ff0000"),
    ("#ff0000", "not-a-color-at-all"),
    ("#ff0000", ""),
    ("#ff0000", None),
    ("#ff000080", "#ff0000"),
    ("rgba(0, 0, 0, 0.5)", "#000000"),
    ("rgb(123)", "#010203"),
    ("#010203", "rgb(255255255)"),
    ("#red", "#ff0000"),
])
def test_unresolvable_colors_give_no_suggestions(source, target):
    assert suggest(source, target) == []


def test_unresolvable_color_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="colorSuggest.engine"):
        suggest("not-a-color-at-all", "#ff0000")
    assert "not an RGB color" in caplog.text


def test_candidates_are_immutable():
    top = suggest("#000000", "#333333")[0]
    with pytest.raises(Exception):
        top.difference = 5
