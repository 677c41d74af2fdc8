"""Tests for fixed-width formatting and carriage templating."""

import pytest

from gittrain.formatting import CarriageField, fill_template, format_fixed_width
from gittrain.models.errors import InvalidWidthError


@pytest.mark.parametrize(
    "text,width",
    [
        ("", 3),
        ("abc", 3),
        ("abcd", 3),
        ("short", 40),
        ("x" * 40, 40),
        ("y" * 41, 40),
        ("a much longer commit message than fits", 10),
    ],
)
def test_result_is_exactly_width(text, width):
    assert len(format_fixed_width(text, width)) == width


def test_short_text_is_padded():
    result = format_fixed_width("fix typo", 12)
    assert result == "fix typo    "
    assert result.rstrip() == "fix typo"


def test_exact_fit_is_unchanged():
    assert format_fixed_width("exactly", 7) == "exactly"


def test_long_text_is_truncated_with_ellipsis():
    text = "abcdefghijklmnopqrstuvwxyz"
    result = format_fixed_width(text, 10)

    assert result == "abcdefg..."
    assert result[:7] == text[:7]


def test_width_three_truncates_to_marker_only():
    assert format_fixed_width("abcd", 3) == "..."


@pytest.mark.parametrize("width", [-1, 0, 1, 2])
def test_width_below_three_is_rejected(width):
    with pytest.raises(InvalidWidthError) as exc_info:
        format_fixed_width("anything", width)

    assert exc_info.value.width == width
    assert isinstance(exc_info.value, ValueError)


def test_fill_template_replaces_every_occurrence():
    lines = ["[{hash}] {msg}", "{modifications} / {hash}", "no tokens"]
    values = {
        CarriageField.HASH: "abc",
        CarriageField.MESSAGE: "Add feature",
        CarriageField.MODIFICATIONS: "+1 -2",
    }

    assert fill_template(lines, values) == ("[abc] Add feature", "+1 -2 / abc", "no tokens")


def test_fill_template_requires_all_fields():
    with pytest.raises(ValueError, match="MODIFICATIONS"):
        fill_template(["{hash}"], {CarriageField.HASH: "abc", CarriageField.MESSAGE: "msg"})


def test_field_tokens():
    assert [field.token for field in CarriageField] == ["{hash}", "{msg}", "{modifications}"]
