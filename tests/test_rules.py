"""Tests for the local guess rules."""

import pytest

from core.domain.rules import is_exit, normalize, render_feedback, validate_guess


@pytest.mark.parametrize("guess", ["1234", "6666", "1111", "3516"])
def test_validate_guess_accepts_codes(guess):
    assert validate_guess(guess) is True


@pytest.mark.parametrize("guess", ["123", "12345", "12a4", "0000", "7777", "", "12 4"])
def test_validate_guess_rejects_malformed(guess):
    assert validate_guess(guess) is False


@pytest.mark.parametrize(
    ("black", "white", "expected"),
    [(2, 1, "BBW"), (0, 0, ""), (4, 0, "BBBB"), (0, 3, "WWW"), (1, 2, "BWW")],
)
def test_render_feedback(black, white, expected):
    rendered = render_feedback(black, white)
    assert rendered == expected
    assert len(rendered) == black + white


@pytest.mark.parametrize("raw", ["exit", "Exit", "  EXIT  ", "exit\n"])
def test_is_exit_true(raw):
    assert is_exit(raw)


@pytest.mark.parametrize("raw", ["1234", "", None, "exit now"])
def test_is_exit_false(raw):
    assert not is_exit(raw)


def test_normalize_trims_and_handles_none():
    assert normalize("  1234 \n") == "1234"
    assert normalize(None) == ""
