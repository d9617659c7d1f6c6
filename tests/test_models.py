"""Tests for the wire and domain models."""

import pytest
from pydantic import ValidationError

from core.domain.models import (
    CreateGameResponse,
    ErrorPayload,
    Feedback,
    GameSession,
    GuessAttempt,
    GuessRequest,
)


def test_feedback_solved_only_with_four_black():
    assert Feedback(black=4, white=0).solved
    assert not Feedback(black=3, white=1).solved


@pytest.mark.parametrize(
    "payload",
    [
        {"black": -1, "white": 0},
        {"black": 5, "white": 0},
        {"black": 3, "white": 2},
        {"black": 1},
        {"black": "two", "white": 0},
    ],
)
def test_feedback_rejects_out_of_bounds(payload):
    with pytest.raises(ValidationError):
        Feedback.model_validate(payload)


def test_feedback_ignores_extra_fields():
    feedback = Feedback.model_validate_json(b'{"black": 1, "white": 2, "turn": 3}')
    assert (feedback.black, feedback.white) == (1, 2)


def test_guess_attempt_pattern():
    assert GuessAttempt(guess="1256").guess == "1256"
    with pytest.raises(ValidationError):
        GuessAttempt(guess="1270")


def test_game_session_requires_id():
    with pytest.raises(ValidationError):
        GameSession(game_id="")


def test_create_game_response_requires_game_id():
    assert CreateGameResponse.model_validate_json(b'{"game_id": "abc123"}').game_id == "abc123"
    with pytest.raises(ValidationError):
        CreateGameResponse.model_validate_json(b'{"id": "abc123"}')


def test_error_payload():
    assert ErrorPayload.model_validate_json(b'{"error": "server busy"}').error == "server busy"
    with pytest.raises(ValidationError):
        ErrorPayload.model_validate_json(b"<html>oops</html>")


def test_guess_request_serializes_wire_shape():
    body = GuessRequest(game_id="abc123", guess="1234").model_dump()
    assert body == {"game_id": "abc123", "guess": "1234"}


@pytest.mark.parametrize(
    "body",
    [b'{"black": true, "white": 2}', b'{"black": 1, "white": "2"}', b'{"black": 1.0, "white": 0}'],
)
def test_feedback_rejects_non_integer_json(body):
    with pytest.raises(ValidationError):
        Feedback.model_validate_json(body)


def test_create_game_response_rejects_non_string_id():
    with pytest.raises(ValidationError):
        CreateGameResponse.model_validate_json(b'{"game_id": 123}')
