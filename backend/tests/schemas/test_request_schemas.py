"""Request Schemas — verifies presence checks and camelCase aliases."""

import pytest
from pydantic import ValidationError

from app.schemas.auth import TokenRequest
from app.schemas.text import UpdateTextRequest, UpdateTextResponse
from app.schemas.todo import TodoCreate, TodoUpdate


def test_update_text_accepts_camel_case():
    req = UpdateTextRequest.model_validate(
        {"originalText": "a", "comment": "b", "prompt": "c"},
    )
    assert req.original_text == "a"


def test_update_text_keeps_surrounding_whitespace():
    req = UpdateTextRequest.model_validate(
        {"originalText": "  a  ", "comment": "b", "prompt": "c"},
    )
    assert req.original_text == "  a  "


@pytest.mark.parametrize("value", ["", "   "])
def test_update_text_rejects_blank(value):
    with pytest.raises(ValidationError):
        UpdateTextRequest.model_validate(
            {"originalText": "a", "comment": value, "prompt": "c"},
        )


def test_update_text_response_serializes_new_text_alias():
    assert UpdateTextResponse(new_text="x").model_dump(by_alias=True) == {"newText": "x"}


def test_token_request_alias():
    assert TokenRequest.model_validate({"apiKey": "k"}).api_key == "k"


def test_todo_create_strips():
    assert TodoCreate(title="  x ").title == "x"


def test_todo_update_tracks_supplied_fields():
    assert TodoUpdate.model_validate({}).model_dump(exclude_unset=True) == {}
    assert TodoUpdate.model_validate({"completed": False}).model_dump(
        exclude_unset=True,
    ) == {"completed": False}


def test_todo_update_rejects_explicit_null():
    with pytest.raises(ValidationError):
        TodoUpdate.model_validate({"title": None})
