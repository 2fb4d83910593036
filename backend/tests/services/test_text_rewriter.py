"""Text Rewriter — verifies prompt wiring, fallback and error propagation.

Invariants:
    - One create_message call per rewrite, with the fixed system prompt
    - Empty service output → original text
    - Service exception → same exception object re-raised, logged
"""

import logging

import anthropic
import pytest

from app.core.rewrite_prompt import SYSTEM_PROMPT, build_user_message
from app.services.text_rewriter import RewriteResult, TextRewriter
from tests.services.mock_anthropic import (
    MockGenerationClient, empty_response, status_error, text_response, timeout_error,
)


def _rewriter(*responses):
    client = MockGenerationClient(list(responses))
    return TextRewriter(client, model="test-model", max_tokens=256), client


async def test_rewrite_returns_generated_text():
    rewriter, _ = _rewriter(text_response("Welcome aboard! Start today."))
    result = await rewriter.rewrite("Welcome", "Too flat", "Add a call to action")
    assert result == RewriteResult(new_text="Welcome aboard! Start today.")


async def test_rewrite_sends_single_completion_request():
    rewriter, client = _rewriter(text_response("x"))
    await rewriter.rewrite("Welcome", "Too flat", "Add excitement")
    assert len(client.calls) == 1
    call = client.calls[0]
    assert call["model"] == "test-model"
    assert call["max_tokens"] == 256
    assert call["system"] == SYSTEM_PROMPT
    assert call["messages"] == [{
        "role": "user",
        "content": build_user_message("Welcome", "Too flat", "Add excitement"),
    }]


async def test_rewrite_falls_back_to_original_on_empty_response():
    rewriter, _ = _rewriter(empty_response())
    result = await rewriter.rewrite("Keep me", "c", "p")
    assert result.new_text == "Keep me"


async def test_rewrite_falls_back_on_blank_text_block():
    rewriter, _ = _rewriter(text_response(""))
    result = await rewriter.rewrite("Keep me", "c", "p")
    assert result.new_text == "Keep me"


async def test_rewrite_propagates_timeout_unmodified(caplog):
    error = timeout_error()
    rewriter, client = _rewriter(error)
    with caplog.at_level(logging.ERROR):
        with pytest.raises(anthropic.APITimeoutError) as exc_info:
            await rewriter.rewrite("a", "b", "c")
    assert exc_info.value is error
    assert len(client.calls) == 1  # no retry
    assert "Error updating text" in caplog.text


async def test_rewrite_propagates_status_error_unmodified():
    error = status_error(anthropic.AuthenticationError, 401, "bad key")
    rewriter, _ = _rewriter(error)
    with pytest.raises(anthropic.AuthenticationError) as exc_info:
        await rewriter.rewrite("a", "b", "c")
    assert exc_info.value is error


async def test_rewrite_logs_resulting_text(caplog):
    rewriter, _ = _rewriter(text_response("Shiny new copy"))
    with caplog.at_level(logging.INFO, logger="app.services.text_rewriter"):
        await rewriter.rewrite("a", "b", "c")
    assert "Text updated successfully: Shiny new copy" in caplog.text
