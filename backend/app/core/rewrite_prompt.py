"""Rewrite Prompt — pure prompt assembly and response extraction for text rewriting.

Invariants:
    - All functions are pure (no IO, no async)
    - System instruction is fixed: professional copywriter persona
    - User message interpolates original text, comment and instructions verbatim
    - extract_rewritten_text never raises on an empty/odd response, it falls back

Design Decisions:
    - Extracted from the rewriter service so prompt shape is testable without the SDK
    - Fallback to the original text is a best-effort policy, not an error
"""

from app.core.domain_types import MessageRole

SYSTEM_PROMPT = "You are a professional copywriter helping to improve text."

_USER_TEMPLATE = (
    'Original text: "{original_text}"\n'
    'Comment: "{comment}"\n'
    'Instructions: "{prompt}"\n'
    "Please provide an improved version of the text."
)


def build_user_message(original_text: str, comment: str, prompt: str) -> str:
    """Interpolate the request fields into the fixed user template."""
    return _USER_TEMPLATE.format(
        original_text=original_text, comment=comment, prompt=prompt,
    )


def build_messages(original_text: str, comment: str, prompt: str) -> list[dict]:
    """Build the conversation turns sent alongside SYSTEM_PROMPT."""
    return [
        {
            "role": MessageRole.USER.value,
            "content": build_user_message(original_text, comment, prompt),
        },
    ]


def extract_rewritten_text(response, fallback: str) -> str:
    """Text of the first returned content block, or fallback if unusable."""
    content = getattr(response, "content", None) or []
    if not content:
        return fallback
    text = getattr(content[0], "text", None)
    if not isinstance(text, str) or not text:
        return fallback
    return text
