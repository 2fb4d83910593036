"""Text Rewriter — asks the text-generation service for an improved version of a text.

Invariants:
    - Exactly one completion requested per rewrite() call, no retry
    - Empty/unusable service response → original text returned unchanged (not an error)
    - Service failure → logged, then re-raised unmodified
    - Success → logs the resulting text

Design Decisions:
    - Prompt assembly and extraction live in core/rewrite_prompt (pure, testable)
    - Client injected: routes and tests swap it without patching the SDK
    - Degrade-on-empty vs propagate-on-failure asymmetry kept as-is (ADR: intent of upstream behavior unclear)
"""

import logging
from dataclasses import dataclass

from app.core.rewrite_prompt import (
    SYSTEM_PROMPT, build_messages, extract_rewritten_text,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewriteResult:
    new_text: str


class TextRewriter:
    """Orchestrates prompt → completion → extraction."""

    def __init__(self, client, model: str, max_tokens: int = 1024):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    async def rewrite(
        self, original_text: str, comment: str, prompt: str,
    ) -> RewriteResult:
        messages = build_messages(original_text, comment, prompt)
        try:
            response = await self.client.create_message(
                model=self.model,
                max_tokens=self.max_tokens,
                system=SYSTEM_PROMPT,
                messages=messages,
            )
        except Exception as e:
            logger.error(f"Error updating text: {e}")
            raise
        new_text = extract_rewritten_text(response, fallback=original_text)
        logger.info(f"Text updated successfully: {new_text}")
        return RewriteResult(new_text=new_text)
