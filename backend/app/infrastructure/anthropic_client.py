"""Text Generation Client — thin wrapper around AsyncAnthropic for single completions.

Invariants:
    - No retries: SDK max_retries forced to 0, no backoff loop here
    - Every SDK exception propagates unchanged to the caller
    - Successful calls log token usage (input/output) with the model id

Design Decisions:
    - Wrapper over raw client: keeps SDK construction and usage logging out of services
    - Async client: the network wait is the request's only suspension point,
      other requests keep being served meanwhile
"""

import logging

import anthropic

logger = logging.getLogger(__name__)


class TextGenerationClient:
    """Wraps the Anthropic client for one-shot message creation."""

    def __init__(self, api_key: str, timeout_seconds: int = 60):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        system: str,
        messages: list,
    ):
        """Request one completion. Raises anthropic.APIError subclasses on failure."""
        response = await self.client.messages.create(
            model=model,
            max_tokens=max_tokens,
            system=system,
            messages=messages,
        )
        self._log_success(response, model)
        return response

    def _log_success(self, response, model: str) -> None:
        usage = getattr(response, "usage", None)
        logger.info(
            "Text generation success",
            extra={
                "model": model,
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
            },
        )

    async def close(self) -> None:
        await self.client.close()
