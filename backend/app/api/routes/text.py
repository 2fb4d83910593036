"""Text Routes — rewrite copy through the text-generation service.

Invariants:
    - Every route here requires a valid bearer token
    - Upstream failures propagate to the global handler (502 envelope)
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_text_rewriter, require_bearer_token
from app.schemas.text import UpdateTextRequest, UpdateTextResponse
from app.services.text_rewriter import TextRewriter

router = APIRouter(
    prefix="/api/v1/text", tags=["text processing"],
    dependencies=[Depends(require_bearer_token)],
)


@router.post(
    "/update", response_model=UpdateTextResponse,
    responses={
        401: {"description": "Unauthorized"},
        502: {"description": "Text generation service failed"},
    },
)
async def update_text(
    body: UpdateTextRequest,
    rewriter: TextRewriter = Depends(get_text_rewriter),
):
    """Update text using the language model."""
    result = await rewriter.rewrite(body.original_text, body.comment, body.prompt)
    return UpdateTextResponse(new_text=result.new_text)
