"""Text Schemas — rewrite request/response with camelCase wire names.

Invariants:
    - originalText, comment, prompt: required, non-empty, not whitespace-only
    - Values are forwarded verbatim (validated, never stripped)

Design Decisions:
    - Field aliases keep the public camelCase contract while Python code stays snake_case
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UpdateTextRequest(BaseModel):
    """Text to rewrite plus reviewer comment and instructions."""
    model_config = ConfigDict(populate_by_name=True)

    original_text: str = Field(
        min_length=1, alias="originalText",
        examples=["Welcome to our website"],
    )
    comment: str = Field(min_length=1, examples=["Make it more engaging"])
    prompt: str = Field(
        min_length=1, examples=["Add excitement and call to action"],
    )

    @field_validator("original_text", "comment", "prompt")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v


class UpdateTextResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_text: str = Field(alias="newText")
