"""Todo Schemas — create/update/response models for the todo endpoints.

Invariants:
    - TodoCreate.title: required, stripped, non-empty
    - TodoUpdate fields optional; only fields present in the body are applied
    - A present title must be non-empty after stripping; explicit null is rejected

Design Decisions:
    - model_dump(exclude_unset=True) distinguishes "absent" from "supplied" in routes
"""

from pydantic import BaseModel, Field, field_validator


class TodoCreate(BaseModel):
    title: str = Field(min_length=1, max_length=1000, examples=["Buy groceries"])

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TodoUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=1000)
    completed: bool | None = Field(None, examples=[True])

    @field_validator("title", "completed", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TodoResponse(BaseModel):
    id: int
    title: str
    completed: bool
