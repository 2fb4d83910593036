"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps int, assigned only by TodoStore, starting at 1
    - Message roles encoded as Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (messages go straight to the SDK)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", int)


# ─── Enums ───────────────────────────────────────────────────────

class MessageRole(str, Enum):
    """Roles of turns sent in the messages list (system prompt travels separately)."""
    USER = "user"
