"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TweetId, UserId wrap the integer primary keys — never pass bare ints in domain logic
    - Ids are positive and fit a signed 32-bit INTEGER column (MAX_ENTITY_ID)
    - Tweet messages are 1–280 chars once stored

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TweetId = NewType("TweetId", int)
UserId = NewType("UserId", int)

# Primary keys are 32-bit INTEGER columns; larger ids can never be stored
MAX_ENTITY_ID = 2**31 - 1
