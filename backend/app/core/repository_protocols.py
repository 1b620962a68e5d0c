"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Handlers depend on these Protocols, never on a concrete backend
    - Repositories return ORM-shaped objects; serialization happens in schemas/

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: every implementation does IO
"""

from typing import Protocol, Sequence

from app.core.domain_types import TweetId, UserId


class TweetLike(Protocol):
    """Structural contract for stored tweets."""
    id: int
    message: str


class UserLike(Protocol):
    """Structural contract for stored users."""
    id: int
    username: str
    email: str
    hashed_password: str


class TweetRepository(Protocol):
    """Contract for tweet persistence."""
    async def all(self) -> Sequence[TweetLike]: ...
    async def by_id(self, tweet_id: TweetId) -> TweetLike | None: ...
    async def create(self, message: str) -> TweetLike: ...
    async def update(self, tweet: TweetLike, message: str) -> TweetLike: ...
    async def destroy(self, tweet: TweetLike) -> None: ...


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def by_id(self, user_id: UserId) -> UserLike | None: ...
    async def create(
        self, username: str, email: str, hashed_password: str,
    ) -> UserLike: ...
