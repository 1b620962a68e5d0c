"""SQLAlchemy Repositories — TweetRepository / UserRepository over an AsyncSession.

Invariants:
    - One repository instance per request (bound to that request's session)
    - Every write commits before returning, so the caller sees the stored row
    - all() returns rows in insertion (primary key) order

Design Decisions:
    - Thin wrappers: no caching, no retries; errors surface through the
      session manager's rollback/mapping
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TweetId, UserId
from app.models.tweet import Tweet
from app.models.user import User

logger = logging.getLogger(__name__)


class SqlTweetRepository:
    """Tweet persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def all(self) -> Sequence[Tweet]:
        result = await self._db.execute(select(Tweet).order_by(Tweet.id))
        return result.scalars().all()

    async def by_id(self, tweet_id: TweetId) -> Tweet | None:
        return await self._db.get(Tweet, tweet_id)

    async def create(self, message: str) -> Tweet:
        tweet = Tweet(message=message)
        self._db.add(tweet)
        await self._db.commit()
        await self._db.refresh(tweet)
        logger.info("Tweet created", extra={"tweet_id": tweet.id})
        return tweet

    async def update(self, tweet: Tweet, message: str) -> Tweet:
        tweet.message = message
        await self._db.commit()
        await self._db.refresh(tweet)
        return tweet

    async def destroy(self, tweet: Tweet) -> None:
        tweet_id = tweet.id
        await self._db.delete(tweet)
        await self._db.commit()
        logger.info("Tweet deleted", extra={"tweet_id": tweet_id})


class SqlUserRepository:
    """User persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def by_id(self, user_id: UserId) -> User | None:
        return await self._db.get(User, user_id)

    async def create(
        self, username: str, email: str, hashed_password: str,
    ) -> User:
        user = User(
            username=username, email=email, hashed_password=hashed_password,
        )
        self._db.add(user)
        await self._db.commit()
        await self._db.refresh(user)
        logger.info("User registered", extra={"user_id": user.id})
        return user
