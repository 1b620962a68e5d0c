"""Request Dependencies — repositories and clients bound per request.

Invariants:
    - Each request gets repositories bound to its own AsyncSession
    - Routes receive Protocol types, never the concrete SQLAlchemy classes
"""

from typing import AsyncGenerator

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.repository_protocols import TweetRepository, UserRepository
from app.infrastructure.database import get_db
from app.infrastructure.repositories import SqlTweetRepository, SqlUserRepository


def get_tweet_repository(
    db: AsyncSession = Depends(get_db),
) -> TweetRepository:
    return SqlTweetRepository(db)


def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return SqlUserRepository(db)


async def get_feed_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client pointed at the public API, used by the feed page."""
    async with httpx.AsyncClient(base_url=get_settings().api_base_url) as client:
        yield client
