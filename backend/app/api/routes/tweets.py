"""Tweet Resource — list, get, create, update and delete tweets.

Invariants:
    - Path ids only match digit sequences ({tweet_id:int}); anything else is a route miss
    - Ids beyond the INTEGER column range are reported as not found without a query
    - Update validates the body before looking the tweet up
    - Failures are raised as TwitterApiError; routes never build error bodies
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.core.domain_types import MAX_ENTITY_ID, TweetId
from app.core.errors import TweetNotFoundError
from app.core.repository_protocols import TweetLike, TweetRepository
from app.core.validation import TWEET_RULES, require_valid
from app.api.dependencies import get_tweet_repository
from app.schemas.tweet import TweetIn, TweetEnvelope, TweetListEnvelope, TweetOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tweets", tags=["tweets"])


async def get_tweet_or_404(
    tweet_id: int, tweets: TweetRepository,
) -> TweetLike:
    tweet = None
    if tweet_id <= MAX_ENTITY_ID:
        tweet = await tweets.by_id(TweetId(tweet_id))
    if tweet is None:
        logger.info("Tweet not found", extra={"tweet_id": tweet_id})
        raise TweetNotFoundError(tweet_id)
    return tweet


def _envelope(tweet: TweetLike) -> TweetEnvelope:
    return TweetEnvelope(tweet=TweetOut.model_validate(tweet))


@router.get("", response_model=TweetListEnvelope)
async def list_tweets(
    tweets: TweetRepository = Depends(get_tweet_repository),
):
    """All tweets in storage order."""
    rows = await tweets.all()
    return TweetListEnvelope(
        tweets=[TweetOut.model_validate(t) for t in rows],
    )


@router.get("/{tweet_id:int}", response_model=TweetEnvelope)
async def get_tweet(
    tweet_id: int,
    tweets: TweetRepository = Depends(get_tweet_repository),
):
    tweet = await get_tweet_or_404(tweet_id, tweets)
    return _envelope(tweet)


@router.post(
    "", response_model=TweetEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_tweet(
    body: TweetIn | None = None,
    tweets: TweetRepository = Depends(get_tweet_repository),
):
    payload = body.model_dump() if body else {}
    require_valid(payload, TWEET_RULES)
    tweet = await tweets.create(payload["message"])
    return _envelope(tweet)


@router.put("/{tweet_id:int}", response_model=TweetEnvelope)
async def update_tweet(
    tweet_id: int,
    body: TweetIn | None = None,
    tweets: TweetRepository = Depends(get_tweet_repository),
):
    """Replace a tweet's message."""
    payload = body.model_dump() if body else {}
    require_valid(payload, TWEET_RULES)
    tweet = await get_tweet_or_404(tweet_id, tweets)
    tweet = await tweets.update(tweet, payload["message"])
    return _envelope(tweet)


@router.delete(
    "/{tweet_id:int}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_tweet(
    tweet_id: int,
    tweets: TweetRepository = Depends(get_tweet_repository),
):
    tweet = await get_tweet_or_404(tweet_id, tweets)
    await tweets.destroy(tweet)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
