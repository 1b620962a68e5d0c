"""Tweet Schemas — request body and response envelopes for /tweets.

Invariants:
    - TweetIn.message is optional at the type level so that a missing message
      reaches the rule collector and is reported with the API's own wording
    - Responses expose id and message only
"""

from pydantic import BaseModel, ConfigDict


class TweetIn(BaseModel):
    """Body of POST /tweets and PUT /tweets/{id}."""
    message: str | None = None


class TweetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    message: str


class TweetEnvelope(BaseModel):
    tweet: TweetOut


class TweetListEnvelope(BaseModel):
    tweets: list[TweetOut]
