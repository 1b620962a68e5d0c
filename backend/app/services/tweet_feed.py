"""Tweet Feed — fetch the tweet list and render it as card markup.

Invariants:
    - One attempt per load, no retry
    - 401 from the API → redirect to the login page, nothing rendered
    - Fetch or parse failures are logged and swallowed (empty feed, never an error)
    - Messages are HTML-escaped before insertion

Design Decisions:
    - Client injected: the page route passes a real httpx client, tests pass a MockTransport
"""

import html
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

import httpx

logger = logging.getLogger(__name__)

TWEET_CARD = """
        <div class="card">
          <div class="card-body">
            <p class="card-text">{message}</p>
          </div>
        </div>
      """

FEED_PAGE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>Tweets</title>
  </head>
  <body>
    <div id="tweets-container">{content}</div>
  </body>
</html>
"""


@dataclass
class FeedResult:
    """Outcome of a feed load: rendered markup or a redirect target."""
    html: str = ""
    redirect_to: str | None = None


def render_tweets(tweets: Iterable[Mapping]) -> str:
    return "".join(
        TWEET_CARD.format(message=html.escape(str(t["message"])))
        for t in tweets
    )


def render_page(content: str) -> str:
    return FEED_PAGE.format(content=content)


async def load_feed(
    client: httpx.AsyncClient, login_path: str = "/log-in",
) -> FeedResult:
    """Fetch /tweets and render it, redirecting when unauthorized."""
    try:
        res = await client.get("/tweets")
        if res.status_code == httpx.codes.UNAUTHORIZED:
            return FeedResult(redirect_to=login_path)
        tweets = res.json()["tweets"]
        return FeedResult(html=render_tweets(tweets))
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
        logger.error("Failed to load tweet feed: %s", e, exc_info=True)
        return FeedResult()
