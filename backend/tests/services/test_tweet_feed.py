"""Tweet Feed — renderer and loader tests against a mocked API.

Tests cover:
    - One escaped card per tweet, in order
    - 401 → redirect to the login path, nothing rendered
    - Transport errors and malformed bodies are swallowed (empty feed)
    - Exactly one request per load (no retry)
"""

import httpx

from app.services.tweet_feed import FeedResult, load_feed, render_page, render_tweets


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://api",
    )


def test_render_tweets_one_card_per_tweet():
    out = render_tweets([{"message": "first"}, {"message": "second"}])
    assert out.count('<div class="card">') == 2
    assert out.index("first") < out.index("second")


def test_render_tweets_escapes_markup():
    out = render_tweets([{"message": "<script>alert(1)</script>"}])
    assert "<script>" not in out
    assert "&lt;script&gt;" in out


def test_render_tweets_empty():
    assert render_tweets([]) == ""


def test_render_page_wraps_container():
    page = render_page("<p>x</p>")
    assert '<div id="tweets-container"><p>x</p></div>' in page


async def test_load_feed_renders_tweets():
    calls = []

    def handler(request):
        calls.append(request.url.path)
        return httpx.Response(
            200, json={"tweets": [{"id": 1, "message": "hello"}]},
        )

    async with _client(handler) as client:
        result = await load_feed(client)

    assert calls == ["/tweets"]
    assert result.redirect_to is None
    assert "hello" in result.html


async def test_load_feed_redirects_when_unauthorized():
    async with _client(lambda request: httpx.Response(401)) as client:
        result = await load_feed(client, login_path="/sign-in")
    assert result == FeedResult(html="", redirect_to="/sign-in")


async def test_load_feed_swallows_transport_errors():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("refused", request=request)

    async with _client(handler) as client:
        result = await load_feed(client)

    assert result == FeedResult()
    assert len(calls) == 1


async def test_load_feed_swallows_malformed_body():
    async with _client(
        lambda request: httpx.Response(200, text="<html>oops</html>"),
    ) as client:
        assert await load_feed(client) == FeedResult()

    async with _client(
        lambda request: httpx.Response(200, json={"unexpected": []}),
    ) as client:
        assert await load_feed(client) == FeedResult()
