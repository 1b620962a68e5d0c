"""Error Shapes — every error serializes to the uniform REST envelope."""

from app.core.errors import (
    BadRequestError, DatabaseError, TweetNotFoundError, TwitterApiError,
)


def test_not_found_references_id():
    err = TweetNotFoundError(12)
    assert err.http_status == 404
    assert err.tweet_id == 12
    assert err.to_response() == {
        "title": "Tweet not found.",
        "message": "Tweet with id of 12 could not be found.",
    }


def test_bad_request_lists_errors():
    err = BadRequestError(["one", "two"])
    assert err.http_status == 400
    assert err.to_response() == {
        "title": "Bad request.",
        "message": "Bad request.",
        "errors": ["one", "two"],
    }


def test_database_error_is_infrastructure_level():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert "errors" not in err.to_response()
    assert err.message.startswith("Database execute failed")


def test_all_errors_share_base():
    for err in (
        BadRequestError([]), TweetNotFoundError(1), DatabaseError("x", "y"),
    ):
        assert isinstance(err, TwitterApiError)
