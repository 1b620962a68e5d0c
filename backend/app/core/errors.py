"""Error Hierarchy — typed exceptions for every failure a handler can signal.

Invariants:
    - Every error carries a title (str), a message (str) and an http_status (int)
    - BadRequestError always carries a non-empty, ordered errors list
    - to_response() is the only REST envelope; handlers never build error bodies
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TwitterApiError base: one global handler catches all
      (ADR: uniform error shape)
    - Messages mirror the public API wording exactly; clients match on them
"""


class TwitterApiError(Exception):
    """Base exception for all domain and infrastructure errors."""

    def __init__(
        self,
        message: str,
        title: str,
        http_status: int = 500,
        errors: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.title = title
        self.http_status = http_status
        self.errors = errors

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {"title": self.title, "message": self.message}
        if self.errors is not None:
            body["errors"] = list(self.errors)
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequestError(TwitterApiError):
    """Request payload violated one or more validation rules."""
    def __init__(self, errors: list[str]):
        super().__init__("Bad request.", "Bad request.", 400, errors)


class TweetNotFoundError(TwitterApiError):
    """No tweet stored under the requested id."""
    def __init__(self, tweet_id: int):
        super().__init__(
            f"Tweet with id of {tweet_id} could not be found.",
            "Tweet not found.", 404,
        )
        self.tweet_id = tweet_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TwitterApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "Service unavailable.", 503,
        )
        self.operation = operation
