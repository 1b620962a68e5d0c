"""Declarative Validation — ordered (field, predicate, message) rules.

Invariants:
    - Every rule runs; no rule short-circuits another
    - Failure messages keep rule declaration order
    - Predicates are pure: they read the payload, never mutate it

Design Decisions:
    - Plain tuples of rules over Pydantic validators: Pydantic stops at the first
      failure per field, clients expect every violated rule listed
    - Email syntax delegated to email-validator (same engine as pydantic EmailStr)
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from email_validator import EmailNotValidError, validate_email

from app.core.errors import BadRequestError

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldRule:
    """A predicate over one payload field plus the message emitted on failure."""
    field: str
    predicate: Predicate
    message: str

    def check(self, payload: Mapping[str, Any]) -> bool:
        return self.predicate(payload.get(self.field))


# ─── Predicates ──────────────────────────────────────────────────

def exists(value: Any) -> bool:
    """Present and not falsy ("", 0, False, [] all fail)."""
    return bool(value)


def max_length(limit: int) -> Predicate:
    """Absent values pass; present values are measured as strings."""
    def _check(value: Any) -> bool:
        if value is None:
            return True
        return len(str(value)) <= limit
    return _check


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def all_of(*predicates: Predicate) -> Predicate:
    """Combine predicates under a single message."""
    def _check(value: Any) -> bool:
        return all(p(value) for p in predicates)
    return _check


# ─── Collector ───────────────────────────────────────────────────

def validate(
    payload: Mapping[str, Any], rules: tuple[FieldRule, ...],
) -> list[str]:
    """Run every rule; return failure messages in declaration order."""
    return [rule.message for rule in rules if not rule.check(payload)]


def require_valid(
    payload: Mapping[str, Any], rules: tuple[FieldRule, ...],
) -> None:
    """Raise BadRequestError carrying every failure, if any."""
    errors = validate(payload, rules)
    if errors:
        raise BadRequestError(errors)


# ─── Resource Rules ──────────────────────────────────────────────

TWEET_MESSAGE_MAX_LENGTH = 280

TWEET_RULES: tuple[FieldRule, ...] = (
    FieldRule("message", exists, "Tweet message can't be empty."),
    FieldRule(
        "message", max_length(TWEET_MESSAGE_MAX_LENGTH),
        f"Tweet message can't be longer than {TWEET_MESSAGE_MAX_LENGTH}",
    ),
)

USER_RULES: tuple[FieldRule, ...] = (
    FieldRule("username", exists, "Please provide a username"),
    FieldRule("email", all_of(exists, is_email), "Please provide a valid email."),
    FieldRule("password", exists, "Please provide a password."),
)
