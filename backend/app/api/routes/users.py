"""User Registration — validate, hash, persist, issue a token.

Invariants:
    - The raw password is hashed before it touches storage and is never echoed
    - bcrypt hashing runs in the threadpool, off the event loop
    - Response carries only the new user's id and the bearer token
"""

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from app.core.repository_protocols import UserRepository
from app.core.validation import USER_RULES, require_valid
from app.infrastructure.auth import get_user_token, hash_password
from app.api.dependencies import get_user_repository
from app.schemas.user import UserCreate, UserCreatedResponse, UserRef

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate | None = None,
    users: UserRepository = Depends(get_user_repository),
):
    """Register a user and return a token for it."""
    payload = body.model_dump() if body else {}
    require_valid(payload, USER_RULES)
    hashed_password = await run_in_threadpool(
        hash_password, payload["password"],
    )
    user = await users.create(
        payload["username"], payload["email"], hashed_password,
    )
    return UserCreatedResponse(
        user=UserRef(id=user.id), token=get_user_token(user),
    )
