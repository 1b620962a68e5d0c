"""User Schemas — registration body and response.

Invariants:
    - UserCreate fields are optional at the type level (rules report absences)
    - UserCreatedResponse never carries the password or its hash
"""

from pydantic import BaseModel


class UserCreate(BaseModel):
    """Body of POST /users."""
    username: str | None = None
    email: str | None = None
    password: str | None = None


class UserRef(BaseModel):
    id: int


class UserCreatedResponse(BaseModel):
    user: UserRef
    token: str
