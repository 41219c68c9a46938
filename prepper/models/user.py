"""User model definitions."""

from typing import Literal

from pydantic import BaseModel


Role = Literal['user', 'admin']


class User(BaseModel):
    """Represents a stored application user."""

    id: str
    name: str
    email: str
    password: str
    role: Role = 'user'
    createdAt: str


class UserSummary(BaseModel):
    """The public view of a user; never carries the password hash."""

    id: str
    name: str
    email: str
    role: Role


class Claims(BaseModel):
    """Identity carried inside an access token."""

    id: str
    email: str
    role: Role
