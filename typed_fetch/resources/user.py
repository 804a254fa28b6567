"""User resource."""

from __future__ import annotations

from dataclasses import dataclass

from ..identifier import Identifier
from .base import Resource, ResourceSpec


class UserID(Identifier[int]):
    """Integer user key."""

    value_type = int


@dataclass(frozen=True)
class User(Resource[UserID], category="user"):
    """A user account.

    Attributes:
        id: User key.
        name: Display name.
    """

    ID = UserID

    id: UserID
    name: str


SPEC = ResourceSpec.of(User)
