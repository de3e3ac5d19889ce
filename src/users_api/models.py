"""User record type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user record as stored and served.

    Frozen: the store swaps in a new instance on update, so a record handed
    out to a caller never changes underneath it.
    """

    id: str
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: dict) -> User:
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
        )
