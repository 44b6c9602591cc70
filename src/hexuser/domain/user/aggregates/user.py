"""User entity."""

from typing import Optional


class User:
    """
    User entity.

    Holds identity and profile fields only. ``id`` is ``None`` for instances
    that were never persisted, e.g. the profile decoded from an update request
    whose id comes from the URL path.
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str,
        id: Optional[int] = None,
    ):
        self._id = id
        self._first_name = first_name
        self._last_name = last_name
        self._email = email

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def email(self) -> str:
        return self._email

    def overwrite_profile(self, first_name: str, last_name: str, email: str) -> None:
        """Replace all mutable fields; the id is never touched."""
        self._first_name = first_name
        self._last_name = last_name
        self._email = email

    @classmethod
    def create(cls, first_name: str, last_name: str, email: str) -> "User":
        return cls(first_name=first_name, last_name=last_name, email=email)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        first_name: str,
        last_name: str,
        email: str,
    ) -> "User":
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            email=email,
        )

    def _fields(self) -> tuple:
        return (self._id, self._first_name, self._last_name, self._email)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, first_name={self._first_name}, "
            f"last_name={self._last_name}, email={self._email})"
        )
