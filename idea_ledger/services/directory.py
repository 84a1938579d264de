"""User directory interface used to resolve display names."""

from typing import Iterable, Protocol

from ..schemas import UserRef


class UserDirectory(Protocol):
    """Read-only lookup of users by id."""

    def get_user_by_id(self, user_id: int) -> UserRef | None: ...


class InMemoryUserDirectory:
    """Directory over a fixed list of users."""

    def __init__(self, users: Iterable[UserRef] = ()):
        self._users = {u.user_id: u for u in users}

    def get_user_by_id(self, user_id: int) -> UserRef | None:
        return self._users.get(user_id)


def resolve_display_name(
    directory: UserDirectory | None,
    user_id: int,
    given: str | None = None,
) -> str | None:
    """Caller-supplied name wins; otherwise ask the directory."""
    if given:
        return given
    if directory is None:
        return None
    user = directory.get_user_by_id(user_id)
    return user.name if user else None
