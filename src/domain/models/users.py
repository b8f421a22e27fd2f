"""User domain model."""

from __future__ import annotations

from pydantic import field_validator

from .resource import Resource


class User(Resource):
    """An account that can authenticate with a login and a password.

    password always holds the stored credential (a hash once the user went
    through a UserService).  permissions is an owned association: deleting
    the user removes them.  It is kept sorted and free of duplicates so that
    the value read back from storage equals the value written.
    """

    login: str
    password: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    permissions: tuple[str, ...] = ()

    @field_validator("permissions")
    @classmethod
    def _normalize_permissions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(sorted(set(value)))
