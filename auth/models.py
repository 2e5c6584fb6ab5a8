"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, near-zero logic). Mirrors the
approach in fleet/models.py -- dataclasses own domain shape; stores, services
and routes do the work.

Layer rule: no imports from api/ or fleet/.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Coarse-grained permission label carried in the token.

    The string values are what the database stores and what the token's
    Perfil / role claims carry.
    """

    ADMIN = "Adm"
    EDITOR = "Editor"

    @classmethod
    def parse(cls, value: object) -> Role:
        """Map a stored or submitted role onto the enum.

        Unknown values fall back to EDITOR, the least privileged role. Matching
        accepts the literal value ("Adm") and the member name ("ADMIN"),
        case-insensitively.
        """
        if isinstance(value, Role):
            return value
        text = str(value or "").strip().lower()
        for role in cls:
            if text in (role.value.lower(), role.name.lower()):
                return role
        return cls.EDITOR


@dataclass
class Administrator:
    """A user allowed to log in and manage vehicles.

    password is stored and compared as plaintext. There is no update or delete
    path for administrators once created.

    id is None before the record is written to the database.
    """

    email: str
    password: str
    role: Role = Role.EDITOR
    id: int | None = None


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a verified JWT."""

    email: str
    role: Role
