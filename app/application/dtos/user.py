"""DTOs for the authenticated caller (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as resolved by the auth/session layer."""

    id: str
    role: str
    name: str | None = None
