# core/identity.py
from dataclasses import dataclass, field
from typing import FrozenSet

from core.sa.models import User


@dataclass(frozen=True)
class Identity:
    """The acting principal, resolved by the caller before any service call."""
    id: int
    roles: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(id=user.id, roles=frozenset(role.name for role in user.roles))

    def has_role(self, role: str) -> bool:
        return role in self.roles
