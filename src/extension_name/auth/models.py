"""
extension_name.auth.models

Identity type shared by the Secured guard and privileged execution scopes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    subject: str
    roles: frozenset[str]

    @property
    def is_admin(self) -> bool:
        return "admin" in self.roles

    def has_roles(self, required: Iterable[str]) -> bool:
        """True for admins, otherwise only when every required role is held."""
        return self.is_admin or frozenset(required) <= self.roles
