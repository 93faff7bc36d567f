"""
Immutable
=========

An object whose state cannot change after construction. Operations that
would modify it return new values instead.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImmutablePerson:
    name: str

    def uppercased(self) -> str:
        """Return the name in upper case, leaving this person unchanged."""
        return ImmutablePerson(name=self.name.upper()).name
