"""Roster data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Student:
    """A student found in an academic group."""

    name: str
    surname: str
    middle_name: str
    email: str

    @classmethod
    def from_display_name(cls, display_name: str, email: str) -> Student:
        """Split a directory display name ("Name Surname Middle") into its parts."""
        parts = display_name.split(" ")
        return cls(
            name=parts[0],
            surname=parts[1] if len(parts) > 1 else "",
            middle_name=parts[2] if len(parts) > 2 else "",
            email=email,
        )
