"""Abstract roster interface.

Course administration asks a roster for study programs, the academic groups
of a program and the students of a group. Concrete providers either read a
local file or talk to university services; callers depend on RosterProvider
only, so tests can use StaticRoster without network access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hwtrack_core.roster.models import Student


class RosterProvider(ABC):
    @abstractmethod
    def list_programs(self) -> list[str]:
        """Return the names of all known study programs."""

    @abstractmethod
    def list_groups(self, program: str) -> list[str]:
        """Return the academic groups of a program, or [] for an unknown program."""

    @abstractmethod
    def list_students(self, group: str) -> list[Student]:
        """Return the students of an academic group, or [] if none are found."""

    def close(self) -> None:
        """Release any resources held by the provider.

        Default is a no-op so callers can always call close() safely.
        """


def split_group_titles(titles: list[str]) -> list[str]:
    """Flatten group titles into single group names.

    One title may list several groups separated by commas.
    """
    if not titles:
        return []
    return [group.strip() for group in ",".join(titles).split(",")]
