"""UniversityRoster — programs and groups from the timetable, students from LDAP.

The timetable is scraped lazily on first use and kept for the lifetime of
the provider; there is no refresh.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from hwtrack_core.roster.base import RosterProvider, split_group_titles
from hwtrack_core.roster.timetable import fetch_programs_groups

if TYPE_CHECKING:
    from hwtrack_core.roster.directory import StudentDirectory
    from hwtrack_core.roster.models import Student


class UniversityRoster(RosterProvider):
    def __init__(self, timetable_url: str, directory: StudentDirectory, timeout: float = 30.0):
        self._timetable_url = timetable_url
        self._directory = directory
        self._timeout = timeout

    @cached_property
    def _programs_groups(self) -> dict[str, list[str]]:
        return fetch_programs_groups(self._timetable_url, timeout=self._timeout)

    def list_programs(self) -> list[str]:
        return list(self._programs_groups)

    def list_groups(self, program: str) -> list[str]:
        return split_group_titles(self._programs_groups.get(program) or [])

    def list_students(self, group: str) -> list[Student]:
        return self._directory.find_students(group)
