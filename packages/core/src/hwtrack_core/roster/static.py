"""StaticRoster — roster read from a YAML file.

File format::

    programs:
      Mathematics:
        - "21.Б01-мм, 21.Б02-мм"
    students:
      21.Б01-мм:
        - name: Ivan
          surname: Petrov
          middle_name: Sergeevich
          email: st000001@student.spbu.ru
"""

from __future__ import annotations

from pathlib import Path

import yaml

from hwtrack_core.roster.base import RosterProvider, split_group_titles
from hwtrack_core.roster.models import Student


class StaticRoster(RosterProvider):
    def __init__(self, programs: dict[str, list[str]] | None = None, students: dict[str, list[dict]] | None = None):
        # YAML reads unquoted names such as 101 as ints.
        self._programs = {str(k): [str(t) for t in v or []] for k, v in (programs or {}).items()}
        self._students = {str(k): v for k, v in (students or {}).items()}

    @classmethod
    def from_file(cls, path: str) -> StaticRoster:
        """Load a roster file; a missing file gives an empty roster."""
        p = Path(path)
        if not p.exists():
            return cls()
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        return cls(programs=data.get("programs"), students=data.get("students"))

    def list_programs(self) -> list[str]:
        return list(self._programs)

    def list_groups(self, program: str) -> list[str]:
        return split_group_titles(self._programs.get(program) or [])

    def list_students(self, group: str) -> list[Student]:
        return [
            Student(
                name=str(s.get("name", "")),
                surname=str(s.get("surname", "")),
                middle_name=str(s.get("middle_name", "")),
                email=str(s.get("email", "")),
            )
            for s in self._students.get(group) or []
        ]
