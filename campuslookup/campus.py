"""Campus department lists: parsing, de-duplication and lookup."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Sequence

_LEADING_NUMBER = re.compile(r"\d+")


@dataclass
class CampusServer:
    """A campus server and the distinct departments it hosts."""

    campus_id: int
    departments: list[str] = field(default_factory=list)

    def add_department(self, name: str) -> bool:
        """Add a department unless a case-insensitive duplicate exists.

        Trailing whitespace is trimmed from the name; leading whitespace is kept.
        Returns True when the department was added.
        """
        trimmed = name.rstrip() or name
        key = trimmed.lower()
        if any(existing.lower() == key for existing in self.departments):
            return False
        self.departments.append(trimmed)
        return True

    @property
    def department_count(self) -> int:
        return len(self.departments)


def parse_department_list(lines: Iterable[str]) -> list[CampusServer]:
    """Parse list lines: a line starting with a digit opens a campus, others
    hold ';'-separated department names for the current campus."""
    servers: list[CampusServer] = []
    current: CampusServer | None = None
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if line[:1] in string.digits and line:
            match = _LEADING_NUMBER.match(line)
            current = CampusServer(int(match.group()))
            servers.append(current)
            continue
        tokens = [token for token in line.split(";") if token]
        if not tokens:
            continue
        if current is None:
            raise ValueError(f"department listed before any campus id: {line!r}")
        for token in tokens:
            current.add_department(token)
    return servers


def load_department_list(path: str | PathLike[str]) -> list[CampusServer]:
    """Read and parse a department list file."""
    with open(path, encoding="utf-8") as handle:
        return parse_department_list(handle)


def find_campus_id(servers: Sequence[CampusServer], department: str) -> int | None:
    """Return the id of the first campus hosting the department (exact match)."""
    for server in servers:
        if department in server.departments:
            return server.campus_id
    return None


def format_summary(servers: Sequence[CampusServer]) -> str:
    """Describe how many campuses there are and their department counts."""
    lines = [f"Total number of Campus Servers:{len(servers)}"]
    lines.extend(
        f"Campus Server {server.campus_id} contains "
        f"{server.department_count} distinct departments"
        for server in servers
    )
    return "\n".join(lines) + "\n"