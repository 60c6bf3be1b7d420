"""Daily TODO lists stored as dated Markdown files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Iterator, TextIO

DATE_FORMAT = "%Y-%m-%d"
LIST_SEPARATOR = ":@>"
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class ListNotFoundError(LookupError):
    """Raised when a directory holds no TODO lists."""

    def __init__(self, message: str = "list not found") -> None:
        super().__init__(message)


class TodoParseError(ValueError):
    """Raised when a TODO line or list cannot be parsed."""


def parse_date(text: str) -> date:
    """Parse a date written as YYYY-MM-DD."""
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"invalid date '{text}', expected YYYY-MM-DD")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_date(date: date) -> str:
    """Format a date (or datetime) as YYYY-MM-DD."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


@dataclass
class Todo:
    """A single checklist entry belonging to a (sub)list."""

    list_id: str
    name: str
    completed: bool = False

    def __str__(self) -> str:
        checkbox = "- [x]" if self.completed else "- [ ]"
        return f"{checkbox} {self.name}"


def parse_todo(list_id: str, text: str) -> Todo:
    """Parse a line such as ``- [ ] task`` or ``- [x] task``."""
    parts = text.split("]")
    if len(parts) < 2:
        raise TodoParseError("missing checkbox")

    checkbox = (parts[0] + "]").replace(" ", "")
    if checkbox == "-[]":
        completed = False
    elif checkbox == "-[x]":
        completed = True
    else:
        raise TodoParseError(f"invalid checkbox string '{checkbox}'")

    return Todo(list_id=list_id, name=parts[1].strip(" \n"), completed=completed)


@dataclass
class TodoList:
    """A named collection of sublists, keyed by their heading path."""

    name: str = ""
    sublists: dict[str, list[Todo]] = field(default_factory=dict)

    def dump(self, stream: TextIO, omit_completed: bool) -> None:
        """Write the list as Markdown headings followed by checkboxes."""
        first = True
        for list_id, todos in self.sublists.items():
            parts = list_id.split(LIST_SEPARATOR)
            if not first:
                stream.write("\n")
            first = False
            stream.write(f"{'#' * len(parts)} {parts[-1]}\n")
            for todo in todos:
                if not omit_completed or not todo.completed:
                    stream.write(f"{todo}\n")


def _complete_lines(stream: Iterable[str]) -> Iterator[str]:
    # A trailing line without a newline terminator is not part of the list.
    for line in stream:
        if line.endswith("\n"):
            yield line


def _header_with_depth(line: str) -> tuple[str, int]:
    depth = len(line) - len(line.lstrip("#"))
    return line.strip(" #\n"), depth


def _parse_sublists(stream: Iterable[str]) -> dict[str, list[Todo]]:
    stack: list[tuple[str, int]] = []
    sublists: dict[str, list[Todo]] = {}

    for line in _complete_lines(stream):
        if line.startswith("\n"):
            continue

        if line.startswith("#"):
            top_depth = stack[-1][1] if stack else 0
            entry = _header_with_depth(line)
            depth = entry[1]
            if depth > top_depth:
                stack.append(entry)
            elif depth == top_depth:
                stack[-1] = entry
            else:
                while stack and stack[-1][1] >= depth:
                    stack.pop()
                stack.append(entry)
            continue

        list_id = LIST_SEPARATOR.join(name for name, _ in stack)
        try:
            todo = parse_todo(list_id, line)
        except TodoParseError as exc:
            raise TodoParseError(f"parsing todo: {exc}") from exc
        sublists.setdefault(list_id, []).append(todo)

    return sublists


def parse_list(name: str, stream: Iterable[str]) -> TodoList:
    """Parse a Markdown TODO list read from a text stream."""
    try:
        sublists = _parse_sublists(stream)
    except TodoParseError as exc:
        raise TodoParseError(f"parsing list: {exc}") from exc
    return TodoList(name=name, sublists=sublists)


def get_sorted_list_paths(path: str) -> list[str]:
    """Return the list files in ``path``, newest date first."""
    dates = []
    for entry in sorted(os.listdir(path)):
        parts = entry.split(".")
        if len(parts) != 2:
            raise ValueError("file names can only contain a single '.'")
        try:
            dates.append(parse_date(parts[0]))
        except ValueError as exc:
            raise ValueError(f"parsing date: {exc}") from exc

    dates.sort(reverse=True)
    return [os.path.join(path, format_date(day) + ".md") for day in dates]


def get_latest_list(path: str) -> TodoList:
    """Parse the most recent list stored in ``path``."""
    paths = get_sorted_list_paths(path)
    if not paths:
        raise ListNotFoundError()

    latest = paths[0]
    name = os.path.splitext(os.path.basename(latest))[0]
    with open(latest, encoding="utf-8") as stream:
        return parse_list(name, stream)


@dataclass(frozen=True)
class DrTodo:
    """Manages daily TODO files stored in a home directory."""

    home: str

    def create_today(self) -> str:
        """Create today's list, carrying over unfinished items; return its path."""
        today = format_date(date.today())
        fname = today + ".md"
        path = os.path.join(self.home, fname)

        try:
            os.stat(path)
        except FileNotFoundError:
            pass
        else:
            raise FileExistsError(f"file '{fname}' already exists")

        try:
            latest = get_latest_list(self.home)
        except ListNotFoundError:
            latest = TodoList()

        latest.name = f"TODO {today}"
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            latest.dump(stream, True)

        return path