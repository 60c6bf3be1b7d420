"""Command line interface for creating and editing daily TODO lists."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from typing import Sequence

from drtodo.core import DrTodo, get_sorted_list_paths

_OFFSET_RE = re.compile(r"[+-]?[0-9]+")
_NO_EDITOR = "could not open list in $EDITOR because it isn't set"


def _default_home() -> str:
    home = os.environ.get("DRTODO_HOME", "")
    if not home:
        home = os.path.join(os.environ.get("HOME", ""), ".todos")
    return home


def _build_parser(default_home: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dr-todo",
        description=(
            "Simple creation of daily TODO files carrying over tasks from previous days"
        ),
    )
    parser.add_argument(
        "--home",
        default=default_home,
        help="sets home directory dr-todo should parse and save todos to "
        "(default: ~/.todos)",
    )
    commands = parser.add_subparsers(dest="command")

    new = commands.add_parser(
        "new",
        help="Create a new list for today",
        description="Prints an error if the list already exists.",
    )
    new.add_argument(
        "--skip-edit",
        action="store_true",
        help="Skips opening the TODO file with $EDITOR after creation",
    )

    edit = commands.add_parser(
        "edit",
        help="Opens a list in $EDITOR",
        description=(
            "By default opens the latest list. Previous lists can be opened by "
            "providing an offset which counts backwards"
        ),
    )
    edit.add_argument("offset", nargs="?", default="")
    return parser


def _open_editor(editor: str, path: str, failure: str) -> None:
    try:
        result = subprocess.run([editor, path], check=False)
    except OSError as exc:
        raise RuntimeError(f"{failure} '{editor}': {exc}") from exc
    if result.returncode != 0:
        raise RuntimeError(f"{failure} '{editor}': exit status {result.returncode}")


def _ensure_home(home: str) -> None:
    if not home:
        raise RuntimeError("no valid home path could be found")
    try:
        os.mkdir(home, 0o777)
    except FileExistsError:
        pass
    except OSError as exc:
        raise RuntimeError(f"creating dr-todo home directory '{home}': {exc}") from exc


def _handle_new(home: str, skip_edit: bool) -> None:
    try:
        path = DrTodo(home).create_today()
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"failed to create new list: {exc}") from exc

    print(f"{path} created ✅")

    if not skip_edit:
        editor = os.environ.get("EDITOR", "")
        if not editor:
            raise RuntimeError(_NO_EDITOR)
        _open_editor(editor, path, "failed to start editor")


def _handle_edit(home: str, offset_text: str) -> None:
    offset = 0
    if offset_text:
        if not _OFFSET_RE.fullmatch(offset_text) or int(offset_text) < 0:
            raise RuntimeError(
                f"provided offset is invalid, '{offset_text}' must be a positive integer"
            )
        offset = int(offset_text)

    try:
        paths = get_sorted_list_paths(home)
    except (OSError, ValueError) as exc:
        raise RuntimeError("could not find latest list") from exc

    if not paths:
        raise RuntimeError(f"no lists found in {home}")

    offset = min(offset, len(paths) - 1)

    editor = os.environ.get("EDITOR", "")
    if not editor:
        raise RuntimeError(_NO_EDITOR)
    _open_editor(editor, paths[offset], "could not start editor")


def run(argv: Sequence[str] | None = None) -> None:
    """Run the command line; raise RuntimeError on failure."""
    args = _build_parser(_default_home()).parse_args(
        sys.argv[1:] if argv is None else list(argv)
    )
    home = args.home
    _ensure_home(home)

    if args.command == "new":
        _handle_new(home, args.skip_edit)
    else:
        _handle_edit(home, getattr(args, "offset", "") or "")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: print any error and return the exit status."""
    try:
        run(argv)
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())