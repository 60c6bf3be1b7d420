# drtodo

Keep one Markdown TODO file per day. Each new day's file starts with the
unfinished tasks from the most recent previous day, so nothing gets lost.

## Installation

```
pip install .
```

## Usage

Lists are stored as `YYYY-MM-DD.md` files in a home directory. It defaults to
`$DRTODO_HOME`, or `~/.todos` when that is unset, and can be overridden with
`--home`. The home directory itself is created if it does not exist (its
parent must already exist). Every file in it must be named as a date with a
single `.`; any other file name is reported as an error.

Create today's list, carrying over open tasks, print its path and open it in
`$EDITOR`:

```
dr-todo new
```

Create it without opening the editor:

```
dr-todo new --skip-edit
```

`new` fails if today's file already exists.

Open the latest list in `$EDITOR` (this is also what runs with no command):

```
dr-todo edit
dr-todo
```

Open an earlier list by counting backwards from the latest (`0` is the
latest; offsets past the oldest list open the oldest; negative offsets are
rejected):

```
dr-todo edit 2
```

Use a different home directory:

```
dr-todo --home /path/to/todos new
```

On failure the command prints the error and exits with status 1. Tasks are
added, changed and checked off by editing the file in `$EDITOR`; there are no
commands for changing tasks directly.

## File format

```
# Work
- [ ] Write report
- [x] Send invoices

## Follow-ups
- [ ] Call back about the schedule
```

Headings nest by their number of `#` characters; when a list is written out,
skipped levels are closed up (a `###` directly under a `#` becomes `##`).
Blank lines are ignored. Every other line must be a task starting with
`- [ ]` or `- [x]`; spaces inside the checkbox are ignored. A last line that
does not end with a newline is not read. Completed tasks are dropped when a
list is carried over to a new day.

## Library use

```python
import io
from drtodo.core import parse_list

todo_list = parse_list("today", io.StringIO("# Work\n- [] Write report\n"))
out = io.StringIO()
todo_list.dump(out, omit_completed=True)
print(out.getvalue())
```

`drtodo.core` also provides `parse_todo(list_id, text)`, which returns a
`Todo` or raises `TodoParseError`; `get_sorted_list_paths(path)`, which lists
the dated files in a directory newest first; `get_latest_list(path)`, which
loads the newest list and raises `ListNotFoundError` when there is none; and
`DrTodo(home).create_today()`, which writes today's file and returns its path.
`parse_date` and `format_date` convert between dates and `YYYY-MM-DD` text.

## Running the tests

```
pip install .[test]
pytest
```