import io
import os
from datetime import date, datetime, timedelta

import pytest

from drtodo.core import (
    DrTodo,
    ListNotFoundError,
    Todo,
    TodoList,
    TodoParseError,
    format_date,
    get_latest_list,
    get_sorted_list_paths,
    parse_date,
    parse_list,
    parse_todo,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("- [] Test TODO", Todo(list_id="", name="Test TODO", completed=False)),
        ("- [x] Test TODO", Todo(list_id="", name="Test TODO", completed=True)),
    ],
)
def test_parse_todo(text, expected):
    assert parse_todo("", text) == expected


@pytest.mark.parametrize(
    "text, message",
    [
        ("- Test TODO", "missing checkbox"),
        ("- [o] Test TODO", "invalid checkbox string '-[o]'"),
    ],
)
def test_parse_todo_errors(text, message):
    with pytest.raises(TodoParseError) as excinfo:
        parse_todo("", text)
    assert str(excinfo.value) == message


def test_todo_str():
    assert str(Todo("", "Do stuff", False)) == "- [ ] Do stuff"
    assert str(Todo("", "Do stuff", True)) == "- [x] Do stuff"


VALID_LIST = """
# Test List
- [] Uncategorized

## Sublist
- [] Sublist todo
- [x] Completed sublist todo

# Must Do
- [] Do stuff
- [x] Do a thing

### Skipping a depth
- [] This should get reduced to a depth of 2

# Stretch Goals
- [] Do a stretch
"""

VALID_EXPECTED = """# Test List
- [ ] Uncategorized

## Sublist
- [ ] Sublist todo

# Must Do
- [ ] Do stuff

## Skipping a depth
- [ ] This should get reduced to a depth of 2

# Stretch Goals
- [ ] Do a stretch
"""

INVALID_LIST = """
$ Must Do
- [] Do stuff
- [x] Do a thing

$ Stretch Goals
- [] Do stretch things
\t\t\t"""


def test_parse_list_valid():
    todo_list = parse_list(str(datetime.now()), io.StringIO(VALID_LIST))
    out = io.StringIO()
    todo_list.dump(out, True)
    assert out.getvalue() == VALID_EXPECTED


def test_parse_list_invalid():
    with pytest.raises(TodoParseError) as excinfo:
        parse_list(str(datetime.now()), io.StringIO(INVALID_LIST))
    assert str(excinfo.value) == "parsing list: parsing todo: missing checkbox"


def test_parse_list_keeps_name():
    todo_list = parse_list("2024-01-02", io.StringIO(VALID_LIST))
    assert todo_list.name == "2024-01-02"


def test_dump_keeps_completed_when_not_omitted():
    todo_list = parse_list("x", io.StringIO(VALID_LIST))
    out = io.StringIO()
    todo_list.dump(out, False)
    assert "- [x] Completed sublist todo\n" in out.getvalue()
    assert "- [x] Do a thing\n" in out.getvalue()


def test_parse_list_nested_ids():
    todo_list = parse_list("x", io.StringIO("# A\n## B\n- [] t\n"))
    assert todo_list.sublists == {"A:@>B": [Todo("A:@>B", "t", False)]}


def test_parse_list_ignores_unterminated_last_line():
    todo_list = parse_list("x", io.StringIO("# A\n- [] one\n- [] two"))
    assert todo_list.sublists == {"A": [Todo("A", "one", False)]}


def test_parse_list_empty():
    assert parse_list("x", io.StringIO("")).sublists == {}


def test_date_round_trip():
    day = date(2024, 3, 9)
    assert format_date(day) == "2024-03-09"
    assert parse_date(format_date(day)) == day


@pytest.mark.parametrize("text", ["2024-13-01", "2024-1-2", "hello", ""])
def test_parse_date_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_get_latest_list(tmp_path):
    now = date.today()
    today = format_date(now)
    for offset in range(3):
        (tmp_path / (format_date(now - timedelta(days=offset)) + ".md")).touch()

    todo_list = get_latest_list(str(tmp_path))
    assert todo_list.name == today


def test_get_latest_list_empty_dir(tmp_path):
    with pytest.raises(ListNotFoundError):
        get_latest_list(str(tmp_path))


def test_get_sorted_list_paths(tmp_path):
    for name in ["2024-01-02.md", "2024-03-01.md", "2023-12-31.txt"]:
        (tmp_path / name).touch()
    paths = get_sorted_list_paths(str(tmp_path))
    assert paths == [
        os.path.join(str(tmp_path), "2024-03-01.md"),
        os.path.join(str(tmp_path), "2024-01-02.md"),
        os.path.join(str(tmp_path), "2023-12-31.md"),
    ]


def test_get_sorted_list_paths_empty(tmp_path):
    assert get_sorted_list_paths(str(tmp_path)) == []


def test_get_sorted_list_paths_rejects_many_dots(tmp_path):
    (tmp_path / "2024-01-02.backup.md").touch()
    with pytest.raises(ValueError, match="single '.'"):
        get_sorted_list_paths(str(tmp_path))


def test_get_sorted_list_paths_rejects_bad_date(tmp_path):
    (tmp_path / "notes.md").touch()
    with pytest.raises(ValueError, match="parsing date"):
        get_sorted_list_paths(str(tmp_path))


def test_get_sorted_list_paths_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_sorted_list_paths(str(tmp_path / "missing"))


def test_create_today_carries_over(tmp_path):
    yesterday = format_date(date.today() - timedelta(days=1))
    (tmp_path / (yesterday + ".md")).write_text(VALID_LIST, encoding="utf-8")

    path = DrTodo(str(tmp_path)).create_today()

    assert path == os.path.join(str(tmp_path), format_date(date.today()) + ".md")
    with open(path, encoding="utf-8") as stream:
        assert stream.read() == VALID_EXPECTED


def test_create_today_empty_home(tmp_path):
    path = DrTodo(str(tmp_path)).create_today()
    with open(path, encoding="utf-8") as stream:
        assert stream.read() == ""


def test_create_today_twice_fails(tmp_path):
    dr = DrTodo(str(tmp_path))
    dr.create_today()
    with pytest.raises(FileExistsError, match="already exists"):
        dr.create_today()


def test_todolist_defaults():
    todo_list = TodoList()
    out = io.StringIO()
    todo_list.dump(out, True)
    assert out.getvalue() == ""