from minishell.history import (
    Direction,
    History,
    append_line,
    history_path,
    last_entry,
    read_lines,
)


def test_history_path_joins_home():
    assert history_path("/home/me") == "/home/me/minishell-history"


def test_append_and_read_round_trip(tmp_path):
    path = tmp_path / "hist"
    assert append_line(path, "ls -l")
    assert append_line(path, "pwd")
    assert read_lines(path) == ["ls -l", "pwd"]


def test_append_line_fails_in_missing_directory(tmp_path):
    assert append_line(tmp_path / "nope" / "hist", "x") is False


def test_read_lines_missing_file(tmp_path):
    assert read_lines(tmp_path / "absent") == []


def test_read_lines_keeps_blank_and_unterminated(tmp_path):
    path = tmp_path / "hist"
    path.write_text("a\n\nb", encoding="utf-8")
    assert read_lines(path) == ["a", "", "b"]


def test_last_entry(tmp_path):
    path = tmp_path / "hist"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert last_entry(path) == "second"
    assert last_entry(tmp_path / "absent") is None


def test_get_in_and_out_of_range():
    history = History(["a", "b"])
    assert history.get(1) == "b"
    assert history.get(2) is None
    assert history.get(-1) is None


def test_append_grows():
    history = History()
    history.append("x")
    assert len(history) == 1
    assert list(history) == ["x"]


def test_navigate_up_stops_at_oldest():
    history = History(["a", "b", "c"])
    assert [history.navigate(Direction.UP) for _ in range(4)] == ["c", "b", "a", "a"]
    assert history.navigate(Direction.DOWN) == "b"


def test_navigate_down_past_newest_is_empty():
    history = History(["a", "b"])
    history.navigate(Direction.UP)
    assert history.navigate(Direction.DOWN) == ""


def test_navigate_down_wraps():
    history = History(["a"])
    assert history.navigate(Direction.DOWN) == ""
    assert history.navigate(Direction.DOWN) == ""
    assert history.navigate(Direction.UP) == "a"


def test_navigate_empty_history():
    history = History()
    assert history.navigate(Direction.UP) == ""
    assert history.navigate(Direction.DOWN) == ""


def test_reset_returns_cursor_to_end():
    history = History(["a", "b"])
    history.navigate(Direction.UP)
    history.navigate(Direction.UP)
    history.reset()
    assert history.navigate(Direction.UP) == "b"


def test_record_writes_file_and_memory(tmp_path):
    history = History()
    history.record("echo hi", str(tmp_path))
    assert list(history) == ["echo hi"]
    assert read_lines(history_path(str(tmp_path))) == ["echo hi"]


def test_load_reads_file(tmp_path):
    path = tmp_path / "hist"
    append_line(path, "one")
    append_line(path, "two")
    history = History.load(path)
    assert list(history) == ["one", "two"]
    assert len(History.load(tmp_path / "absent")) == 0