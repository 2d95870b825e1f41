import pytest

from vigil.buffer import Buffer


def test_from_file_none_is_empty():
    buf = Buffer.from_file(None)
    assert buf.file is None
    assert buf.lines == []
    assert len(buf) == 0


def test_from_file_reads_lines(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond\n\nfourth\n", encoding="utf-8")
    buf = Buffer.from_file(str(path))
    assert buf.file == str(path)
    assert buf.lines == ["first", "second", "", "fourth"]
    assert len(buf) == 4


def test_from_file_strips_carriage_returns(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\r\n")
    buf = Buffer.from_file(str(path))
    assert buf.lines == ["one", "two"]


def test_from_file_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert Buffer.from_file(str(path)).lines == []


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Buffer.from_file(str(tmp_path / "absent.txt"))


def test_get_in_and_out_of_range():
    buf = Buffer(lines=["alpha", "beta"])
    assert buf.get(0) == "alpha"
    assert buf.get(1) == "beta"
    assert buf.get(2) is None
    assert buf.get(-1) is None


def test_insert_in_middle():
    buf = Buffer(lines=["abc"])
    buf.insert(1, 0, "X")
    line = buf.lines[0]
    assert line[:1] == "a"
    assert line[1] == "X"
    assert line[2:] == "bc"


def test_insert_at_start_and_end():
    buf = Buffer(lines=["abc"])
    buf.insert(0, 0, "S")
    assert buf.lines[0] == "Sabc"
    buf.insert(4, 0, "E")
    assert buf.lines[0] == "SabcE"


def test_insert_past_end_pads_with_spaces():
    buf = Buffer(lines=["ab"])
    buf.insert(5, 0, "Z")
    line = buf.lines[0]
    assert len(line) == 6
    assert line.startswith("ab")
    assert line[2:5].strip() == ""
    assert line.endswith("Z")


def test_insert_on_missing_line_appends_new_line():
    buf = Buffer(lines=["one"])
    buf.insert(3, 7, "q")
    assert len(buf) == 2
    assert buf.lines[0] == "one"
    assert buf.lines[1] == "   q"


def test_insert_into_empty_buffer_at_column_zero():
    buf = Buffer()
    buf.insert(0, 0, "x")
    assert buf.lines == ["x"]


def test_remove_character():
    buf = Buffer(lines=["hello"])
    buf.remove(1, 0)
    assert buf.lines[0] == "h" + "llo"


def test_remove_out_of_range_is_ignored():
    buf = Buffer(lines=["hi", ""])
    buf.remove(2, 0)
    buf.remove(0, 1)
    buf.remove(0, 5)
    assert buf.lines == ["hi", ""]


def test_insert_then_remove_round_trip():
    buf = Buffer(lines=["sample"])
    buf.insert(3, 0, "!")
    buf.remove(3, 0)
    assert buf.lines == ["sample"]


def test_remove_line():
    buf = Buffer(lines=["a", "b", "c"])
    buf.remove_line(1)
    assert buf.lines == ["a", "c"]
    buf.remove_line(10)
    assert buf.lines == ["a", "c"]


def test_save_joins_without_trailing_newline(tmp_path):
    path = tmp_path / "out.txt"
    buf = Buffer(file=str(path), lines=["x", "y"])
    buf.save()
    assert path.read_text(encoding="utf-8") == "x\ny"


def test_save_and_reload_round_trip(tmp_path):
    path = tmp_path / "round.txt"
    original = ["first line", "", "  indented", "last"]
    Buffer(file=str(path), lines=list(original)).save()
    assert Buffer.from_file(str(path)).lines == original


def test_save_without_file_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    buf = Buffer(lines=["data"])
    buf.save()
    assert buf.file is None
    assert buf.lines == ["data"]
    assert sorted(p.name for p in tmp_path.iterdir()) == []