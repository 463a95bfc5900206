import io
import sys

import pytest

from crux import stdio
from crux.values import CruxError, ErrorType, Result


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return feed


def test_format_nested_collection_quotes_strings():
    assert stdio.format_for_print([1, "a", None, True]) == '[1, "a", nil, true]'


def test_format_float_uses_fixed_notation():
    assert stdio.format_for_print(1.5) == "%f" % 1.5


def test_format_table():
    assert stdio.format_for_print({"k": "v"}) == '{"k":"v"}'


def test_format_plain_string_unquoted():
    assert stdio.format_for_print("hello") == "hello"


def test_format_err_result():
    result = Result.err(CruxError("boom", ErrorType.RUNTIME))
    assert stdio.format_for_print(result) == "Err<boom>"


def test_println_writes_newline(capsys):
    stdio.println("hello")
    assert capsys.readouterr().out == "hello\n"


def test_print_has_no_newline(capsys):
    stdio.print_(42)
    assert capsys.readouterr().out == "42"


def test_print_to_stderr(capsys):
    result = stdio.print_to("stderr", "oops")
    assert result.value is True
    assert capsys.readouterr().err == "oops"


def test_print_to_invalid_channel():
    result = stdio.print_to("nowhere", "x")
    assert result.error.type is ErrorType.VALUE


def test_print_to_requires_strings():
    result = stdio.print_to("stdout", 3)
    assert result.error.type is ErrorType.TYPE


def test_scan_reads_char_and_drops_line(stdin):
    stdin("abc\ndef\n")
    assert stdio.scan().value == "a"
    assert stdio.scanln().value == "def"


def test_scan_at_eof(stdin):
    stdin("")
    result = stdio.scan()
    assert not result.is_ok
    assert result.error.type is ErrorType.IO


def test_scanln_strips_newline(stdin):
    stdin("line one\nline two\n")
    assert stdio.scanln().value == "line one"
    assert stdio.scanln().value == "line two"


def test_scanln_from_stdin(stdin):
    stdin("first\n")
    assert stdio.scanln_from("stdin").value == "first"


def test_scan_from_bad_channel_type():
    assert stdio.scan_from(5).error.type is ErrorType.TYPE


def test_nscan_stops_at_count_and_discards(stdin):
    stdin("hello\nworld\n")
    assert stdio.nscan(2).value == "he"
    assert stdio.scanln().value == "world"


def test_nscan_stops_at_newline(stdin):
    stdin("hi\nrest\n")
    assert stdio.nscan(10).value == "hi\n"
    assert stdio.scanln().value == "rest"


def test_nscan_rejects_non_positive():
    assert stdio.nscan(0).error.type is ErrorType.VALUE


def test_nscan_rejects_non_int():
    assert stdio.nscan("3").error.type is ErrorType.TYPE


def test_nscan_eof_is_io_error(stdin):
    stdin("ab")
    assert stdio.nscan(5).error.type is ErrorType.IO


def test_nscan_from_checks_count_type():
    result = stdio.nscan_from("stdin", 1.5)
    assert result.error.message == "<char_count> must be of type 'int'."


def test_file_write_then_read_all(tmp_path):
    target = tmp_path / "data.txt"
    writer = stdio.open_file(str(target), "w").value
    assert writer.write("abc").is_ok
    assert writer.writeln("def").is_ok
    assert writer.position == len("abc") + len("def\n")
    assert writer.close().is_ok
    reader = stdio.open_file(str(target), "r").value
    assert reader.read_all().value == "abcdef\n"


def test_file_readln_lines(tmp_path):
    target = tmp_path / "lines.txt"
    target.write_text("one\ntwo\n")
    handle = stdio.open_file("lines.txt", "r", str(tmp_path)).value
    assert handle.readln().value == "one"
    assert handle.readln().value == "two"
    assert handle.readln().value == ""


def test_read_from_write_only_file_fails(tmp_path):
    handle = stdio.open_file(str(tmp_path / "w.txt"), "w").value
    result = handle.readln()
    assert result.error.message == "File is not readable."


def test_write_to_read_only_file_fails(tmp_path):
    target = tmp_path / "r.txt"
    target.write_text("x")
    handle = stdio.open_file(str(target), "r").value
    assert handle.write("y").error.message == "File is not writable."


def test_closed_file_reports_not_open(tmp_path):
    handle = stdio.open_file(str(tmp_path / "c.txt"), "w").value
    handle.close()
    assert handle.close().error.message == "File is not open."
    assert handle.is_open is False


def test_write_requires_string(tmp_path):
    handle = stdio.open_file(str(tmp_path / "s.txt"), "w").value
    assert handle.write(5).error.type is ErrorType.IO


def test_open_missing_file(tmp_path):
    result = stdio.open_file(str(tmp_path / "missing.txt"), "r")
    assert result.error.message == "Failed to open file."


def test_open_file_type_checks():
    assert stdio.open_file(1, "r").error.type is ErrorType.IO
    assert stdio.open_file("x", None).error.type is ErrorType.IO