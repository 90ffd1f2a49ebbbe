import io
import sys

import pytest

from corekit.console import Console, Scanner


def test_format_writes_text():
    out = io.StringIO()
    Console(writer=out).format("{} and {}", 1, "x")
    assert out.getvalue() == "1 and x"


def test_printf_matches_format():
    a, b = io.StringIO(), io.StringIO()
    Console(writer=a).format("v={}", 3.5)
    Console(writer=b).printf("v={}", 3.5)
    assert a.getvalue() == b.getvalue()


def test_read_line_with_prompt():
    out = io.StringIO()
    console = Console(io.StringIO("answer\nnext\n"), out)
    assert console.read_line("Name: ") == "answer"
    assert console.read_line() == "next"
    assert out.getvalue() == "Name: "


def test_read_line_at_end_of_input():
    assert Console(io.StringIO(""), io.StringIO()).read_line() == ""


def test_given_streams_are_returned():
    reader, writer = io.StringIO(), io.StringIO()
    console = Console(reader, writer)
    assert console.reader() is reader
    assert console.writer() is writer


def test_defaults_to_standard_streams():
    console = Console()
    assert console.writer() is sys.stdout
    assert console.reader() is sys.stdin


def test_next_int_reads_first_token_per_line():
    scanner = Scanner(io.StringIO("7 8\n9\n"))
    assert scanner.next_int() == 7
    assert scanner.next_int() == 9


def test_next_int_takes_leading_digits():
    assert Scanner(io.StringIO("12abc\n")).next_int() == 12


def test_next_int_invalid():
    with pytest.raises(ValueError):
        Scanner(io.StringIO("abc\n")).next_int()


def test_next_int_out_of_range():
    with pytest.raises(OverflowError):
        Scanner(io.StringIO("99999999999\n")).next_int()


def test_next_int_end_of_input():
    with pytest.raises(EOFError):
        Scanner(io.StringIO("")).next_int()


def test_next_double():
    scanner = Scanner(io.StringIO("2.5\n-1e3\n"))
    assert scanner.next_double() == 2.5
    assert scanner.next_double() == -1e3


def test_next_double_end_of_input():
    with pytest.raises(EOFError):
        Scanner(io.StringIO("")).next_double()


def test_next_token_empty_line_and_end():
    scanner = Scanner(io.StringIO("\n"))
    assert scanner.next_token() == ""
    assert scanner.next_token() is None


def test_next_line():
    scanner = Scanner(io.StringIO("first line\nsecond\n"))
    assert scanner.next_line() == "first line"
    assert scanner.next_line() == "second"


def test_next_tokens_keeps_empty_fields():
    scanner = Scanner(io.StringIO("a,b,,c\nx y\n"))
    assert scanner.next_tokens(",") == ["a", "b", "", "c"]
    assert scanner.next_tokens() == ["x", "y"]