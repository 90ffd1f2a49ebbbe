import pytest

from corekit.output_stream import OutputStream
from corekit.print_stream import PrintStream


class Recorder(OutputStream):
    def __init__(self):
        self.data = bytearray()
        self.flushes = 0
        self.closed = False

    def write_byte(self, value):
        self.data.append(value)

    def flush(self):
        self.flushes += 1

    def close(self):
        self.closed = True


@pytest.fixture
def sink():
    return Recorder()


def test_print_int_writes_digits(sink):
    PrintStream(sink).print(42)
    assert bytes(sink.data) == b"42"


def test_print_negative_int(sink):
    PrintStream(sink).print(-7)
    assert bytes(sink.data) == b"-7"


def test_print_float_uses_six_decimals(sink):
    PrintStream(sink).print(1.5)
    assert bytes(sink.data) == b"1.500000"


def test_print_bool_writes_single_byte(sink):
    stream = PrintStream(sink)
    stream.print(True)
    stream.print(False)
    assert bytes(sink.data) == b"\x01\x00"


def test_print_text_and_char_list(sink):
    stream = PrintStream(sink)
    stream.print("ab")
    stream.print(["c", "d"])
    assert bytes(sink.data) == b"abcd"


def test_println_appends_newline(sink):
    PrintStream(sink).println("hi")
    assert bytes(sink.data) == b"hi\n"


def test_print_none_writes_nothing(sink):
    stream = PrintStream(sink)
    stream.print(None)
    assert sink.data == bytearray()


def test_println_none_writes_only_newline(sink):
    PrintStream(sink).println(None)
    assert bytes(sink.data) == b"\n"


def test_auto_flush_flushes_after_each_print(sink):
    stream = PrintStream(sink, auto_flush=True)
    stream.print("a")
    stream.print(3)
    assert sink.flushes == 2


def test_no_auto_flush_by_default(sink):
    PrintStream(sink).print("abc")
    assert sink.flushes == 0


def test_append_slice_returns_stream(sink):
    stream = PrintStream(sink)
    result = stream.append("hello", 1, 3)
    assert result is stream
    assert bytes(sink.data) == b"el"


def test_append_chained(sink):
    PrintStream(sink).append("x").append("yz")
    assert bytes(sink.data) == b"xyz"


def test_write_byte_rejects_out_of_range(sink):
    with pytest.raises(ValueError):
        PrintStream(sink).write_byte(256)


def test_write_without_target_raises():
    with pytest.raises(RuntimeError):
        PrintStream(None).write_byte(1)


def test_print_without_target_is_silent():
    stream = PrintStream(None, auto_flush=True)
    stream.print("x")
    stream.flush()
    stream.close()
    assert stream.print("y") is None


def test_flush_and_close_delegate(sink):
    stream = PrintStream(sink)
    stream.flush()
    stream.close()
    assert sink.flushes == 1
    assert sink.closed is True


def test_unprintable_type_raises(sink):
    with pytest.raises(TypeError):
        PrintStream(sink).print(object())