import pytest

from corekit.file_streams import FileInputStream, FileOutputStream


def test_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    data = bytes(range(10))
    with FileOutputStream(path, False) as out:
        out.write(data)
    with FileInputStream(path) as src:
        buf = bytearray(len(data))
        assert src.readinto(buf) == len(data)
    assert bytes(buf) == data


def test_append_mode(tmp_path):
    path = tmp_path / "data.bin"
    with FileOutputStream(path, False) as out:
        out.write(b"ab")
    with FileOutputStream(path, True) as out:
        out.write(b"cd")
    with FileInputStream(path) as src:
        buf = bytearray(4)
        count = src.readinto(buf)
    assert count == 4
    assert bytes(buf) == b"abcd"


def test_truncate_mode(tmp_path):
    path = tmp_path / "data.bin"
    with FileOutputStream(path, False) as out:
        out.write(b"abcd")
    with FileOutputStream(path, False) as out:
        out.write(b"x")
    with FileInputStream(path) as src:
        assert src.available() == 1
        assert src.read() == ord("x")
        assert src.read() == -1


def test_write_byte_and_slice(tmp_path):
    path = tmp_path / "data.bin"
    with FileOutputStream(path) as out:
        out.write_byte(ord("z"))
        out.write(b"hello", 1, 2)
    assert path.read_bytes() == b"zel"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileInputStream(tmp_path / "missing")


def test_directory_rejected(tmp_path):
    with pytest.raises(IsADirectoryError):
        FileInputStream(tmp_path)
    with pytest.raises(IsADirectoryError):
        FileOutputStream(tmp_path)


def test_read_until_end(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"ab")
    with FileInputStream(path) as src:
        assert [src.read(), src.read(), src.read()] == [ord("a"), ord("b"), -1]


def test_readinto_offset(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"xy")
    buf = bytearray(4)
    with FileInputStream(path) as src:
        count = src.readinto(buf, 1, 3)
    assert count == 2
    assert bytes(buf) == b"\0xy\0"


def test_readinto_invalid(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"xy")
    with FileInputStream(path) as src:
        with pytest.raises(ValueError):
            src.readinto(bytearray(2), 1, 2)


def test_skip_and_available(tmp_path):
    path = tmp_path / "data.bin"
    data = b"abcdef"
    path.write_bytes(data)
    with FileInputStream(path) as src:
        assert src.available() == len(data)
        assert src.skip(2) == 2
        assert src.available() == len(data) - 2
        assert src.read() == data[2]
        assert src.mark_supported() is False


def test_write_after_close(tmp_path):
    out = FileOutputStream(tmp_path / "data.bin")
    out.close()
    with pytest.raises(OSError):
        out.write_byte(1)
    with pytest.raises(OSError):
        out.flush()


def test_write_invalid_range(tmp_path):
    with FileOutputStream(tmp_path / "data.bin") as out:
        with pytest.raises(ValueError):
            out.write(b"ab", 3, 0)