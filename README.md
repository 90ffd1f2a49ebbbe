# corekit

Small, dependency-free building blocks for Python programs.

## What is in it

- `corekit.output_stream`: `OutputStream`, an abstract byte sink
  (`write_byte`, `write(data, offset, length)`, `flush`, `close`, usable in a
  `with` block), and `BufferedOutputStream`, which collects bytes in a
  fixed-size buffer (8192 bytes by default) in front of another stream.
  Its `close` closes the target without flushing; leaving a `with` block
  flushes first.
- `corekit.file_streams`: `FileInputStream` (`read` returns -1 at the end of
  the file, plus `readinto`, `skip`, `available`) and `FileOutputStream`,
  which truncates the file unless `append=True`.
- `corekit.byte_array_input`: `ByteArrayInputStream`, reading from a copy of
  in-memory bytes, with `mark` and `reset`.
- `corekit.char_array_reader`: `CharArrayReader`, reading character codes
  from a string or a slice of it, with `mark` and `reset`.
- `corekit.filters`: `FilterInputStream` and `FilterReader`, which forward
  every call to a wrapped stream or reader.
- `corekit.print_stream`: `PrintStream`, which writes values to an
  `OutputStream`: booleans as a single byte 1 or 0, integers as decimal
  digits, floats with six decimals and text as UTF-8. With `auto_flush` the
  target is flushed after every print or append.
- `corekit.console`: `Console` for formatted output (`format`, `printf`) and
  prompts (`read_line`) on standard or given text streams, and `Scanner`,
  which reads an int, a double, a token, a line or a list of delimited
  fields, one line per value.
- `corekit.buffers`: `ByteBuffer`, `DoubleBuffer`, `FloatBuffer` and
  `ShortBuffer`, each with a position, a limit and a capacity. Going past the
  limit raises `BufferOverflowError` or `BufferUnderflowError`
  (`ShortBuffer` raises `IndexError`).
- `corekit.timer`: `TimerManager`, which calls a task every `interval_ms`
  milliseconds on a background thread from the moment it is created until
  `stop()`.
- Value types: `BigDecimal` (100 significant digits) in `corekit.bigdecimal`;
  `Boolean`, `Character`, `Float` (32-bit) and `Long` (64-bit, wrapping) in
  `corekit.boxes`; `Short` (16-bit, wrapping) in `corekit.short_int`;
  `Uuid` in `corekit.uuid_value`; `Date` (milliseconds since the epoch, read
  in local time) in `corekit.date`.
- `corekit.arrays`: `as_list`, `binary_search`, `copy_of`, `copy_of_range`,
  `equals`, `fill`, `sort`, `to_string` and `type_name`.
- `corekit.containers`: `generate_list`, `generate_deque`, `generate_array`,
  `generate_set`, `generate_multiset`, `generate_map` and
  `generate_multimap`, drawing uniform random numbers from a range, with an
  optional `random.Random` for repeatable results.
- `corekit.json_serializer`: the `JsonSerializable` base class,
  `save_to_json_file`, `load_from_json_file`, the `get_*_or_default` readers
  and `serialize_field`.
- Networking: `DatagramPacket` and `DatagramSocket` (IPv4 UDP) in
  `corekit.datagram`; `InetAddress` and `InetSocketAddress` in `corekit.inet`.

## What it does not do

There are no character writer classes: text goes out through `PrintStream`
or as encoded bytes through an `OutputStream`. There is no lock class and no
task wrapper; use `threading` for those. The package has no command-line
program.

## Installation

```
pip install corekit
```

## Examples

```python
from corekit.buffers import ByteBuffer

buf = ByteBuffer(4)
buf.put(b"\x01\x02")
buf.rewind()
print(buf.get(2))   # b'\x01\x02'
```

```python
import io
from corekit.console import Scanner

scanner = Scanner(io.StringIO("42\n3.5\n"))
print(scanner.next_int())     # 42
print(scanner.next_double())  # 3.5
```

```python
from corekit.byte_array_input import ByteArrayInputStream

stream = ByteArrayInputStream(b"abc")
print(stream.read())       # 97
print(stream.available())  # 2
```

```python
from corekit.bigdecimal import BigDecimal
from corekit.boxes import Long

print(BigDecimal("0.1") + BigDecimal("0.2"))   # 0.3
print(Long(Long.MAX_VALUE) + Long(1))          # -9223372036854775808
```

```python
from corekit.uuid_value import Uuid

u = Uuid.from_string("123e4567-e89b-12d3-a456-426614174000")
print(str(u))   # 123e4567-e89b-12d3-a456-426614174000
```

## Running the tests

```
pip install corekit[test]
pytest
```