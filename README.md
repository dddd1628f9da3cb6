# avrokit

A small, dependency-free reader for primitive values in the Avro binary
encoding.

`avrokit.reader.Reader` pulls bytes from a binary stream, or reads from bytes
already in memory, and decodes Avro primitives from them.

## Installation

```
pip install avrokit
```

## Usage

Reading from a stream:

```python
import io
from avrokit.reader import Reader

reader = Reader(io.BytesIO(b"\x36\x06foo"), 10)
reader.read_long()    # 27
reader.read_string()  # "foo"
```

The second argument is the number of bytes asked of the stream at a time
(default 1024; it must be positive, otherwise `ValueError` is raised). The
stream can be any object with a `read(n)` method returning bytes: an empty
result means the end of the data, and `None` means no data is available yet,
in which case the reader asks again.

Reading from bytes already in memory:

```python
from avrokit.reader import Reader

reader = Reader.from_bytes(b"\x01")
reader.read_bool()    # True

reader.reset(b"\x80\x01")
reader.read_int()     # 64
```

`reset(data)` detaches any stream, makes the reader read from `data` from the
start, and returns the reader itself.

### Available reads

| Method                | Avro type           | Returns                  |
|-----------------------|---------------------|--------------------------|
| `read_bool()`         | boolean             | `bool`                   |
| `read_int()`          | int (zig-zag, 32)   | `int`                    |
| `read_long()`         | long (zig-zag, 64)  | `int`                    |
| `read_float()`        | float (LE, 32-bit)  | `float`                  |
| `read_double()`       | double (LE, 64-bit) | `float`                  |
| `read_bytes()`        | bytes               | `bytes`                  |
| `read_string()`       | string (UTF-8)      | `str`                    |
| `read(size)`          | raw bytes           | `bytes`                  |
| `read_block_header()` | array/map block     | `(count, size_in_bytes)` |

`read_block_header()` returns the item count of the block and, for blocks
written with a negative count, the byte size that follows it, otherwise 0.

### Errors

Failures in the data raise `avrokit.reader.AvroError`, whose message has the
form `avro: <operation>: <detail>` and which keeps both parts as its
`operation` and `message` attributes. It is raised when the input ends too
soon, a boolean byte is neither 0 nor 1, a variable-length integer runs past
5 bytes (int) or 10 bytes (long), a bytes or string length is negative, or a
string is not valid UTF-8.

A negative `size` passed to `read()` raises `ValueError`.

## What this package does not do

It reads single primitive values only. It has no schema parsing, no writer or
encoder, no decoding of whole records, arrays, maps or unions, and no support
for Avro object container files.

## Running the tests

```
pip install -e ".[test]"
pytest
```