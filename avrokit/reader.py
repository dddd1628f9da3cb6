"""Buffered reader for the Avro binary encoding."""

from __future__ import annotations

import struct
from typing import BinaryIO, Optional

_MAX_INT_BUF_SIZE = 5
_MAX_LONG_BUF_SIZE = 10
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


class AvroError(Exception):
    """Raised when Avro data cannot be read."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"avro: {operation}: {message}")
        self.operation = operation
        self.message = message


class Reader:
    """Reads Avro binary primitives from a stream or from an in-memory buffer.

    A stream is any object with a ``read(n)`` method returning bytes; an empty
    result means end of data, ``None`` means no data is available yet.
    """

    def __init__(self, stream: Optional[BinaryIO], buf_size: int = 1024) -> None:
        if buf_size <= 0:
            raise ValueError("buf_size must be positive")
        self._stream = stream
        self._buf_size = buf_size
        self._buf = b""
        self._head = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "Reader":
        """Create a reader over a fixed block of bytes."""
        return cls(None).reset(data)

    def reset(self, data: bytes) -> "Reader":
        """Detach any stream and read from ``data`` instead."""
        self._stream = None
        self._buf = bytes(data)
        self._head = 0
        return self

    def _available(self) -> int:
        return len(self._buf) - self._head

    def _load_more(self, operation: str) -> None:
        if self._stream is None:
            self._head = len(self._buf)
            raise AvroError(operation, "unexpected end of data")
        while True:
            chunk = self._stream.read(self._buf_size)
            if chunk is None:
                continue
            if not chunk:
                raise AvroError(operation, "unexpected end of data")
            self._buf = bytes(chunk)
            self._head = 0
            return

    def _read_byte(self, operation: str) -> int:
        if not self._available():
            self._load_more(operation)
        b = self._buf[self._head]
        self._head += 1
        return b

    def _read_exact(self, size: int, operation: str) -> bytes:
        if size <= self._available():
            data = self._buf[self._head:self._head + size]
            self._head += size
            return data
        parts = []
        remaining = size
        while remaining:
            if not self._available():
                self._load_more(operation)
            take = min(remaining, self._available())
            parts.append(self._buf[self._head:self._head + take])
            self._head += take
            remaining -= take
        return b"".join(parts)

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        if size < 0:
            raise ValueError("size must not be negative")
        return self._read_exact(size, "read")

    def read_bool(self) -> bool:
        """Read a boolean encoded as a single 0 or 1 byte."""
        b = self._read_byte("read_bool")
        if b not in (0, 1):
            raise AvroError("read_bool", "invalid bool")
        return b == 1

    def _read_varint(self, max_bytes: int, mask: int, operation: str, what: str) -> int:
        val = 0
        for offset in range(max_bytes):
            b = self._read_byte(operation)
            val |= (b & 0x7F) << (7 * offset)
            if not b & 0x80:
                val &= mask
                return (val >> 1) ^ -(val & 1)
        raise AvroError(operation, f"{what} overflow")

    def read_int(self) -> int:
        """Read a zig-zag encoded 32-bit integer."""
        return self._read_varint(_MAX_INT_BUF_SIZE, _UINT32_MASK, "read_int", "int")

    def read_long(self) -> int:
        """Read a zig-zag encoded 64-bit integer."""
        return self._read_varint(_MAX_LONG_BUF_SIZE, _UINT64_MASK, "read_long", "long")

    def read_float(self) -> float:
        """Read a little-endian 32-bit float."""
        return _FLOAT.unpack(self._read_exact(4, "read_float"))[0]

    def read_double(self) -> float:
        """Read a little-endian 64-bit float."""
        return _DOUBLE.unpack(self._read_exact(8, "read_double"))[0]

    def read_bytes(self) -> bytes:
        """Read a length-prefixed byte string."""
        size = self.read_long()
        if size < 0:
            raise AvroError("read_bytes", "invalid bytes length")
        return self._read_exact(size, "read_bytes")

    def read_string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        size = self.read_long()
        if size < 0:
            raise AvroError("read_string", "invalid string length")
        data = self._read_exact(size, "read_string")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise AvroError("read_string", "invalid utf-8") from exc

    def read_block_header(self) -> tuple[int, int]:
        """Read an array or map block header as ``(count, byte_size)``.

        A negative count is followed by the block's size in bytes; otherwise
        the size is reported as 0.
        """
        length = self.read_long()
        if length < 0:
            return -length, self.read_long()
        return length, 0