from __future__ import annotations

import io
from typing import BinaryIO

CHUNK_SIZE_DEFAULT = 64 * 1024


class BitReader:
    """
    Bit-granular reader over a binary file object, MSB-first.

    read_bits() returns None at end-of-stream, including when fewer than
    `width` bits are left. reset() rewinds to the offset the reader was
    created at, so the same source can be scanned twice.
    """

    def __init__(
        self, fp: BinaryIO, *, chunk_size: int = CHUNK_SIZE_DEFAULT, closefd: bool = False
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {chunk_size}")
        self._fp = fp
        self._start = fp.tell()
        self._chunk_size = chunk_size
        self._closefd = closefd
        self._buf = b""
        self._pos = 0
        self._acc = 0
        self._nacc = 0
        self.bits_read = 0

    @classmethod
    def from_bytes(cls, data: bytes, **kwargs) -> "BitReader":
        return cls(io.BytesIO(bytes(data)), **kwargs)

    def _next_byte(self) -> int | None:
        if self._pos >= len(self._buf):
            self._buf = self._fp.read(self._chunk_size)
            self._pos = 0
            if not self._buf:
                return None
        b = self._buf[self._pos]
        self._pos += 1
        return b

    def read_bits(self, width: int) -> int | None:
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        while self._nacc < width:
            b = self._next_byte()
            if b is None:
                return None
            self._acc = (self._acc << 8) | b
            self._nacc += 8

        self._nacc -= width
        value = self._acc >> self._nacc
        self._acc &= (1 << self._nacc) - 1
        self.bits_read += width
        return value

    def reset(self) -> None:
        self._fp.seek(self._start)
        self._buf = b""
        self._pos = 0
        self._acc = 0
        self._nacc = 0
        self.bits_read = 0

    def close(self) -> None:
        if self._closefd:
            self._fp.close()

    def __enter__(self) -> "BitReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class BitWriter:
    """
    Bit-granular writer, MSB-first.

    close() pads the last partial byte with zero bits, writes everything out
    and closes the file object (unless closefd=False). bits_written does not
    count the padding.
    """

    def __init__(
        self, fp: BinaryIO, *, chunk_size: int = CHUNK_SIZE_DEFAULT, closefd: bool = True
    ):
        self._fp = fp
        self._chunk_size = chunk_size
        self._closefd = closefd
        self._out = bytearray()
        self._acc = 0
        self._nacc = 0
        self._closed = False
        self.bits_written = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def write_bits(self, width: int, value: int) -> None:
        if self._closed:
            raise ValueError("write_bits on a closed BitWriter")
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if not (0 <= value < (1 << width)):
            raise ValueError(f"value {value} does not fit in {width} bits")

        self._acc = (self._acc << width) | value
        self._nacc += width
        while self._nacc >= 8:
            self._nacc -= 8
            self._out.append((self._acc >> self._nacc) & 0xFF)
        self._acc &= (1 << self._nacc) - 1
        self.bits_written += width

        if len(self._out) >= self._chunk_size:
            self._fp.write(self._out)
            self._out.clear()

    def flush(self) -> None:
        """Write pending bytes; a partial byte is zero-padded to the boundary."""
        if self._nacc:
            self._out.append((self._acc << (8 - self._nacc)) & 0xFF)
            self._acc = 0
            self._nacc = 0
        if self._out:
            self._fp.write(self._out)
            self._out.clear()
        self._fp.flush()

    def close(self) -> None:
        if self._closed:
            return
        try:
            self.flush()
        finally:
            self._closed = True
            if self._closefd:
                self._fp.close()

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
