from __future__ import annotations

import io

import pytest

from hufftree.core.bitio import BitReader, BitWriter


def test_reader_msb_first_and_eof() -> None:
    r = BitReader.from_bytes(b"\xa5\x0f")
    assert r.read_bits(1) == 1
    assert r.read_bits(3) == 0b010
    assert r.read_bits(8) == 0x50
    assert r.read_bits(4) == 0xF
    assert r.bits_read == 16
    assert r.read_bits(1) is None


def test_reader_not_enough_bits_is_eof() -> None:
    r = BitReader.from_bytes(b"\xff")
    assert r.read_bits(9) is None


def test_reader_reset_rewinds_to_start_offset() -> None:
    fp = io.BytesIO(b"XYab")
    fp.seek(2)
    r = BitReader(fp, chunk_size=1)
    assert r.read_bits(8) == ord("a")
    assert r.read_bits(8) == ord("b")
    assert r.read_bits(8) is None

    r.reset()
    assert r.bits_read == 0
    assert r.read_bits(16) == (ord("a") << 8) | ord("b")


def test_writer_pads_last_byte_with_zeros() -> None:
    buf = io.BytesIO()
    w = BitWriter(buf, closefd=False)
    w.write_bits(3, 0b101)
    w.write_bits(9, 0x100)
    assert w.bits_written == 12
    w.close()
    assert buf.getvalue() == bytes([0b10110000, 0b00000000])


def test_writer_close_is_idempotent_and_closes_file() -> None:
    buf = io.BytesIO()
    w = BitWriter(buf)
    w.write_bits(8, 0x41)
    w.close()
    w.close()
    assert w.closed
    assert buf.closed
    with pytest.raises(ValueError, match="closed"):
        w.write_bits(1, 1)


def test_writer_rejects_value_wider_than_width() -> None:
    w = BitWriter(io.BytesIO())
    with pytest.raises(ValueError, match="does not fit"):
        w.write_bits(3, 8)
    with pytest.raises(ValueError, match="width"):
        w.write_bits(-1, 0)


def test_writer_reader_long_fields() -> None:
    buf = io.BytesIO()
    with BitWriter(buf, closefd=False, chunk_size=2) as w:
        w.write_bits(32, 0xFACE8201)
        w.write_bits(1, 1)
        w.write_bits(9, 256)

    r = BitReader.from_bytes(buf.getvalue())
    assert r.read_bits(32) == 0xFACE8201
    assert r.read_bits(1) == 1
    assert r.read_bits(9) == 256
