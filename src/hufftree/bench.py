"""Size comparison of the Huffman codec against general-purpose byte codecs."""

from __future__ import annotations

import time
import zlib
from dataclasses import asdict, dataclass
from typing import Any

from hufftree.core.codec_huffman import compress_bytes

try:
    import zstandard as zstd  # type: ignore
except Exception:  # pragma: no cover
    zstd = None

ZLIB_LEVEL = 9
ZSTD_LEVEL = 19


@dataclass(frozen=True)
class BenchRow:
    codec: str
    in_size: int
    out_size: int
    seconds: float

    @property
    def ratio(self) -> float:
        if self.in_size == 0:
            return 0.0
        return self.out_size / self.in_size

    def to_json(self) -> dict[str, Any]:
        d = asdict(self)
        d["ratio"] = round(self.ratio, 6)
        return d


def _require_zstd() -> None:
    if zstd is None:
        raise RuntimeError(
            "Module 'zstandard' not available. Install with: python3 -m pip install zstandard"
        )


def _zstd_compress(data: bytes) -> bytes:
    _require_zstd()
    return zstd.ZstdCompressor(level=ZSTD_LEVEL).compress(data)


def _zlib_compress(data: bytes) -> bytes:
    return zlib.compress(data, ZLIB_LEVEL)


CODECS = (
    ("huffman", compress_bytes),
    ("zlib", _zlib_compress),
    ("zstd", _zstd_compress),
)


def bench_bytes(data: bytes) -> list[BenchRow]:
    rows: list[BenchRow] = []
    for name, fn in CODECS:
        t0 = time.perf_counter()
        out = fn(bytes(data))
        rows.append(
            BenchRow(codec=name, in_size=len(data), out_size=len(out), seconds=time.perf_counter() - t0)
        )
    return rows
