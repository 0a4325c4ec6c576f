from __future__ import annotations

from hufftree.bench import BenchRow, bench_bytes
from hufftree.core.codec_huffman import compress_bytes


def test_bench_rows_and_huffman_size() -> None:
    data = b"a" * 900 + b"b" * 90 + b"c" * 10
    rows = bench_bytes(data)

    assert [r.codec for r in rows] == ["huffman", "zlib", "zstd"]
    assert rows[0].out_size == len(compress_bytes(data))
    assert all(r.in_size == len(data) for r in rows)
    assert all(0 < r.out_size < len(data) for r in rows)


def test_bench_row_ratio_and_json() -> None:
    r = BenchRow(codec="huffman", in_size=200, out_size=50, seconds=0.5)
    assert r.ratio == 0.25
    assert r.to_json() == {
        "codec": "huffman",
        "in_size": 200,
        "out_size": 50,
        "seconds": 0.5,
        "ratio": 0.25,
    }
    assert BenchRow(codec="zlib", in_size=0, out_size=8, seconds=0.0).ratio == 0.0
