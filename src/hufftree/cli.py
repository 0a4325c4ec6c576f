"""hufftree CLI.

This is the stable CLI entrypoint (console-script: ``hufftree``).

Diagnostics:
  - ``-v`` / ``-vv`` ... raise the diagnostic level (stderr only, never the format).
  - ``HUFFTREE_DEBUG=<int>`` sets the default level.
  - ``--debug`` re-raises errors to show full stack traces.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from hufftree.errors import EXIT_FORMAT, EXIT_USAGE, HuffTreeError, UsageError

DEBUG_ENV = "HUFFTREE_DEBUG"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=None,
        help=f"Diagnostic level on stderr (repeat to raise; default from ${DEBUG_ENV} or 0)",
    )


def _debug_level(ns: argparse.Namespace) -> int:
    if ns.verbose is not None:
        return int(ns.verbose)
    return max(0, _env_int(DEBUG_ENV, 0))


def _require_file(p: Path) -> None:
    if not p.is_file():
        raise UsageError(f"input file not found: {p}")


def _cmd_compress(input_path: Path, output_path: Path, *, debug: int) -> int:
    from hufftree.core.codec_huffman import compress_file

    _require_file(input_path)
    compress_file(input_path, output_path, debug=debug)
    return 0


def _cmd_decompress(input_path: Path, output_path: Path, *, debug: int) -> int:
    from hufftree.core.codec_huffman import decompress_file

    _require_file(input_path)
    decompress_file(input_path, output_path, debug=debug)
    return 0


def _cmd_verify(input_path: Path, *, full: bool) -> int:
    from hufftree.verify import verify_file

    rep = verify_file(input_path, full=full)
    if full:
        print(f"decoded {rep.symbols} bytes sha256={rep.sha256}")
    print("OK")
    return 0


def _cmd_show(input_path: Path) -> int:
    from hufftree.core.codes import build_code_table
    from hufftree.core.frequency import PSEUDO_EOF
    from hufftree.verify import load_header

    root = load_header(input_path)
    codes = build_code_table(root)
    print(f"leaves: {len(codes)}")
    for sym in sorted(codes, key=lambda s: (len(codes[s]), s)):
        label = "EOF" if sym == PSEUDO_EOF else str(sym)
        print(f"{label:>4}  {codes[sym]}")
    return 0


def _cmd_bench(input_path: Path, *, as_json: bool) -> int:
    from hufftree.bench import bench_bytes

    _require_file(input_path)
    rows = bench_bytes(input_path.read_bytes())
    if as_json:
        print(json.dumps([r.to_json() for r in rows], sort_keys=True))
        return 0
    for r in rows:
        print(f"{r.codec:<8} {r.in_size:>10} -> {r.out_size:>10}  ratio={r.ratio:.4f}  {r.seconds:.3f}s")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hufftree", description="Huffman compressor with self-describing tree header"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", help="Lossless compress")
    p_c.add_argument("input", type=Path)
    p_c.add_argument("output", type=Path)
    _add_common_args(p_c)

    p_d = sub.add_parser("decompress", help="Lossless decompress")
    p_d.add_argument("input", type=Path)
    p_d.add_argument("output", type=Path)
    _add_common_args(p_d)

    p_v = sub.add_parser("verify", help="Verify a compressed file without writing output")
    p_v.add_argument("input", type=Path)
    p_v.add_argument("--full", action="store_true", help="Also decode to memory and print sha256")
    _add_common_args(p_v)

    p_s = sub.add_parser("show", help="Print the code table stored in a compressed file")
    p_s.add_argument("input", type=Path)
    _add_common_args(p_s)

    p_b = sub.add_parser("bench", help="Compare output size against zlib and zstd")
    p_b.add_argument("input", type=Path)
    p_b.add_argument("--json", action="store_true", help="Print rows as JSON")
    _add_common_args(p_b)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        debug = _debug_level(ns)
        if ns.cmd == "compress":
            return _cmd_compress(ns.input, ns.output, debug=debug)
        if ns.cmd == "decompress":
            return _cmd_decompress(ns.input, ns.output, debug=debug)
        if ns.cmd == "verify":
            return _cmd_verify(ns.input, full=bool(ns.full))
        if ns.cmd == "show":
            return _cmd_show(ns.input)
        if ns.cmd == "bench":
            return _cmd_bench(ns.input, as_json=bool(ns.json))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HuffTreeError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[hufftree] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_FORMAT) or EXIT_FORMAT)
    except OSError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[hufftree] {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[hufftree] error: {e}", file=sys.stderr)
        return EXIT_FORMAT


if __name__ == "__main__":
    raise SystemExit(main())
