#!/usr/bin/env python3
"""Run the import-direction checks from tests/test_arch_boundaries.py without pytest."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

CHECKS = (
    "test_core_does_not_import_orchestrators",
    "test_core_imports_only_core_and_errors",
)


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    test_path = repo_root / "tests" / "test_arch_boundaries.py"
    if not test_path.is_file():
        print(f"ERROR: {test_path} not found.", file=sys.stderr)
        return 3

    spec = importlib.util.spec_from_file_location("_arch_boundaries", test_path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[union-attr]

    failed = 0
    for name in CHECKS:
        fn = getattr(mod, name, None)
        if not callable(fn):
            print(f"ERROR: {name} not found.", file=sys.stderr)
            return 3
        try:
            fn()
        except AssertionError as e:
            print(str(e), file=sys.stderr)
            failed += 1

    if failed:
        return 2
    print("OK: architecture boundaries respected.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
