from __future__ import annotations

from pathlib import Path

from hufftree.errors import (
    EXIT_CODES,
    BadMagic,
    FormatError,
    HuffTreeError,
    TruncatedHeader,
    TruncatedPayload,
    UnsupportedVersion,
    UsageError,
    exit_code_info,
    render_exit_codes_markdown,
)


def test_exit_codes_are_unique() -> None:
    codes = [e.code for e in EXIT_CODES]
    assert len(codes) == len(set(codes))
    assert exit_code_info(10).name == "FORMAT"
    assert exit_code_info(99) is None


def test_error_hierarchy_exit_codes() -> None:
    for cls in (BadMagic, TruncatedHeader, TruncatedPayload):
        assert issubclass(cls, FormatError)
        assert cls.exit_code == 10
    assert issubclass(UnsupportedVersion, HuffTreeError)
    assert UnsupportedVersion.exit_code == 11
    assert UsageError.exit_code == 2


def test_generated_doc_is_up_to_date() -> None:
    doc = Path(__file__).resolve().parents[1] / "docs" / "exit_codes.md"
    assert doc.read_text(encoding="utf-8") == render_exit_codes_markdown()
