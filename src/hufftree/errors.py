"""Typed errors for hufftree.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_FORMAT = 10
EXIT_UNSUPPORTED_VERSION = 11


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage error (invalid args, missing input file, unwritable output, etc.)"),
    ExitCodeInfo(
        EXIT_FORMAT,
        "FORMAT",
        "Corrupt or truncated compressed stream (bad magic, header, payload), or unexpected error",
    ),
    ExitCodeInfo(
        EXIT_UNSUPPORTED_VERSION,
        "UNSUPPORTED_VERSION",
        "Known format variant that this codec does not decode",
    ),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE - do not edit manually.\n")
    lines.append("> Source of truth: `src/hufftree/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Internal errors extend `HuffTreeError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffTreeError(Exception):
    """Base error for hufftree."""

    exit_code: int = EXIT_FORMAT


class UsageError(HuffTreeError):
    exit_code = EXIT_USAGE


class FormatError(HuffTreeError):
    """The compressed stream cannot be decoded."""

    exit_code = EXIT_FORMAT


class BadMagic(FormatError):
    pass


class TruncatedHeader(FormatError):
    pass


class TruncatedPayload(FormatError):
    pass


class UnsupportedVersion(HuffTreeError):
    exit_code = EXIT_UNSUPPORTED_VERSION
