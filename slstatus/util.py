"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT_RE = re.compile(r"\s*\+?(\d+)")


def _program_name() -> str | None:
    if sys.argv and sys.argv[0]:
        return sys.argv[0]
    return None


def warn(message: str) -> None:
    """Write a diagnostic line to standard error, prefixed by the program name."""
    prog = _program_name()
    if prog and not message.startswith("usage"):
        sys.stderr.write(f"{prog}: ")
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()


def die(message: str) -> None:
    """Report a fatal error and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def fmt_human(num: int | float, base: int) -> str | None:
    """Scale a number by powers of 1000 or 1024 and append the unit prefix."""
    prefixes = _PREFIXES.get(base)
    if prefixes is None:
        warn("fmt_human: Invalid base")
        return None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1

    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str) -> str | None:
    """Return the contents of a text file, or None after a warning if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            return fp.read()
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None


def read_uint(path: str) -> int | None:
    """Return the unsigned integer at the start of a file, or None."""
    text = read_text(path)
    if text is None:
        return None
    match = _UINT_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))