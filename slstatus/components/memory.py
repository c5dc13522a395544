"""Components describing RAM and swap usage."""

from __future__ import annotations

from slstatus.util import fmt_human, read_text

MEMINFO_PATH = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each meminfo field name to its numeric value (in kB for sizes)."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, colon, rest = line.partition(":")
        if not colon:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path: str, *names: str) -> tuple[int, ...] | None:
    text = read_text(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")


def ram_free(path: str = MEMINFO_PATH) -> str | None:
    """Return the memory available for new allocations."""
    values = _fields(path, *_RAM_FIELDS[:3])
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(path: str = MEMINFO_PATH) -> str | None:
    """Return memory in use, excluding buffers and cache, in percent."""
    values = _fields(path, *_RAM_FIELDS)
    if values is None:
        return None
    total, free, _, buffers, cached = values
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(path: str = MEMINFO_PATH) -> str | None:
    """Return the total amount of memory."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(path: str = MEMINFO_PATH) -> str | None:
    """Return memory in use, excluding buffers and cache."""
    values = _fields(path, *_RAM_FIELDS)
    if values is None:
        return None
    total, free, _, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(path: str = MEMINFO_PATH) -> str | None:
    """Return the unused swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(path: str = MEMINFO_PATH) -> str | None:
    """Return swap in use, excluding swap cache, in percent."""
    values = _fields(path, *_SWAP_FIELDS)
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(100 * (total - free - cached) // total)


def swap_total(path: str = MEMINFO_PATH) -> str | None:
    """Return the total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(path: str = MEMINFO_PATH) -> str | None:
    """Return swap in use, excluding swap cache."""
    values = _fields(path, *_SWAP_FIELDS)
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)