"""Helpers for keyboard indicator and keymap layout display."""

from __future__ import annotations

import re

# symbols from the xkb rules configuration that are not layouts
_INVALID = ("evdev", "inet", "pc", "base")
_SPLIT_RE = re.compile(r"[+:]")


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock indicators from an LED mask.

    A letter followed by '?' is shown, case preserved, only when its
    indicator is on; otherwise it is always shown, upper case when on.
    """
    fmt = fmt[:4]
    out = []
    for pos, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = pos + 1 >= len(fmt) or fmt[pos + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether a symbols token names a layout rather than a rules entry."""
    return not sym.startswith(_INVALID)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout of a keyboard group from an xkb symbols name."""
    layout = None
    grp = 0
    for tok in (t for t in _SPLIT_RE.split(symbols) if t):
        if grp > group:
            break
        if not valid_layout_or_variant(tok):
            continue
        if len(tok) == 1 and tok.isdigit():
            # additional layout group markers such as :2
            continue
        layout = tok
        grp += 1
    return layout