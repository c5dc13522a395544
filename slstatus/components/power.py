"""Components describing the battery and temperature sensors."""

from __future__ import annotations

import os
import re

from slstatus.util import read_text, read_uint

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
}


def _read_int(path: str) -> int | None:
    text = read_text(path)
    if text is None:
        return None
    match = _INT_RE.match(text)
    return None if match is None else int(match.group(1))


def _read_state(bat: str, root: str) -> str | None:
    text = read_text(os.path.join(root, bat, "status"))
    if text is None:
        return None
    words = text.split()
    if not words:
        return None
    return words[0][:12]


def _pick(bat: str, root: str, *names: str) -> str | None:
    for name in names:
        path = os.path.join(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the battery charge in percent."""
    perc = _read_int(os.path.join(root, bat, "capacity"))
    return None if perc is None else str(perc)


def battery_state(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the time left while discharging, or an empty string otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"


def temp(file: str) -> str | None:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = read_uint(file)
    return None if value is None else str(value // 1000)