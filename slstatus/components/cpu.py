"""Components describing processor frequency and usage."""

from __future__ import annotations

from slstatus.util import fmt_human, read_text, read_uint

STAT_PATH = "/proc/stat"
FREQ_PATH = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"

_FIELDS = 7  # user nice system idle iowait irq softirq
_BUSY = (0, 1, 2, 5, 6)


class CpuUsage:
    """Tracks the aggregate CPU counters between successive samples."""

    def __init__(self, stat_path: str = STAT_PATH) -> None:
        self.stat_path = stat_path
        self._previous: list[float] = [0.0] * _FIELDS

    def _read(self) -> list[float] | None:
        text = read_text(self.stat_path)
        if text is None:
            return None
        fields = text.split("\n", 1)[0].split()[1 : 1 + _FIELDS]
        if len(fields) != _FIELDS:
            return None
        try:
            return [float(field) for field in fields]
        except ValueError:
            return None

    def sample(self) -> str | None:
        """Return busy time in percent since the last sample, or None on the first."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None

        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_freq(path: str = FREQ_PATH) -> str | None:
    """Return the current frequency of the first CPU."""
    khz = read_uint(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc() -> str | None:
    """Return system-wide CPU usage in percent since the previous call."""
    return _usage.sample()