"""Components describing the host, the user, the clock and custom commands."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import sys
import time

from slstatus.util import read_uint, warn

BUFFER_SIZE = 1024
ENTROPY_PATH = "/proc/sys/kernel/random/entropy_avail"


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname() -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as err:
        warn(f"gethostbyname: {err.strerror}")
        return None


def kernel_release() -> str | None:
    """Return the kernel release, as `uname -r` prints it."""
    try:
        return os.uname().release
    except OSError as err:
        warn(f"uname: {err.strerror}")
        return None


def load_avg() -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: int) -> str:
    """Render a number of seconds as hours and minutes."""
    hours, rest = divmod(int(seconds), 3600)
    return f"{hours}h {rest // 60}m"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def uptime() -> str | None:
    """Return the system uptime as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = time.clock_gettime(clock)
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return format_uptime(int(seconds))


def gid() -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid() -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username() -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None


def entropy(path: str = ENTROPY_PATH) -> str | None:
    """Return the available kernel entropy; infinite on the BSDs."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    value = read_uint(path)
    return None if value is None else str(value)


def separator(text: str) -> str:
    """Return the given text unchanged."""
    return text


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as err:
        warn(f"popen '{cmd}': {err.strerror}")
        return None

    assert proc.stdout is not None
    with proc.stdout:
        raw = proc.stdout.readline(BUFFER_SIZE - 2)
    proc.wait()

    if not raw:
        return None
    line = raw.decode("utf-8", errors="replace")
    head, newline, _ = line.rpartition("\n")
    if newline:
        line = head
    return line or None