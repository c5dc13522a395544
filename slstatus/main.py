"""Status monitor: composes component output into a status line."""

from __future__ import annotations

import os
import select
import shutil
import signal
import socket
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from slstatus.components.cpu import cpu_perc
from slstatus.components.memory import ram_perc
from slstatus.components.system import datetime, uptime
from slstatus.util import die, warn

INTERVAL = 1000
UNKNOWN_STR = "n/a"
MAXLEN = 2048


@dataclass(frozen=True)
class Arg:
    """One status element: a component, a printf-style format and its argument."""

    func: Callable[..., str | None]
    fmt: str
    argument: str | None = None


@dataclass
class Options:
    """Command-line options."""

    once: bool = False
    stdout: bool = False


ARGS = (
    Arg(uptime, "[Uptime %s] "),
    Arg(cpu_perc, "[Cpu %s%%] "),
    Arg(ram_perc, "[Ram %s%%] "),
    Arg(datetime, "[%s", "%a %b %d %r] "),
)


def _usage() -> None:
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "slstatus"
    die(f"usage: {prog} [-s] [-1]")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse command-line arguments, exiting with a usage message on error."""
    options = Options()
    rest = list(argv)
    while rest and rest[0].startswith("-") and len(rest[0]) > 1:
        word = rest.pop(0)
        if word == "--":
            break
        for flag in word[1:]:
            if flag == "1":
                options.once = True
                options.stdout = True
            elif flag == "s":
                options.stdout = True
            else:
                _usage()
    if rest:
        _usage()
    return options


def build_status(
    args: Sequence[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN
) -> str:
    """Compose the status line, stopping before an element that would overflow."""
    status = ""
    for arg in args:
        res = arg.func() if arg.argument is None else arg.func(arg.argument)
        if res is None:
            res = unknown
        piece = arg.fmt % res
        if len(status) + len(piece) >= maxlen:
            warn("vsnprintf: Output truncated")
            break
        status += piece
    return status


class _Signals:
    """Installs termination and wake-up handlers for the duration of a run."""

    def __init__(self) -> None:
        self.done = False
        self._reader, self._writer = socket.socketpair()
        self._reader.setblocking(False)
        self._writer.setblocking(False)
        self._saved: dict[int, object] = {}
        self._saved_fd = -1

    def _handle(self, signo: int, _frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True

    def __enter__(self) -> _Signals:
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
            self._saved[signo] = signal.signal(signo, self._handle)
        self._saved_fd = signal.set_wakeup_fd(self._writer.fileno())
        return self

    def __exit__(self, *exc: object) -> None:
        signal.set_wakeup_fd(self._saved_fd)
        for signo, handler in self._saved.items():
            signal.signal(signo, handler)
        self._reader.close()
        self._writer.close()

    def sleep(self, seconds: float) -> None:
        """Wait for the given time or until any handled signal arrives."""
        ready, _, _ = select.select([self._reader], [], [], seconds)
        if ready:
            try:
                self._reader.recv(64)
            except BlockingIOError:
                pass


class _RootName:
    """Sets the name of the X root window."""

    def __init__(self) -> None:
        self._tool = shutil.which("xsetroot")
        if not os.environ.get("DISPLAY") or self._tool is None:
            die("XOpenDisplay: Failed to open display")

    def store(self, name: str) -> None:
        assert self._tool is not None
        try:
            done = subprocess.run([self._tool, "-name", name], check=False)
        except OSError:
            die("XStoreName: Allocation failed")
            return
        if done.returncode != 0:
            die("XStoreName: Allocation failed")


def run(options: Options, args: Sequence[Arg] = ARGS, interval: int = INTERVAL) -> None:
    """Update the status every interval milliseconds until stopped."""
    root = None if options.stdout else _RootName()

    with _Signals() as signals:
        signals.done = options.once
        while True:
            start = time.monotonic()
            status = build_status(args)

            if root is None:
                try:
                    print(status, flush=True)
                except OSError as err:
                    die(f"puts: {err.strerror}")
            else:
                root.store(status)

            if not signals.done:
                wait = interval / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    signals.sleep(wait)
            if signals.done:
                break

    if root is not None:
        root.store("")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    run(options, ARGS, INTERVAL)
    return 0


if __name__ == "__main__":
    sys.exit(main())