"""Components describing network addresses, traffic rates and wireless links."""

from __future__ import annotations

import array
import fcntl
import ipaddress
import os
import re
import socket
import struct

from slstatus.util import fmt_human, read_text, read_uint, warn

NET_ROOT = "/sys/class/net"
WIRELESS_PATH = "/proc/net/wireless"
IF_INET6_PATH = "/proc/net/if_inet6"
INTERVAL = 1000

IFNAMSIZ = 16
IW_ESSID_MAX_SIZE = 32
SIOCGIFADDR = 0x8915
SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 32
_LINK_LOCAL_SCOPE = 0x20
_COUNTER_MODULUS = 2**64

_WIRELESS_LINK_RE = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")


def _ifreq_name(interface: str) -> bytes | None:
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        return None
    return name


class NetSpeed:
    """Turns a growing interface byte counter into a transfer rate."""

    def __init__(
        self, counter: str, interval: int = INTERVAL, root: str = NET_ROOT
    ) -> None:
        self.counter = counter
        self.interval = interval
        self.root = root
        self._bytes = 0

    def sample(self, interface: str) -> str | None:
        """Return the rate per second since the last sample, or None on the first."""
        previous = self._bytes
        path = os.path.join(self.root, interface, "statistics", self.counter)
        current = read_uint(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _COUNTER_MODULUS
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx_bytes")
_tx = NetSpeed("tx_bytes")


def ipv4(interface: str) -> str | None:
    """Return the IPv4 address of an interface."""
    name = _ifreq_name(interface)
    if name is None:
        return None
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            reply = fcntl.ioctl(sock.fileno(), SIOCGIFADDR, struct.pack("256s", name))
    except OSError:
        return None
    return socket.inet_ntoa(reply[20:24])


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    text = read_text(IF_INET6_PATH)
    if text is None:
        return None
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(int(fields[0], 16))
            scope = int(fields[3], 16)
        except ValueError:
            warn(f"getnameinfo: bad address '{fields[0]}'")
            return None
        if scope == _LINK_LOCAL_SCOPE:
            return f"{address.compressed}%{interface}"
        return address.compressed
    return None


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of an interface."""
    return _rx.sample(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of an interface."""
    return _tx.sample(interface)


def parse_wireless_link(text: str, interface: str) -> int | None:
    """Return the link quality for an interface from the wireless status table."""
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _WIRELESS_LINK_RE.match(line[start + len(interface) + 2 :])
    if match is None:
        return None
    return int(match.group(1))


def wifi_perc(interface: str) -> str | None:
    """Return the wireless link quality in percent."""
    operstate_path = os.path.join(NET_ROOT, interface, "operstate")
    try:
        with open(operstate_path, encoding="utf-8", errors="replace") as fp:
            status = fp.read(4)
    except OSError as err:
        warn(f"fopen '{operstate_path}': {err.strerror}")
        return None
    if status != "up\n":
        return None

    text = read_text(WIRELESS_PATH)
    if text is None:
        return None
    link = parse_wireless_link(text, interface)
    if link is None:
        return None
    # 70 is the maximum link quality reported in the table
    return str(int(link / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the interface is associated with."""
    name = _ifreq_name(interface)
    if name is None:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0).ljust(
            _IWREQ_SIZE, b"\0"
        )
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as err:
        warn(f"socket 'AF_INET': {err.strerror}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError as err:
            warn(f"ioctl 'SIOCGIWESSID': {err.strerror}")
            return None

    raw = essid.tobytes().split(b"\0", 1)[0]
    if not raw:
        return None
    return raw.decode("utf-8", errors="replace")