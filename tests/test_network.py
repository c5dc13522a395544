from pathlib import Path

import pytest

from slstatus.components import network
from slstatus.components.network import (
    NetSpeed,
    ipv4,
    ipv6,
    parse_wireless_link,
    wifi_essid,
    wifi_perc,
)
from slstatus.util import fmt_human

WIRELESS_TABLE = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
    " wlan0: 0000   54.  -56.  -256        0      0      0      0     21        0\n"
)


def _write_counter(root: Path, interface: str, counter: str, value: int) -> None:
    directory = root / interface / "statistics"
    directory.mkdir(parents=True, exist_ok=True)
    (directory / counter).write_text(f"{value}\n")


def test_netspeed_first_sample_is_unknown(tmp_path):
    _write_counter(tmp_path, "eth0", "rx_bytes", 1000)
    speed = NetSpeed("rx_bytes", 1000, str(tmp_path))
    assert speed.sample("eth0") is None


def test_netspeed_reports_difference(tmp_path):
    speed = NetSpeed("rx_bytes", 1000, str(tmp_path))
    _write_counter(tmp_path, "eth0", "rx_bytes", 1000)
    speed.sample("eth0")
    _write_counter(tmp_path, "eth0", "rx_bytes", 3048)
    assert speed.sample("eth0") == fmt_human(2048, 1024)


def test_netspeed_scales_by_interval(tmp_path):
    speed = NetSpeed("tx_bytes", 500, str(tmp_path))
    _write_counter(tmp_path, "eth0", "tx_bytes", 1000)
    speed.sample("eth0")
    _write_counter(tmp_path, "eth0", "tx_bytes", 2024)
    assert speed.sample("eth0") == fmt_human(2048, 1024)


def test_netspeed_missing_counter(tmp_path):
    speed = NetSpeed("rx_bytes", 1000, str(tmp_path))
    assert speed.sample("nonexistent0") is None


def test_netspeed_zero_delta(tmp_path):
    speed = NetSpeed("rx_bytes", 1000, str(tmp_path))
    _write_counter(tmp_path, "eth0", "rx_bytes", 500)
    speed.sample("eth0")
    assert speed.sample("eth0") == fmt_human(0, 1024)


def test_parse_wireless_link_reads_quality():
    assert parse_wireless_link(WIRELESS_TABLE, "wlan0") == 54


def test_parse_wireless_link_other_interface():
    assert parse_wireless_link(WIRELESS_TABLE, "wlan1") is None


def test_parse_wireless_link_needs_three_lines():
    two_lines = "".join(WIRELESS_TABLE.splitlines(keepends=True)[:2])
    assert parse_wireless_link(two_lines, "wlan0") is None


def _setup_wifi(tmp_path, monkeypatch, operstate: str, table: str) -> None:
    iface_dir = tmp_path / "net" / "wlan0"
    iface_dir.mkdir(parents=True)
    (iface_dir / "operstate").write_text(operstate)
    wireless = tmp_path / "wireless"
    wireless.write_text(table)
    monkeypatch.setattr(network, "NET_ROOT", str(tmp_path / "net"))
    monkeypatch.setattr(network, "WIRELESS_PATH", str(wireless))


def test_wifi_perc_full_link(tmp_path, monkeypatch):
    table = WIRELESS_TABLE.replace("54.", "70.")
    _setup_wifi(tmp_path, monkeypatch, "up\n", table)
    assert wifi_perc("wlan0") == "100"


def test_wifi_perc_in_range(tmp_path, monkeypatch):
    _setup_wifi(tmp_path, monkeypatch, "up\n", WIRELESS_TABLE)
    value = int(wifi_perc("wlan0"))
    assert 0 <= value <= 100


def test_wifi_perc_interface_down(tmp_path, monkeypatch):
    _setup_wifi(tmp_path, monkeypatch, "down\n", WIRELESS_TABLE)
    assert wifi_perc("wlan0") is None


def test_wifi_perc_missing_interface(tmp_path, monkeypatch):
    _setup_wifi(tmp_path, monkeypatch, "up\n", WIRELESS_TABLE)
    assert wifi_perc("wlan9") is None


@pytest.fixture
def inet6_table(tmp_path, monkeypatch):
    table = tmp_path / "if_inet6"
    table.write_text(
        "00000000000000000000000000000001 01 80 10 80       lo\n"
        "fe800000000000000000000000000001 02 40 20 80     eth0\n"
    )
    monkeypatch.setattr(network, "IF_INET6_PATH", str(table))
    return table


def test_ipv6_loopback(inet6_table):
    assert ipv6("lo") == "::1"


def test_ipv6_link_local_carries_scope(inet6_table):
    assert ipv6("eth0") == "fe80::1%eth0"


def test_ipv6_unknown_interface(inet6_table):
    assert ipv6("wlan0") is None


def test_ipv6_missing_table(tmp_path, monkeypatch):
    monkeypatch.setattr(network, "IF_INET6_PATH", str(tmp_path / "absent"))
    assert ipv6("lo") is None


def test_ipv4_unknown_interface():
    assert ipv4("nosuchif0") is None


def test_ipv4_name_too_long():
    assert ipv4("x" * 40) is None


def test_wifi_essid_unknown_interface():
    assert wifi_essid("nosuchif0") is None


def test_wifi_essid_name_too_long():
    assert wifi_essid("x" * 40) is None