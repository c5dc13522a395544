import os
import pwd
import re
import socket
import time
from unittest import mock

from slstatus.components.system import (
    datetime,
    entropy,
    format_uptime,
    gid,
    hostname,
    kernel_release,
    load_avg,
    run_command,
    separator,
    uid,
    uptime,
    username,
)


def test_separator_returns_text():
    assert separator(" | ") == " | "


def test_format_uptime_hours_and_minutes():
    assert format_uptime(3725) == "1h 2m"


def test_format_uptime_zero():
    assert format_uptime(0) == "0h 0m"


def test_format_uptime_minutes_below_sixty():
    for seconds in (59, 3599, 7199, 86399):
        minutes = int(format_uptime(seconds).split()[1].rstrip("m"))
        assert 0 <= minutes < 60


def test_uptime_shape():
    result = uptime()
    hours_part, minutes_part = result.split(" ")
    assert hours_part.endswith("h")
    assert minutes_part.endswith("m")
    hours = int(hours_part[:-1])
    minutes = int(minutes_part[:-1])
    assert hours >= 0
    assert 0 <= minutes < 60


def test_datetime_year_matches_clock():
    assert datetime("%Y") == time.strftime("%Y")


def test_datetime_empty_result_is_unknown(capsys):
    assert datetime("") is None
    assert "strftime" in capsys.readouterr().err


def test_datetime_too_long_is_unknown():
    assert datetime("x" * 2000) is None


def test_hostname_matches_socket():
    assert hostname() == socket.gethostname()


def test_kernel_release_matches_uname():
    assert kernel_release() == os.uname().release


def test_load_avg_has_three_values():
    parts = load_avg().split(" ")
    assert len(parts) == 3
    for part in parts:
        whole, fraction = part.split(".")
        assert len(fraction) == 2
        assert whole.isdigit()
        assert float(part) >= 0.0


def test_ids_match_process():
    assert gid() == str(os.getgid())
    assert uid() == str(os.geteuid())


def test_username_matches_password_database():
    assert username() == pwd.getpwuid(os.geteuid()).pw_name


def test_entropy_reads_file(tmp_path):
    source = tmp_path / "entropy_avail"
    source.write_text("256\n")
    with mock.patch("sys.platform", "linux"):
        assert entropy(str(source)) == "256"


def test_entropy_missing_file(tmp_path):
    with mock.patch("sys.platform", "linux"):
        assert entropy(str(tmp_path / "absent")) is None


def test_entropy_on_bsd_is_infinite():
    with mock.patch("sys.platform", "openbsd7"):
        assert entropy() == "\u221e"


def test_run_command_strips_newline():
    assert run_command("echo foo") == "foo"


def test_run_command_first_line_only():
    assert run_command("printf 'first\\nsecond\\n'") == "first"


def test_run_command_no_output_is_unknown():
    assert run_command("true") is None


def test_run_command_empty_line_is_unknown():
    assert run_command("echo") is None


def test_run_command_truncates_long_line():
    result = run_command("head -c 3000 /dev/zero | tr '\\0' 'a'")
    assert set(result) == {"a"}
    assert len(result) < 1024