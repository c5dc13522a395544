# slstatus

A small status monitor for Linux. It gathers pieces of system information
(uptime, CPU and memory usage, date and time, disk space, battery, network
and more), joins them into one status line from a list of format entries,
and either prints that line or stores it as the name of the X root window,
once or every second.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Usage

```
slstatus        # set the X root window name every second
slstatus -s     # print the status line to stdout every second
slstatus -1     # print the status line once and exit
```

`-1` implies `-s`. Flags may be combined (`-s1`), and `--` ends the
options. Unknown options or stray arguments print
`usage: slstatus [-s] [-1]` and exit with status 1.

Without `-s`, the window name is set by running `xsetroot -name`; this
needs `DISPLAY` to be set and `xsetroot` on the `PATH`, otherwise the
program exits with `XOpenDisplay: Failed to open display`. When the loop
ends, the window name is reset to an empty string.

SIGINT and SIGTERM stop the loop after the current line. SIGUSR1 wakes the
loop up early for an immediate refresh.

The default status line is

```
[Uptime 3h 12m] [Cpu 7%] [Ram 41%] [Mon Jan 01 10:00:00 AM]
```

built from `uptime`, `cpu_perc`, `ram_perc` and `datetime` (see
`slstatus.main.ARGS`). `cpu_perc` shows `n/a` on the first line, since it
reports the change between two samples.

## Components

Each component returns a string, or `None` when the value cannot be read
(a warning goes to standard error); `None` is shown as `n/a` in the
status line.

| Module | Functions |
| --- | --- |
| `slstatus.components.system` | `datetime(fmt)`, `hostname()`, `kernel_release()`, `load_avg()`, `uptime()`, `format_uptime(seconds)`, `gid()`, `uid()`, `username()`, `entropy(path)`, `separator(text)`, `run_command(cmd)` |
| `slstatus.components.storage` | `disk_free(path)`, `disk_perc(path)`, `disk_total(path)`, `disk_used(path)`, `num_files(path)` |
| `slstatus.components.cpu` | `cpu_freq(path)`, `cpu_perc()`, `CpuUsage` |
| `slstatus.components.memory` | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` (each takes an optional meminfo path), `parse_meminfo(text)` |
| `slstatus.components.network` | `ipv4(interface)`, `ipv6(interface)`, `netspeed_rx(interface)`, `netspeed_tx(interface)`, `wifi_perc(interface)`, `wifi_essid(interface)`, `parse_wireless_link(text, interface)`, `NetSpeed` |
| `slstatus.components.power` | `battery_perc(bat)`, `battery_state(bat)`, `battery_remaining(bat)`, `temp(file)` |
| `slstatus.components.volume` | `vol_perc(card)` for an OSS mixer device such as `/dev/mixer` |
| `slstatus.components.keyboard` | `format_indicators(fmt, led_mask)`, `valid_layout_or_variant(sym)`, `get_layout(symbols, group)` |

Paths default to the usual `/proc` and `/sys` locations and can be
pointed elsewhere, which makes the readers easy to try on sample files:

```python
from slstatus.components.power import battery_state
battery_state("BAT0", root="/sys/class/power_supply")   # "+", "-", "o" or "?"
```

`run_command` runs its argument through the shell and returns the first
line of output, without the trailing newline.

`CpuUsage` and `NetSpeed` keep the previous counter values; their
`sample()` method returns `None` on the first call and a rate afterwards.

Sizes are shown with binary or decimal prefixes by
`slstatus.util.fmt_human`, for example `fmt_human(1536, 1024)` gives
`"1.5 Ki"`.

## Building your own status line

Formats use `%` formatting: `%s` stands for the component's value and
`%%` for a literal percent sign.

```python
from slstatus.main import Arg, build_status
from slstatus.components.cpu import cpu_perc
from slstatus.components.storage import disk_perc
from slstatus.components.system import datetime, uptime

args = [
    Arg(uptime, "[Uptime %s] "),
    Arg(cpu_perc, "[Cpu %s%%] "),
    Arg(disk_perc, "[Disk %s%%] ", "/"),
    Arg(datetime, "[%s]", "%F %T"),
]
print(build_status(args, "n/a", 2048))
```

`build_status` stops before any element that would make the line reach
`maxlen` characters. `slstatus.main.run(options, args, interval)` runs the
update loop with your own list and interval in milliseconds.

## What it does not do

- Only Linux sources of information are read; the BSD sources are not
  supported (apart from `entropy`, which reports `∞` there).
- The keyboard module does not talk to the X server: it formats an LED
  mask you supply and picks a layout out of an xkb symbols name you
  supply, but it cannot read the current keyboard state or keymap itself.
- `vol_perc` reads OSS-style mixers only; there is no sndio support.
- The status line can be changed only from Python, not from a
  configuration file.

## Running the tests

```
pip install .[test]
pytest
```