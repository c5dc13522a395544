"""Component reporting the master volume of an OSS-compatible mixer."""

from __future__ import annotations

import array
import fcntl
import os

from slstatus.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_IOC_READ_INT = 0x80044D00  # _IOR('M', 0, int)
SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(device: int) -> int:
    return _IOC_READ_INT | device


SOUND_MIXER_READ_DEVMASK = _mixer_read(SOUND_MIXER_DEVMASK)


def _ioctl_int(fd: int, request: int) -> int:
    value = array.array("i", [0])
    fcntl.ioctl(fd, request, value, True)
    return value[0]


def vol_perc(card: str) -> str | None:
    """Return the left-channel master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as err:
        warn(f"open '{card}': {err.strerror}")
        return None

    level: int | None = None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as err:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {err.strerror}")
            return None
        for device, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << device) and name == "vol":
                try:
                    level = _ioctl_int(fd, _mixer_read(device))
                except OSError as err:
                    warn(f"ioctl 'MIXER_READ({device})': {err.strerror}")
                    return None
    finally:
        os.close(fd)

    if level is None:
        return None
    return str(level & 0xFF)