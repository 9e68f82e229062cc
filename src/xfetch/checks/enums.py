"""
Probe Enums
===========

    ProbeMode    - where kernel, hostname and uptime come from
    SessionType  - tags reported when the session type has to be probed
"""

from enum import Enum


class ProbeMode(Enum):
    """
    STRUCTURED: uname(2) style queries and psutil (default)
    COMMANDS:   `uname`, `uptime -p` and /etc/hostname
    """
    STRUCTURED = "structured"
    COMMANDS = "commands"

    @classmethod
    def choices(cls):
        return [mode.value for mode in cls]


class SessionType(Enum):
    X11 = "X11"
    WAYLAND = "Wayland"
    UNKNOWN = "Unknown"

    def matches(self, value: str) -> bool:
        """Case-insensitive comparison against a raw session string."""
        return value.strip().lower() == self.value.lower()
