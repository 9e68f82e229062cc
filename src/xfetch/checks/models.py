"""
Probe Data Models
=================

Dataclasses and errors shared by every probe.

Dataclasses:
    SystemFact    - one labelled line of the report
    ProbeContext  - everything a probe is allowed to read about the process

Errors:
    XfetchError      - base class
    FatalProbeError  - a required system query failed; no report is printed

A fact whose value is None is "unknown". That is an expected outcome of a
probe, not an error.

License: MIT
"""

import os
import time
import platform
import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import psutil

from ..utils.command_runner import run_command
from ..utils.display import DisplayBackend, XlibDisplayBackend

# Logger
log = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================

class XfetchError(Exception):
    """Base class for xfetch errors."""


class FatalProbeError(XfetchError):
    """A required low-level system query failed."""


# =============================================================================
# REPORT LINES
# =============================================================================

# key -> (label, sentence printed when the value is unknown), in report order
FACT_LABELS: Dict[str, Tuple[str, str]] = {
    "hostname": ("Hostname", "Hostname not found."),
    "os": ("Operating System", "Operating System not found."),
    "desktop": ("Desktop Environment", "Desktop Environment not recognized."),
    "session": ("Session Type", "Desktop session not recognized."),
    "kernel": ("Kernel", "Kernel not recognized."),
    "uptime": ("Uptime", "Uptime not available."),
    "window_manager": ("Window Manager", "Window Manager not recognized."),
    "shell": ("Shell", "Shell not recognized."),
}

REPORT_ORDER = tuple(FACT_LABELS)


@dataclass(frozen=True)
class SystemFact:
    """
    One fact about the running system.

    Attributes:
        key: Stable identifier ("os", "kernel", ...)
        label: Human-readable label ("Operating System")
        value: Probe result, None when the probe could not determine it

    Examples:
        >>> SystemFact.for_key("os", "Test OS 1.0").render()
        'Operating System: Test OS 1.0'
        >>> SystemFact.for_key("os", None).render()
        'Operating System not found.'
    """
    key: str
    label: str
    value: Optional[str] = None

    @classmethod
    def for_key(cls, key: str, value: Optional[str]) -> "SystemFact":
        label, _ = FACT_LABELS[key]
        return cls(key=key, label=label, value=value)

    @property
    def is_known(self) -> bool:
        return self.value is not None

    @property
    def unknown_text(self) -> str:
        _, sentence = FACT_LABELS.get(self.key, (self.label, f"{self.label} not found."))
        return sentence

    def render(self) -> str:
        if self.is_known:
            return f"{self.label}: {self.value}"
        return self.unknown_text

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# PROBE CONTEXT
# =============================================================================

@dataclass(frozen=True)
class ProbeContext:
    """
    Read-only view of the process and its surroundings.

    Probes take everything from here instead of touching os.environ,
    /proc, subprocess or the display server themselves, so tests can hand
    them a fake context.

    Attributes:
        environ: Environment variables
        ppid: Parent process id (the shell that started us)
        os_release_path: os-release file
        hostname_path: hostname file
        proc_root: procfs mount point
        runner: Callable with the signature of run_command
        display: Display server connections
        uname: Returns an object with system, node and release attributes
        boot_time: Returns the boot time as a UNIX timestamp
        clock: Returns the current UNIX timestamp
    """
    environ: Mapping[str, str] = field(default_factory=dict)
    ppid: int = 0
    os_release_path: str = "/etc/os-release"
    hostname_path: str = "/etc/hostname"
    proc_root: str = "/proc"
    runner: Callable[..., Tuple[str, str, int]] = run_command
    display: Optional[DisplayBackend] = None
    uname: Callable[[], Any] = platform.uname
    boot_time: Callable[[], float] = psutil.boot_time
    clock: Callable[[], float] = time.time

    @classmethod
    def from_system(cls, **overrides) -> "ProbeContext":
        """Context for the current process. Keyword arguments override fields."""
        environ = dict(os.environ)
        values = {
            "environ": environ,
            "ppid": os.getppid(),
            "display": XlibDisplayBackend(environ),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        log.debug(f"Probe context: ppid={values['ppid']}")
        return cls(**values)

    def getenv(self, name: str) -> Optional[str]:
        """Returns the variable's value, or None if it is unset or empty."""
        value = self.environ.get(name)
        return value if value else None
