"""
System Probes
=============

One function per fact: OS name, kernel, hostname, uptime, desktop
environment and session type.

Every probe takes a ProbeContext and returns a non-empty single-line
string, or None when the fact could not be determined. Only the
structured system queries (uname, boot time) may raise FatalProbeError.

License: MIT
"""

import logging
from typing import Optional

import psutil

from .enums import ProbeMode, SessionType
from .models import ProbeContext, FatalProbeError
from .parsers import extract_quoted_string, capitalize_first, strip_prefix, first_line
from ..utils import format_uptime
from ..utils.command_runner import safe_command_output

log = logging.getLogger(__name__)

PRETTY_NAME_KEY = "PRETTY_NAME="
# `uptime -p` prefix; safe_command_output has already trimmed the space after it
UPTIME_PREFIX = "up"


# =============================================================================
# OPERATING SYSTEM
# =============================================================================

def get_os_name(ctx: ProbeContext) -> Optional[str]:
    """
    Reads PRETTY_NAME from the os-release file.

    The first matching line wins. Quoted values go through
    extract_quoted_string(); an unquoted value is taken as-is.
    """
    try:
        with open(ctx.os_release_path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                if line.startswith(PRETTY_NAME_KEY):
                    return _parse_pretty_name(line.rstrip("\n"))
    except OSError as e:
        log.warning(f"Cannot read {ctx.os_release_path}: {e}")
        return None

    log.debug(f"No {PRETTY_NAME_KEY} line in {ctx.os_release_path}")
    return None


def _parse_pretty_name(line: str) -> Optional[str]:
    value = extract_quoted_string(line)
    if value is None:
        value = line[len(PRETTY_NAME_KEY):].strip().strip("'")
    value = value.strip()
    return value or None


# =============================================================================
# KERNEL
# =============================================================================

def get_kernel(ctx: ProbeContext, mode: ProbeMode = ProbeMode.STRUCTURED) -> Optional[str]:
    """Kernel name and release, e.g. "Linux 6.8.0-45-generic"."""
    if mode is ProbeMode.COMMANDS:
        return _kernel_from_commands(ctx)

    uname = _query_uname(ctx)
    system = (uname.system or "").strip()
    release = (uname.release or "").strip()
    if not system or not release:
        log.warning("uname returned an empty system name or release")
        return None
    return f"{system} {release}"


def _kernel_from_commands(ctx: ProbeContext) -> Optional[str]:
    system = safe_command_output(["uname", "-s"], runner=ctx.runner)
    release = safe_command_output(["uname", "-r"], runner=ctx.runner)
    if system is None or release is None:
        return None
    return f"{first_line(system)} {first_line(release)}"


def _query_uname(ctx: ProbeContext):
    try:
        return ctx.uname()
    except OSError as e:
        raise FatalProbeError(f"uname failed: {e}") from e


# =============================================================================
# HOSTNAME
# =============================================================================

def get_hostname(ctx: ProbeContext, mode: ProbeMode = ProbeMode.STRUCTURED) -> Optional[str]:
    if mode is ProbeMode.COMMANDS:
        return _hostname_from_file(ctx)

    node = (_query_uname(ctx).node or "").strip()
    return node or None


def _hostname_from_file(ctx: ProbeContext) -> Optional[str]:
    try:
        with open(ctx.hostname_path, "r", encoding="utf-8", errors="replace") as f:
            line = f.readline()
    except OSError as e:
        log.warning(f"Cannot read {ctx.hostname_path}: {e}")
        return None
    return line.strip() or None


# =============================================================================
# UPTIME
# =============================================================================

def get_uptime(ctx: ProbeContext, mode: ProbeMode = ProbeMode.STRUCTURED) -> Optional[str]:
    """
    Time since boot.

    STRUCTURED: computed from the boot timestamp and formatted with
                format_uptime() ("1 hours, 2 minutes").
    COMMANDS:   `uptime -p` with its leading "up" removed. A bare "up"
                (under a minute on some procps versions) is unknown.
    """
    if mode is ProbeMode.COMMANDS:
        output = safe_command_output(["uptime", "-p"], runner=ctx.runner)
        if output is None:
            return None
        return strip_prefix(first_line(output), UPTIME_PREFIX).strip() or None

    try:
        booted_at = ctx.boot_time()
    except (OSError, psutil.Error) as e:
        raise FatalProbeError(f"cannot read boot time: {e}") from e

    seconds = ctx.clock() - booted_at
    if seconds < 0:
        log.warning(f"Boot time lies in the future ({seconds:.0f}s), ignoring")
        return None
    return format_uptime(seconds)


# =============================================================================
# DESKTOP / SESSION
# =============================================================================

def get_desktop(ctx: ProbeContext) -> str:
    """XDG_CURRENT_DESKTOP, then DESKTOP_SESSION, then "Unknown"."""
    return ctx.getenv("XDG_CURRENT_DESKTOP") or ctx.getenv("DESKTOP_SESSION") or "Unknown"


def get_session_type(ctx: ProbeContext) -> str:
    """
    Windowing protocol of the session.

    XDG_SESSION_TYPE is trusted when set ("wayland" -> "Wayland"). Otherwise
    an X11 connection is tried first, then Wayland.
    """
    session = ctx.getenv("XDG_SESSION_TYPE")
    if session is not None:
        return capitalize_first(session)

    if ctx.display is None:
        return SessionType.UNKNOWN.value

    if ctx.display.try_connect_legacy():
        return SessionType.X11.value
    if ctx.display.try_connect_modern():
        return SessionType.WAYLAND.value

    log.debug("XDG_SESSION_TYPE unset and no display server answered")
    return SessionType.UNKNOWN.value
