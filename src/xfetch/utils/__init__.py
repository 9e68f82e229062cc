"""
xfetch - Helpers
================

Command execution, display server connections and formatting helpers.

Modules:
    - command_runner: external command execution
    - display: X11 / Wayland connections
"""

__all__ = [
    # Command Runner
    'run_command',
    'safe_command_output',

    # Display
    'DisplayBackend',
    'XlibDisplayBackend',
    'DisplayUnavailableError',

    # Formatting
    'format_uptime',
]

from .command_runner import (
    run_command,
    safe_command_output,
)
from .display import (
    DisplayBackend,
    XlibDisplayBackend,
    DisplayUnavailableError,
)


def format_uptime(seconds: float) -> str:
    """
    Formats an uptime in seconds as "D days, H hours, M minutes".

    The day component is left out when it is zero and leftover seconds are
    truncated. Unit labels are always plural.

    Examples:
        >>> format_uptime(3725)
        '1 hours, 2 minutes'
        >>> format_uptime(90061)
        '1 days, 1 hours, 1 minutes'
    """
    total = int(seconds)

    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days:
        return f"{days} days, {hours} hours, {minutes} minutes"
    return f"{hours} hours, {minutes} minutes"
