"""
xfetch - Probes
===============

Functions that each determine one fact about the running system.

Modules:
    - parsers: text extractors shared by the probes
    - check_system: OS, kernel, hostname, uptime, desktop, session type
    - check_shell: parent shell and its version
    - check_display: window manager / compositor detection
    - models: SystemFact, ProbeContext, errors
"""

__all__ = [
    # System
    'get_os_name',
    'get_kernel',
    'get_hostname',
    'get_uptime',
    'get_desktop',
    'get_session_type',

    # Shell
    'get_shell',

    # Display
    'detect_window_manager',

    # Models
    'SystemFact',
    'ProbeContext',
    'ProbeMode',
    'XfetchError',
    'FatalProbeError',

    # Runner
    'get_all_checks',
    'run_check_by_name',
    'collect_facts',
]

import logging
from functools import partial
from typing import List

from .enums import ProbeMode
from .models import SystemFact, ProbeContext, XfetchError, FatalProbeError, REPORT_ORDER
from .check_system import (
    get_os_name,
    get_kernel,
    get_hostname,
    get_uptime,
    get_desktop,
    get_session_type,
)
from .check_shell import get_shell
from .check_display import detect_window_manager

log = logging.getLogger(__name__)


def get_all_checks(mode: ProbeMode = ProbeMode.STRUCTURED):
    """
    Returns every probe keyed by fact name, in report order.

    Each value is a callable taking a ProbeContext.

    Examples:
        >>> checks = get_all_checks()
        >>> os_name = checks['os'](ProbeContext.from_system())
    """
    return {
        'hostname': partial(get_hostname, mode=mode),
        'os': get_os_name,
        'desktop': get_desktop,
        'session': get_session_type,
        'kernel': partial(get_kernel, mode=mode),
        'uptime': partial(get_uptime, mode=mode),
        'window_manager': detect_window_manager,
        'shell': get_shell,
    }


def run_check_by_name(check_name: str, ctx: ProbeContext, mode: ProbeMode = ProbeMode.STRUCTURED):
    """
    Runs a single probe by name.

    Unexpected errors inside a probe are logged and reported as an unknown
    value so the rest of the report still prints. FatalProbeError is passed
    through.

    Raises:
        ValueError: Unknown check name
        FatalProbeError: A required system query failed
    """
    checks = get_all_checks(mode)

    if check_name not in checks:
        available = ', '.join(checks.keys())
        raise ValueError(
            f"Unknown check: '{check_name}'. "
            f"Available checks: {available}"
        )

    try:
        return checks[check_name](ctx)
    except FatalProbeError:
        raise
    except Exception as e:
        log.error(f"Check '{check_name}' failed: {e}", exc_info=True)
        return None


def collect_facts(ctx: ProbeContext, mode: ProbeMode = ProbeMode.STRUCTURED) -> List[SystemFact]:
    """Runs every probe once, in report order."""
    return [
        SystemFact.for_key(key, run_check_by_name(key, ctx, mode))
        for key in REPORT_ORDER
    ]
