"""
Shell Probe
===========

Resolves the parent process (normally the interactive shell) through
procfs and asks it for its version.

License: MIT
"""

import os
import logging
from typing import Optional

from .models import ProbeContext
from .parsers import extract_version_number, first_line

log = logging.getLogger(__name__)


def get_parent_command_name(ctx: ProbeContext) -> Optional[str]:
    """Reads /proc/<ppid>/comm."""
    comm_path = os.path.join(ctx.proc_root, str(ctx.ppid), "comm")
    try:
        with open(comm_path, "r", encoding="utf-8", errors="replace") as f:
            name = f.readline().strip()
    except OSError as e:
        log.warning(f"Cannot read {comm_path}: {e}")
        return None
    return name or None


def get_shell(ctx: ProbeContext) -> Optional[str]:
    """
    Shell name and version, e.g. "bash 5.1.16".

    Runs `<name> --version` and extracts the version from the first line.
    If any step fails the whole fact is unknown; the name alone is never
    returned.
    """
    name = get_parent_command_name(ctx)
    if name is None:
        return None

    stdout, _, returncode = ctx.runner([name, "--version"], merge_stderr=True)
    line = first_line(stdout)
    if not line:
        log.debug(f"'{name} --version' printed nothing (code: {returncode})")
        return None

    version = extract_version_number(line)
    if not version:
        log.debug(f"No version number in '{line}'")
        return None

    return f"{name} {version}"
