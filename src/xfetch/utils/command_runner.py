"""
Command Runner
==============

Runs external commands for the probes that scrape command output
(`uname`, `uptime -p`, `<shell> --version`).

Features:
    - No shell: commands are always argument lists
    - Never raises: failures are mapped to conventional return codes
    - stderr can be merged into stdout (shells often print versions there)
    - Debug/warning logging of every invocation

License: MIT
"""

import subprocess
import logging
import time
from typing import Tuple, List, Optional

# Logger
log = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Seconds before a command is abandoned
DEFAULT_TIMEOUT = 15

# Return codes used when the command could not produce one itself
RC_TIMEOUT = 124
RC_PERMISSION = 126
RC_NOT_FOUND = 127


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def run_command(
    command: List[str],
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    merge_stderr: bool = False,
) -> Tuple[str, str, int]:
    """
    Runs a command and returns its output.

    Args:
        command: Argument list, e.g. ["uname", "-r"]. Never passed to a shell.
        timeout: Seconds to wait before giving up. None blocks until the
                 command exits, so a hung command hangs the report.
        merge_stderr: If True, stderr is redirected into stdout
                      (the equivalent of `2>&1`).

    Returns:
        Tuple[str, str, int]: (stdout, stderr, returncode)
            - 124: the command timed out
            - 126: permission denied
            - 127: the command does not exist

    Examples:
        >>> stdout, stderr, code = run_command(["uname", "-s"])
        >>> if code == 0:
        ...     print(stdout.strip())
        Linux
    """
    display_cmd = ' '.join(command)
    log.debug(f"Running command: {display_cmd}")

    try:
        start_time = time.time()
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            timeout=timeout,
            text=True,
            errors="replace",
            check=False,
        )
        elapsed_time = time.time() - start_time

        stdout = result.stdout or ""
        stderr = result.stderr or ""

        if result.returncode != 0:
            log.warning(
                f"Command failed (code: {result.returncode}, {elapsed_time:.2f}s): {display_cmd}"
            )
            if stderr and len(stderr) < 500:
                log.warning(f"stderr: {stderr.strip()}")
        else:
            log.debug(f"Command succeeded ({elapsed_time:.2f}s): {display_cmd}")

        return stdout, stderr, result.returncode

    except subprocess.TimeoutExpired:
        log.error(f"Command timed out after {timeout}s: {display_cmd}")
        return "", f"Command did not finish within {timeout} seconds", RC_TIMEOUT

    except FileNotFoundError:
        log.debug(f"Command not found: {command[0]}")
        return "", f"Command not found: {command[0]}", RC_NOT_FOUND

    except PermissionError as e:
        log.error(f"Permission denied: {display_cmd}: {e}")
        return "", f"Permission denied: {e}", RC_PERMISSION

    except OSError as e:
        log.error(f"Could not run {display_cmd}: {e}", exc_info=True)
        return "", str(e), 1


def safe_command_output(
    command: List[str],
    default: Optional[str] = None,
    runner=run_command,
    **kwargs
) -> Optional[str]:
    """
    Runs a command and returns its stripped stdout, or `default` when the
    command fails or prints nothing.

    Examples:
        >>> kernel = safe_command_output(["uname", "-r"], default="unknown")
    """
    stdout, _, returncode = runner(command, **kwargs)

    if returncode == 0 and stdout.strip():
        return stdout.strip()

    return default
