"""
xfetch - Main Program
Collects the desktop system facts and prints the report.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .checks import collect_facts, ProbeContext, ProbeMode, FatalProbeError
from .reporting import display_report, FORMATS

log = logging.getLogger(__name__)

DEBUG_ENV_VAR = "XFETCH_DEBUG"


# =============================================================================
# ARGUMENTS / LOGGING
# =============================================================================

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xfetch",
        description="Prints a short summary of the running desktop system",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  xfetch                        # plain report
  xfetch --format table         # framed table
  xfetch --mode commands        # use uname/uptime instead of system queries
        """
    )
    parser.add_argument(
        '--mode',
        choices=ProbeMode.choices(),
        default=ProbeMode.STRUCTURED.value,
        help="Where kernel, hostname and uptime come from (default: structured)"
    )
    parser.add_argument(
        '--format', '-f',
        dest='format',
        choices=FORMATS,
        default="plain",
        help="Output format (default: plain)"
    )
    parser.add_argument(
        '--os-release',
        metavar='FILE',
        help="os-release file to read (default: /etc/os-release)"
    )
    parser.add_argument(
        '--hostname-file',
        metavar='FILE',
        help="Hostname file used with --mode commands (default: /etc/hostname)"
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help="Show debug messages"
    )
    parser.add_argument(
        '--version',
        action='store_true',
        help="Show version information and exit"
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    debug = verbose or bool(os.environ.get(DEBUG_ENV_VAR))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s: %(message)s',
        stream=sys.stderr
    )


def show_version(console: Console) -> None:
    from . import get_version_info
    info = get_version_info()
    console.print(f"xfetch {info['version']} (Python {info['python_version']})", highlight=False)
    if not info['dependencies_ok']:
        console.print(f"Missing dependencies: {', '.join(info['missing_dependencies'])}", highlight=False)


# =============================================================================
# MAIN
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Program entry point. Returns the process exit status."""
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    console = Console(soft_wrap=True, emoji=False)

    if args.version:
        show_version(console)
        return 0

    mode = ProbeMode(args.mode)
    ctx = ProbeContext.from_system(
        os_release_path=args.os_release,
        hostname_path=args.hostname_file,
    )

    try:
        facts = collect_facts(ctx, mode)
    except FatalProbeError as e:
        log.debug("Fatal probe failure", exc_info=True)
        Console(stderr=True, soft_wrap=True).print(f"[bold red]xfetch: fatal:[/bold red] {escape(str(e))}")
        return 1

    display_report(console, facts, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
