"""
xfetch - Desktop System Summary
===============================

Prints a short summary of the running Linux desktop: hostname, OS,
desktop environment, session type, kernel, uptime, window manager and
shell.

License: MIT
Python: >=3.8
"""

__version__ = "0.3.0"
__license__ = "MIT"
__description__ = "Fetch-style summary of the running Linux desktop system"

# Version tuple for programmatic access
VERSION = tuple(map(int, __version__.split('.')))

__all__ = [
    '__version__',
    '__license__',
    'main',
    'VERSION',
    'check_dependencies',
    'get_version_info',
]

import sys

if sys.version_info < (3, 8):
    raise RuntimeError(
        f"xfetch requires Python 3.8 or higher. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )


def check_dependencies():
    """
    Checks that the third-party packages are importable.

    Returns:
        Tuple[bool, List[str]]: (all_installed, missing_packages)
    """
    required_packages = {
        'rich': 'rich',
        'psutil': 'psutil',
        'Xlib': 'python-xlib',
    }

    missing = []

    for import_name, package_name in required_packages.items():
        try:
            __import__(import_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def get_version_info():
    """
    Returns:
        dict: version, Python version and dependency status
    """
    all_ok, missing = check_dependencies()

    return {
        'version': __version__,
        'version_tuple': VERSION,
        'python_version': f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        'dependencies_ok': all_ok,
        'missing_dependencies': missing
    }


from .main import main
