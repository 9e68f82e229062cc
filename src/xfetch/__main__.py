"""
xfetch - Module Entry Point
===========================

Usage:
    python -m xfetch
    python -m xfetch --format table
"""

import sys

if __name__ == "__main__":
    from xfetch.main import main
    sys.exit(main())
