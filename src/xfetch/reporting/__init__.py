"""
xfetch - Reporting
==================

Plain text, table and JSON output of the collected facts.
"""

__all__ = [
    'display_report',
    'create_info_table',
    'FORMATS',
]

from .reporter import display_report, create_info_table, FORMATS
