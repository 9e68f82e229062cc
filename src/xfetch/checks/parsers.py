"""
Text Extractors
===============

Pure string helpers used by the probes to normalise raw file lines and
command output.

Functions:
    extract_quoted_string()   - text between the first and last double quote
    extract_version_number()  - first run of digits and dots
    capitalize_first()        - upper-case the first character
    strip_prefix()            - drop a fixed leading prefix
    first_line()              - first line without its newline

License: MIT
"""

from typing import Optional

DIGITS = "0123456789"


def extract_quoted_string(line: str) -> Optional[str]:
    """
    Returns the text strictly between the first and last '"' in `line`.

    Returns None when the line holds fewer than two quotes. An empty pair
    of quotes gives an empty string, which is a value and not a failure.

    Examples:
        >>> extract_quoted_string('XYZ="hello world"')
        'hello world'
        >>> extract_quoted_string('A=""')
        ''
        >>> extract_quoted_string('A=plain') is None
        True
    """
    start = line.find('"')
    end = line.rfind('"')
    if start == -1 or end <= start:
        return None
    return line[start + 1:end]


def extract_version_number(text: str) -> str:
    """
    Returns the first run of digits and dots in `text`.

    Skips everything up to the first decimal digit, then takes digits and
    '.' until any other character. Returns '' if there is no digit.

    Examples:
        >>> extract_version_number("bash, version 5.1.16(1)-release")
        '5.1.16'
        >>> extract_version_number("v2")
        '2'
    """
    index = 0
    length = len(text)

    while index < length and text[index] not in DIGITS:
        index += 1

    start = index
    while index < length and (text[index] in DIGITS or text[index] == '.'):
        index += 1

    return text[start:index]


def capitalize_first(value: str) -> str:
    """
    Upper-cases the first character only; '' stays ''.

    Unlike str.capitalize() the rest of the string is left alone, so
    "X11" stays "X11".
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


def strip_prefix(text: str, prefix: str) -> str:
    if text.startswith(prefix):
        return text[len(prefix):]
    return text


def first_line(text: str) -> str:
    """First line of `text` without the trailing newline ('' for empty text)."""
    lines = text.splitlines()
    return lines[0] if lines else ""
