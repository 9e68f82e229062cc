"""
Window Manager Detection
========================

Chooses how to name the window manager (or Wayland compositor) from the
session type:

    Wayland -> matched against known desktops, no connection is made
    X11     -> _NET_WM_NAME read from the X server
    other   -> "Unknown"

The desktop table is a heuristic; desktops it does not list fall back to
the generic compositor label.

License: MIT
"""

import logging

from .enums import SessionType
from .models import ProbeContext
from .check_system import get_session_type
from ..utils.display import DisplayUnavailableError

log = logging.getLogger(__name__)

# Labels
GNOME_COMPOSITOR = "Mutter (GNOME Shell)"
KDE_COMPOSITOR = "KWin"
GENERIC_COMPOSITOR = "Wayland Compositor"
UNKNOWN_X11_WM = "Unknown WM"
UNKNOWN_WM = "Unknown"

# Markers
GNOME_MARKER = "GNOME"
KDE_MARKER = "KDE"
KDE_SESSION_MARKERS = ("plasma", "kde")


def detect_wayland_compositor(ctx: ProbeContext) -> str:
    desktop = ctx.environ.get("XDG_CURRENT_DESKTOP", "")
    session_name = ctx.environ.get("DESKTOP_SESSION", "").lower()

    if GNOME_MARKER in desktop:
        return GNOME_COMPOSITOR
    if KDE_MARKER in desktop and any(marker in session_name for marker in KDE_SESSION_MARKERS):
        return KDE_COMPOSITOR
    return GENERIC_COMPOSITOR


def detect_x11_window_manager(ctx: ProbeContext) -> str:
    if ctx.display is None:
        return UNKNOWN_X11_WM

    try:
        name = ctx.display.query_root_window_name()
    except DisplayUnavailableError as e:
        log.warning(f"X display unavailable: {e}")
        return UNKNOWN_X11_WM

    return name or UNKNOWN_X11_WM


def detect_window_manager(ctx: ProbeContext) -> str:
    session = get_session_type(ctx)

    if SessionType.WAYLAND.matches(session):
        return detect_wayland_compositor(ctx)
    if SessionType.X11.matches(session):
        return detect_x11_window_manager(ctx)

    log.debug(f"No window manager detection for session type '{session}'")
    return UNKNOWN_WM
