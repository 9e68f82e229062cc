"""
Display Server Connections
==========================

Thin wrappers around the two windowing-system client connections the
window manager and session probes need.

Backends:
    DisplayBackend       - interface the probes depend on
    XlibDisplayBackend   - X11 through python-xlib, Wayland through the
                           compositor's UNIX socket

Every method opens its own connection and closes it before returning.

License: MIT
"""

import os
import socket
import logging
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from Xlib import X, Xatom
from Xlib import display as xdisplay
from Xlib.error import DisplayError, ConnectionClosedError, XauthError, XError

# Logger
log = logging.getLogger(__name__)

# Socket name libwayland falls back to when WAYLAND_DISPLAY is unset
DEFAULT_WAYLAND_DISPLAY = "wayland-0"


class DisplayUnavailableError(Exception):
    """Raised when no connection to the X display server can be opened."""


# =============================================================================
# INTERFACE
# =============================================================================

class DisplayBackend(ABC):
    @abstractmethod
    def try_connect_legacy(self) -> bool:
        """True if an X11 display connection can be opened."""

    @abstractmethod
    def try_connect_modern(self) -> bool:
        """True if a Wayland compositor connection can be opened."""

    @abstractmethod
    def query_root_window_name(self) -> Optional[str]:
        """
        Returns the window manager name advertised on the X root window.

        Raises:
            DisplayUnavailableError: The X display could not be opened.
        """


# =============================================================================
# REAL IMPLEMENTATION
# =============================================================================

class XlibDisplayBackend(DisplayBackend):
    """
    Display backend for a real session.

    The environment mapping decides which servers are addressed
    (DISPLAY, WAYLAND_DISPLAY, XDG_RUNTIME_DIR); nothing is read from
    os.environ directly.
    """

    def __init__(self, environ: Mapping[str, str]):
        self._environ = environ

    # -- X11 ---------------------------------------------------------------

    def _open_x_display(self) -> xdisplay.Display:
        name = self._environ.get("DISPLAY")
        if not name:
            raise DisplayUnavailableError("DISPLAY is not set")
        try:
            return xdisplay.Display(name)
        except (DisplayError, ConnectionClosedError, XauthError, OSError) as e:
            raise DisplayUnavailableError(f"cannot open display {name}: {e}") from e

    def try_connect_legacy(self) -> bool:
        try:
            conn = self._open_x_display()
        except DisplayUnavailableError as e:
            log.debug(f"X11 connection failed: {e}")
            return False
        conn.close()
        return True

    def query_root_window_name(self) -> Optional[str]:
        conn = self._open_x_display()
        try:
            root = conn.screen().root
            utf8_string = conn.intern_atom("UTF8_STRING")
            net_wm_name = conn.intern_atom("_NET_WM_NAME")
            wm_check = conn.intern_atom("_NET_SUPPORTING_WM_CHECK")

            # EWMH window managers publish their name on a child window
            # referenced from the root.
            target = root
            name = None
            check = root.get_full_property(wm_check, Xatom.WINDOW)
            if check is not None and len(check.value) > 0 and check.value[0] != X.NONE:
                target = conn.create_resource_object("window", check.value[0])
                try:
                    name = _read_utf8_property(target, net_wm_name, utf8_string)
                except XError as e:
                    # Stale check window; the root may still carry the name.
                    log.debug(f"_NET_SUPPORTING_WM_CHECK window unreadable: {e}")
            else:
                name = _read_utf8_property(root, net_wm_name, utf8_string)

            if name is None and target is not root:
                name = _read_utf8_property(root, net_wm_name, utf8_string)
            return name
        except (XError, ConnectionClosedError) as e:
            log.debug(f"_NET_WM_NAME query failed: {e}")
            return None
        finally:
            conn.close()

    # -- Wayland -----------------------------------------------------------

    def _wayland_socket_path(self) -> Optional[str]:
        name = self._environ.get("WAYLAND_DISPLAY") or DEFAULT_WAYLAND_DISPLAY
        if os.path.isabs(name):
            return name
        runtime_dir = self._environ.get("XDG_RUNTIME_DIR")
        if not runtime_dir:
            return None
        return os.path.join(runtime_dir, name)

    def try_connect_modern(self) -> bool:
        path = self._wayland_socket_path()
        if path is None:
            log.debug("XDG_RUNTIME_DIR is not set, skipping Wayland probe")
            return False

        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            try:
                sock.connect(path)
            except OSError as e:
                log.debug(f"Wayland connection to {path} failed: {e}")
                return False
        return True


def _read_utf8_property(window, atom: int, utf8_string: int) -> Optional[str]:
    prop = window.get_full_property(atom, utf8_string)
    if prop is None or not prop.value:
        return None

    value = prop.value
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    value = str(value).strip("\x00").strip()
    return value or None
