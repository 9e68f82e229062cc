"""Tests for xfetch.checks.check_display: the window manager decision table."""

from __future__ import annotations

import pytest

from xfetch.checks.check_display import (
    GENERIC_COMPOSITOR,
    GNOME_COMPOSITOR,
    KDE_COMPOSITOR,
    UNKNOWN_WM,
    UNKNOWN_X11_WM,
    detect_window_manager,
)

from tests.conftest import FakeDisplay


class TestWayland:
    @pytest.mark.parametrize("session_name", ["gnome", "plasma", "", "anything"])
    def test_gnome_regardless_of_session_name(self, make_context, session_name):
        ctx = make_context(environ={
            "XDG_SESSION_TYPE": "wayland",
            "XDG_CURRENT_DESKTOP": "ubuntu:GNOME",
            "DESKTOP_SESSION": session_name,
        })
        assert detect_window_manager(ctx) == GNOME_COMPOSITOR

    def test_kde_plasma(self, make_context):
        ctx = make_context(environ={
            "XDG_SESSION_TYPE": "wayland",
            "XDG_CURRENT_DESKTOP": "KDE",
            "DESKTOP_SESSION": "plasmawayland",
        })
        assert detect_window_manager(ctx) == KDE_COMPOSITOR

    def test_kde_without_plasma_session_is_generic(self, make_context):
        ctx = make_context(environ={
            "XDG_SESSION_TYPE": "wayland",
            "XDG_CURRENT_DESKTOP": "KDE",
        })
        assert detect_window_manager(ctx) == GENERIC_COMPOSITOR

    def test_other_compositor_is_generic(self, make_context):
        ctx = make_context(environ={
            "XDG_SESSION_TYPE": "wayland",
            "XDG_CURRENT_DESKTOP": "sway",
        })
        assert detect_window_manager(ctx) == GENERIC_COMPOSITOR

    def test_no_display_connection_made(self, make_context):
        display = FakeDisplay(legacy=True, root_name="should-not-be-used")
        ctx = make_context(environ={"XDG_SESSION_TYPE": "wayland"}, display=display)
        detect_window_manager(ctx)
        assert display.legacy_attempts == 0


class TestX11:
    def test_name_from_root_window(self, make_context):
        ctx = make_context(
            environ={"XDG_SESSION_TYPE": "x11"},
            display=FakeDisplay(legacy=True, root_name="i3"),
        )
        assert detect_window_manager(ctx) == "i3"

    def test_display_unreachable(self, make_context):
        ctx = make_context(environ={"XDG_SESSION_TYPE": "x11"}, display=FakeDisplay(legacy=False))
        assert detect_window_manager(ctx) == UNKNOWN_X11_WM

    def test_property_missing(self, make_context):
        ctx = make_context(
            environ={"XDG_SESSION_TYPE": "x11"},
            display=FakeDisplay(legacy=True, root_name=None),
        )
        assert detect_window_manager(ctx) == UNKNOWN_X11_WM

    def test_probed_x11_session(self, make_context):
        ctx = make_context(display=FakeDisplay(legacy=True, root_name="Openbox"))
        assert detect_window_manager(ctx) == "Openbox"


class TestOther:
    def test_no_session_and_no_connections(self, make_context):
        ctx = make_context(environ={}, display=FakeDisplay())
        assert detect_window_manager(ctx) == UNKNOWN_WM

    def test_tty_session(self, make_context):
        ctx = make_context(environ={"XDG_SESSION_TYPE": "tty"})
        assert detect_window_manager(ctx) == UNKNOWN_WM
