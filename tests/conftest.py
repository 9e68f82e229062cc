"""Shared test fakes: command runner, display backend, context factory."""

from __future__ import annotations

from collections import namedtuple

import pytest

from xfetch.checks.models import ProbeContext
from xfetch.utils.display import DisplayBackend, DisplayUnavailableError


FakeUname = namedtuple("FakeUname", "system node release")


class FakeRunner:
    """Returns canned (stdout, stderr, returncode) per command; unknown commands exit 127."""

    def __init__(self, outputs=None):
        self.outputs = {tuple(cmd): result for cmd, result in (outputs or {}).items()}
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((tuple(command), kwargs))
        return self.outputs.get(tuple(command), ("", f"Command not found: {command[0]}", 127))


class FakeDisplay(DisplayBackend):
    def __init__(self, legacy=False, modern=False, root_name=None):
        self.legacy = legacy
        self.modern = modern
        self.root_name = root_name
        self.legacy_attempts = 0
        self.modern_attempts = 0

    def try_connect_legacy(self):
        self.legacy_attempts += 1
        return self.legacy

    def try_connect_modern(self):
        self.modern_attempts += 1
        return self.modern

    def query_root_window_name(self):
        if not self.legacy:
            raise DisplayUnavailableError("no X server in tests")
        return self.root_name


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_context(tmp_path):
    """Builds a ProbeContext whose files live under tmp_path."""

    def _make(
        environ=None,
        runner=None,
        display=None,
        os_release=None,
        hostname=None,
        comm=None,
        ppid=4242,
        uname=None,
        boot_time=None,
        clock=None,
    ):
        os_release_path = tmp_path / "os-release"
        if os_release is not None:
            os_release_path.write_text(os_release)

        hostname_path = tmp_path / "hostname"
        if hostname is not None:
            hostname_path.write_text(hostname)

        proc_root = tmp_path / "proc"
        if comm is not None:
            (proc_root / str(ppid)).mkdir(parents=True, exist_ok=True)
            (proc_root / str(ppid) / "comm").write_text(comm)

        return ProbeContext(
            environ=environ or {},
            ppid=ppid,
            os_release_path=str(os_release_path),
            hostname_path=str(hostname_path),
            proc_root=str(proc_root),
            runner=runner or FakeRunner(),
            display=display if display is not None else FakeDisplay(),
            uname=uname or (lambda: FakeUname("Linux", "testhost", "6.1.0-test")),
            boot_time=boot_time or (lambda: 1_000_000.0),
            clock=clock or (lambda: 1_000_000.0 + 3725),
        )

    return _make
