# Test configuration for pytest
#
# Tests require the package to be installed: `pip install -e .[test]`.

import sys

import psutil
import pytest

from licensemanagerx_launcher.launcher import LauncherConfig


def pytest_configure(config):
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "unix: mark test to run only on Unix")
    config.addinivalue_line("markers", "windows: mark test to run only on Windows")


def pytest_collection_modifyitems(config, items):
    """Skip platform-specific tests on incompatible platforms."""
    is_windows = sys.platform.startswith("win")
    skip_unix = pytest.mark.skip(reason="Unix-only test")
    skip_windows = pytest.mark.skip(reason="Windows-only test")

    for item in items:
        if "unix" in item.keywords and is_windows:
            item.add_marker(skip_unix)
        if "windows" in item.keywords and not is_windows:
            item.add_marker(skip_windows)


class FakePopen:
    """Records spawn calls instead of starting processes."""

    calls = []
    exit_status = 0

    def __init__(self, cmd, **kwargs):
        self.cmd = cmd
        self.kwargs = kwargs
        self.pid = 4242
        self.returncode = None
        self.waited = False
        FakePopen.calls.append(self)

    def wait(self, timeout=None):
        self.waited = True
        self.returncode = FakePopen.exit_status
        return self.returncode


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    FakePopen.exit_status = 0
    monkeypatch.setattr(psutil, "Popen", FakePopen)
    return FakePopen


@pytest.fixture
def package_dir(tmp_path):
    """An installed package tree with the launcher folder but no main app."""
    root = tmp_path / "app"
    (root / "launcher").mkdir(parents=True)
    (root / "launcher" / "launcher").write_text("")
    return root


@pytest.fixture
def config(package_dir):
    return LauncherConfig.for_root(package_dir, exe_suffix=".exe")


@pytest.fixture
def installed_target(package_dir, config):
    target = config.target_path
    target.parent.mkdir(parents=True)
    target.write_text("")
    return target
