"""
Core launch logic for the LicenseManagerX launcher.

The launcher lives in its own folder inside the installed package and starts
the main application from the sibling ``LicenseManagerX`` folder.  Without
arguments the application is started detached (GUI mode); with arguments it
is started as a child process that receives every argument unchanged and the
launcher waits for it to exit.  This module has no console entry point of
its own so both the CLI and the frozen launcher script can reuse it.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

import psutil

from .listing import collect_listing, render_listing

APP_NAME = "LicenseManagerX"
TARGET_NAME = APP_NAME
EXE_SUFFIX = ".exe" if os.name == "nt" else ""

MISSING = "missing"
DETACHED = "detached"
COMPLETED = "completed"

logger = logging.getLogger(__name__)


def _default_launcher_path() -> Path:
    if getattr(sys, "frozen", False):  # PyInstaller/py2exe
        return Path(sys.executable)
    return Path(sys.argv[0] or __file__)


def package_root(launcher_path: Path | str) -> Path:
    """Directory one level above the folder holding the launcher binary."""
    return Path(os.path.abspath(launcher_path)).parent.parent


@dataclass(frozen=True)
class LauncherConfig:
    launcher_path: Path
    target_dir: str = TARGET_NAME
    target_name: str = TARGET_NAME
    exe_suffix: str = EXE_SUFFIX
    propagate_exit_code: bool = False
    missing_exit_code: int = 0

    @classmethod
    def default(cls) -> "LauncherConfig":
        return cls(launcher_path=_default_launcher_path())

    @classmethod
    def for_root(cls, root: Path | str, **overrides) -> "LauncherConfig":
        """Config whose package root is ``root`` (launcher assumed in ``root/launcher``)."""
        return cls(launcher_path=Path(root) / "launcher" / "launcher", **overrides)

    @property
    def package_root(self) -> Path:
        return package_root(self.launcher_path)

    @property
    def target_subdir(self) -> Path:
        return self.package_root / self.target_dir

    @property
    def target_path(self) -> Path:
        return self.target_subdir / (self.target_name + self.exe_suffix)


@dataclass
class LaunchResult:
    outcome: str
    target: Path
    pid: Optional[int] = None
    returncode: Optional[int] = None
    exit_code: int = 0


def exit_status(returncode: int) -> int:
    # POSIX reports signal deaths as -signum; shells report them as 128 + signum
    if returncode < 0:
        return 128 - returncode
    return returncode


def target_exists(config: LauncherConfig) -> bool:
    return config.target_path.is_file()


def _detach_kwargs() -> dict:
    if os.name == "nt":
        return {"creationflags": subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP}
    return {"start_new_session": True}


def spawn_detached(target: Path) -> int:
    """Start ``target`` with no arguments and return its pid without waiting."""
    proc = psutil.Popen(
        [str(target)],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        close_fds=True,
        **_detach_kwargs(),
    )
    logger.debug("Started %s detached (pid %s)", target, proc.pid)
    return proc.pid


def spawn_and_wait(target: Path, args: Sequence[str]) -> tuple[int, int]:
    """Run ``target`` with ``args`` as separate argv entries and block until it exits.

    The child inherits the launcher's console.  Returns ``(pid, returncode)``.
    """
    cmd: List[str] = [str(target), *args]
    proc = psutil.Popen(cmd, shell=False)
    logger.debug("Started %s with %d argument(s) (pid %s)", target, len(args), proc.pid)
    returncode = proc.wait()
    logger.debug("pid %s exited with %s", proc.pid, returncode)
    return proc.pid, returncode


def report_missing(config: LauncherConfig, out: TextIO, err: TextIO) -> None:
    print(f"❌ Could not find the main app at: {config.target_path}", file=err)
    listing = collect_listing(config.package_root, config.target_dir)
    out.write(render_listing(listing))
    out.flush()


def launch(
    args: Sequence[str],
    config: Optional[LauncherConfig] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> LaunchResult:
    config = config or LauncherConfig.default()
    out = out or sys.stdout
    err = err or sys.stderr
    target = config.target_path
    logger.debug("Package root %s, target %s", config.package_root, target)

    if not target_exists(config):
        logger.debug("Target missing, listing %s", config.package_root)
        report_missing(config, out, err)
        return LaunchResult(MISSING, target, exit_code=config.missing_exit_code)

    if not args:
        pid = spawn_detached(target)
        return LaunchResult(DETACHED, target, pid=pid)

    pid, returncode = spawn_and_wait(target, list(args))
    exit_code = exit_status(returncode) if config.propagate_exit_code else 0
    return LaunchResult(COMPLETED, target, pid=pid, returncode=returncode, exit_code=exit_code)


__all__ = [
    "APP_NAME",
    "TARGET_NAME",
    "EXE_SUFFIX",
    "MISSING",
    "DETACHED",
    "COMPLETED",
    "LauncherConfig",
    "LaunchResult",
    "package_root",
    "exit_status",
    "target_exists",
    "spawn_detached",
    "spawn_and_wait",
    "report_missing",
    "launch",
]
