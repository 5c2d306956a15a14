"""LicenseManagerX launcher package metadata and convenience exports."""

from .launcher import APP_NAME, LauncherConfig, LaunchResult, launch
from .cli import cli, main

__all__ = ["APP_NAME", "LauncherConfig", "LaunchResult", "launch", "cli", "main"]
