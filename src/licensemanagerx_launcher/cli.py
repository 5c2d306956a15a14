"""
Command-line entry point for the LicenseManagerX launcher.

The launcher has no options of its own: every argument is handed to the
main app untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

from .launcher import LauncherConfig, launch


def setup_logging(level: int = logging.WARNING) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def cli(argv: Optional[Iterable[str]] = None, config: Optional[LauncherConfig] = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    result = launch(args, config or LauncherConfig.default())
    return result.exit_code


def main() -> int:
    setup_logging()
    return cli()


if __name__ == "__main__":
    raise SystemExit(main())
