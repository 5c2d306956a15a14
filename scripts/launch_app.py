"""PyInstaller-friendly entry point for the LicenseManagerX launcher.

Build the console launcher into ``<package>/LicenseManagerX.Console/`` so the
main app is found at ``<package>/LicenseManagerX/LicenseManagerX.exe``:

    pyinstaller --onefile --console --name LicenseManagerX.Console scripts/launch_app.py

On Linux and macOS the main app carries no suffix and is looked up at
``<package>/LicenseManagerX/LicenseManagerX``.  Started without arguments the
app runs detached in its own session; any arguments are passed through
verbatim and the launcher waits for the app to exit.
"""

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from licensemanagerx_launcher.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
