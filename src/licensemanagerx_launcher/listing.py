"""
Directory listing shown when the main app cannot be found.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass
class PackageListing:
    root: Path
    folders: List[str]
    files: List[str]
    subdir_name: str
    # None when the target subfolder does not exist
    subdir_files: Optional[List[str]] = None


def _names(directory: Path, want_dirs: bool) -> List[str]:
    return sorted(entry.name for entry in directory.iterdir() if entry.is_dir() == want_dirs)


def collect_listing(root: Path, subdir_name: str) -> PackageListing:
    listing = PackageListing(
        root=root,
        folders=_names(root, want_dirs=True),
        files=_names(root, want_dirs=False),
        subdir_name=subdir_name,
    )
    subdir = root / subdir_name
    if subdir.is_dir():
        listing.subdir_files = _names(subdir, want_dirs=False)
    return listing


def render_listing(listing: PackageListing) -> str:
    lines = [f"📦 Contents of {listing.root}:", "", "Folders:"]
    lines += [f"  📁 {name}" for name in listing.folders]
    lines += ["", "Files:"]
    lines += [f"  📄 {name}" for name in listing.files]
    lines.append("")
    if listing.subdir_files is not None:
        lines.append(f"📂 Contents of {listing.subdir_name}/:")
        lines += [f"  📄 {name}" for name in listing.subdir_files]
    else:
        lines.append(f"🔍 Subfolder '{listing.subdir_name}' not found.")
    return "\n".join(lines) + "\n"


__all__ = ["PackageListing", "collect_listing", "render_listing"]
