"""Guess a theme's icon directories from its layout on disk.

Used only when a theme ships no usable ``index.theme``.  Every child of
the theme root that has an ``apps/`` sub-directory is considered:

* ``scalable/apps``  → size 256 (nothing better is known about it)
* ``NxN/apps``       → size N, both numbers equal
* anything else      → ignored
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from iconfinder.models.candidate import SCALABLE_SIZE, CandidateDirectory
from iconfinder.utils.paths import build_filename

log = logging.getLogger(__name__)

_SIZE_DIRNAME = re.compile(r"(\d+)x\1")


def _size_for_dirname(name: str) -> int | None:
    if name == "scalable":
        return SCALABLE_SIZE
    m = _SIZE_DIRNAME.fullmatch(name)
    if m is None:
        return None
    size = int(m.group(1))
    return size if size > 0 else None


def scan_theme_directories(theme_root: str) -> list[CandidateDirectory]:
    """Return ``<child>/apps`` directories of *theme_root* with inferred sizes.

    Children are visited in name order so the result does not depend on
    how the filesystem enumerates them.  An unreadable *theme_root*
    yields an empty list.
    """
    try:
        children = sorted(p.name for p in Path(theme_root).iterdir())
    except OSError as exc:
        log.debug("Unable to open directory %s because: %s", theme_root, exc)
        return []

    results: list[CandidateDirectory] = []
    for name in children:
        apps_dir = build_filename(theme_root, name, "apps")
        if not Path(apps_dir).is_dir():
            continue
        size = _size_for_dirname(name)
        if size is not None:
            results.append(CandidateDirectory(path=apps_dir, size=size))
    return results
