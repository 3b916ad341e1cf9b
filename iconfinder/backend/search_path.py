"""Assemble the ordered list of directories an icon is looked up in.

For a base root ``B`` the search path is made of, in discovery order:

1. ``B/icons/hicolor``   and its sized sub-directories
2. ``B/icons/Humanity``  and its sized sub-directories
3. ``B/icons``           (size 1)
4. ``B/pixmaps/``        (size 1)

and is then sorted by size, largest first.  The sort is stable, so
directories of equal size keep the discovery order above; lookups rely
on that for ties.
"""

from __future__ import annotations

from pathlib import Path

from iconfinder.backend.theme_index import theme_index_directories
from iconfinder.backend.theme_scan import scan_theme_directories
from iconfinder.models.candidate import UNKNOWN_SIZE, CandidateDirectory
from iconfinder.utils.paths import build_filename

# Theme names searched, in priority order for equal sizes.
THEMES: tuple[str, ...] = ("hicolor", "Humanity")

ICONS_DIR = "/icons"
PIXMAPS_DIR = "/pixmaps/"


def theme_search_paths(theme_root: str) -> list[CandidateDirectory]:
    """Return the search directories contributed by one theme.

    Nothing when *theme_root* is not a directory.  Otherwise the root
    itself (size 1, for loose icons) followed by the directories from its
    ``index.theme``, or, only when the index gives none, the directories
    found by scanning the theme's layout.
    """
    if not Path(theme_root).is_dir():
        return []

    paths = [CandidateDirectory(path=theme_root, size=UNKNOWN_SIZE)]
    indexed = theme_index_directories(theme_root)
    if indexed:
        paths.extend(indexed)
    else:
        paths.extend(scan_theme_directories(theme_root))
    return paths


def build_search_path(
    base_path: str,
    themes: tuple[str, ...] = THEMES,
) -> tuple[CandidateDirectory, ...]:
    """Return every candidate directory under *base_path*, largest size first.

    A *base_path* that does not exist gives an empty tuple.
    """
    paths: list[CandidateDirectory] = []

    for theme in themes:
        paths.extend(theme_search_paths(build_filename(base_path, ICONS_DIR, theme)))

    for generic in (ICONS_DIR, PIXMAPS_DIR):
        path = build_filename(base_path, generic)
        if Path(path).is_dir():
            paths.append(CandidateDirectory(path=path, size=UNKNOWN_SIZE))

    return tuple(sorted(paths, key=lambda c: c.size, reverse=True))
