"""Find the best icon file for an application.

An ``IconFinder`` is built for one base root, the directory an
application's icons, themes and pixmaps live under (for instance a snap
or click package's install directory).  Building it computes the search
path once; each ``find`` call then only checks for files.

Icon identifiers come in two forms:

* **Explicit paths** (``/usr/share/pixmaps/foo.png``) are looked up as
  given, then relative to the base root, then by reconciling a prefix
  the path shares with the base root (see :func:`merge_file_paths`).
* **Bare names** (``foo`` or ``foo.svg``) are looked up in the search
  path, largest icon size first.  Without an extension ``.png``,
  ``.svg`` and ``.xpm`` are tried in that order.

A lookup that finds nothing returns ``None``.

Usage::

    finder = IconFinder("/snap/foo/current/usr/share")
    finder.find("foo")          # → ".../icons/hicolor/256x256/apps/foo.png"
"""

from __future__ import annotations

import logging
from pathlib import Path

from iconfinder.backend.search_path import THEMES, build_search_path
from iconfinder.models.candidate import CandidateDirectory
from iconfinder.utils.paths import ICON_TYPES, build_filename, has_image_extension

log = logging.getLogger(__name__)


class IconFinder:
    """Resolve icon identifiers against one base root."""

    def __init__(self, base_path: str, *, themes: tuple[str, ...] = THEMES):
        self._base_path = base_path
        self._search_paths = build_search_path(base_path, themes)

    @property
    def search_paths(self) -> tuple[CandidateDirectory, ...]:
        """Candidate directories, largest size first."""
        return self._search_paths

    def find(self, icon_name: str) -> str | None:
        """Return the path of the best file for *icon_name*, or ``None``."""
        if not icon_name:
            log.debug("Empty icon name for %s", self._base_path)
            return None

        if icon_name.startswith("/"):
            found = find_explicit_file(self._base_path, icon_name)
            if found is None:
                log.debug("Explicit icon %s not found for %s", icon_name, self._base_path)
            return found

        # Sorted largest first, so the first directory holding the icon wins.
        # Directories sized 0 or less are never searched.
        for candidate in self._search_paths:
            if candidate.size <= 0:
                break
            found = find_existing_icon(candidate.path, icon_name)
            if found is not None:
                return found
        return None


# ---------------------------------------------------------------------------
# Probing
# ---------------------------------------------------------------------------

def find_existing_icon(
    directory: str,
    icon_name: str,
    extensions: tuple[str, ...] = ICON_TYPES,
) -> str | None:
    """Return the file in *directory* that satisfies *icon_name*, if any.

    A name that already ends in a known extension is only checked as-is.
    Otherwise each extension is tried in order and the first existing
    file is returned.
    """
    if has_image_extension(icon_name, extensions):
        path = build_filename(directory, icon_name)
        return path if Path(path).is_file() else None

    for ext in extensions:
        path = build_filename(directory, icon_name + ext)
        if Path(path).is_file():
            return path
    return None


def find_explicit_file(base_path: str, icon_name: str) -> str | None:
    """Locate an absolute *icon_name* that may be expressed for another root.

    Tried in order: *icon_name* itself, *icon_name* under *base_path*, and
    the result of :func:`merge_file_paths`.
    """
    if Path(icon_name).is_file():
        return icon_name

    with_base = build_filename(base_path, icon_name)
    if Path(with_base).is_file():
        return with_base

    return merge_file_paths(base_path, icon_name)


def merge_file_paths(parent: str, child: str) -> str | None:
    """Join *child* onto the part of *parent* it does not already repeat.

    Icon paths baked into package metadata often carry the install
    prefix of the package itself, e.g. a base root of::

        /tmp/root/opt/click.ubuntu.com/com.foo.bar/1.0

    and an icon of ``/opt/click.ubuntu.com/com.foo.bar/1.0/icon.png``.
    The separators of *parent* are walked from the end; the first suffix
    of *parent* that does not occur in *child* marks where the two
    diverge, and *child* is joined onto *parent* up to the previous (more
    specific) separator, here ``/tmp/root``.

    Only that single join is attempted.  Returns the joined path if it
    exists, else ``None``.
    """
    slash = parent.rfind("/")
    prev: int | None = None
    while slash != -1:
        if prev is not None and parent[slash:] not in child:
            merged = build_filename(parent[:prev], child)
            if Path(merged).is_file():
                return merged
            break
        prev = slash
        slash = parent.rfind("/", 0, slash)
    return None
