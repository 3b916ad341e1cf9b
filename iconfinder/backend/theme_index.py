"""Read an icon theme's ``index.theme`` into sized search directories.

The index is a key file with one ``[Icon Theme]`` group whose
``Directories`` key lists the theme's sub-directories, comma separated.
Each listed directory has its own group describing it::

    [Icon Theme]
    Name=Hicolor
    Directories=48x48/apps,scalable/apps,48x48/actions

    [48x48/apps]
    Size=48
    Context=Applications
    Type=Threshold

    [scalable/apps]
    MinSize=1
    Size=128
    MaxSize=256
    Context=Applications
    Type=Scalable

Only ``Applications`` directories are of interest here.  The pixel size
used to rank a directory depends on its ``Type``:

* ``Fixed``     → ``Size``
* ``Scalable``  → ``MaxSize``
* ``Threshold`` → ``Size + Threshold`` (``Threshold`` defaults to 2)

Parsing never raises: a missing or malformed index simply yields fewer
(or no) directories, and the caller falls back to scanning the theme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib  # noqa: E402

from iconfinder.models.candidate import CandidateDirectory
from iconfinder.utils.paths import build_filename

log = logging.getLogger(__name__)

THEME_INDEX_FILE = "index.theme"
ICON_THEME_GROUP = "Icon Theme"
APPLICATIONS_CONTEXT = "Applications"
DEFAULT_THRESHOLD = 2


@dataclass(frozen=True, slots=True)
class ThemeStanza:
    """One directory group of an ``index.theme`` file.

    Keys that are absent, or not valid integers for the numeric ones,
    are stored as ``None``.
    """

    name: str
    context: str | None = None
    type: str | None = None
    size: int | None = None
    max_size: int | None = None
    threshold: int | None = None

    def effective_size(self) -> int | None:
        """Return the ranking size for this directory, or ``None``.

        ``None`` means the stanza cannot be used: unknown ``Type`` or the
        key that type requires is missing.
        """
        if self.type == "Fixed":
            return self.size
        if self.type == "Scalable":
            return self.max_size
        if self.type == "Threshold":
            if self.size is None:
                return None
            threshold = self.threshold if self.threshold is not None else DEFAULT_THRESHOLD
            return self.size + threshold
        return None


# ---------------------------------------------------------------------------
# Key file access
# ---------------------------------------------------------------------------

def _get_string(keyfile: GLib.KeyFile, group: str, key: str) -> str | None:
    try:
        return keyfile.get_string(group, key)
    except GLib.Error:
        return None


def _get_integer(keyfile: GLib.KeyFile, group: str, key: str) -> int | None:
    try:
        return keyfile.get_integer(group, key)
    except GLib.Error:
        return None


def parse_theme_index(index_path: Path | str) -> list[ThemeStanza]:
    """Parse *index_path* and return its directory stanzas in listed order.

    A fresh ``GLib.KeyFile`` is used for every call, so the result shares
    no state with any other parse.  Returns an empty list if the file is
    missing, unreadable, not a valid key file, or has no ``Directories``
    key.  Directories listed without a matching group are left out.
    """
    keyfile = GLib.KeyFile.new()
    try:
        keyfile.load_from_file(str(index_path), GLib.KeyFileFlags.NONE)
    except GLib.Error as exc:
        log.debug("Unable to load theme file %s: %s", index_path, exc.message)
        return []

    keyfile.set_list_separator(ord(","))
    try:
        directories = keyfile.get_string_list(ICON_THEME_GROUP, "Directories")
    except GLib.Error:
        log.debug("Theme file %s didn't have any directories", index_path)
        return []

    stanzas: list[ThemeStanza] = []
    for raw in directories:
        name = raw.strip()
        if not name:
            continue
        if not keyfile.has_group(name):
            log.debug("Theme file %s lists %r without a group for it", index_path, name)
            continue
        stanzas.append(ThemeStanza(
            name=name,
            context=_get_string(keyfile, name, "Context"),
            type=_get_string(keyfile, name, "Type"),
            size=_get_integer(keyfile, name, "Size"),
            max_size=_get_integer(keyfile, name, "MaxSize"),
            threshold=_get_integer(keyfile, name, "Threshold"),
        ))
    return stanzas


# ---------------------------------------------------------------------------
# Search directories
# ---------------------------------------------------------------------------

def theme_index_directories(theme_root: str) -> list[CandidateDirectory]:
    """Return the sized ``Applications`` directories described by the
    ``index.theme`` inside *theme_root*.

    Stanzas with another context, an unknown type or no usable size are
    skipped, as are directories that do not exist on disk.  Order follows
    the ``Directories`` key.
    """
    index_path = build_filename(theme_root, THEME_INDEX_FILE)
    results: list[CandidateDirectory] = []

    for stanza in parse_theme_index(index_path):
        if stanza.context != APPLICATIONS_CONTEXT:
            continue
        size = stanza.effective_size()
        if size is None:
            log.debug("Skipping %s in %s: no usable size", stanza.name, index_path)
            continue
        path = build_filename(theme_root, stanza.name)
        if Path(path).is_dir():
            results.append(CandidateDirectory(path=path, size=size))

    return results
