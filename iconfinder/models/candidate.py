"""A directory that may hold icons, tagged with its nominal pixel size."""

from __future__ import annotations

from dataclasses import dataclass

# Size for directories whose icon resolution is not known: a theme's top
# level, the bare icons/ directory and pixmaps/.
UNKNOWN_SIZE = 1

# A "scalable" directory found without an index.theme to describe it.
SCALABLE_SIZE = 256


@dataclass(frozen=True, slots=True)
class CandidateDirectory:
    """One entry of a search path.

    ``size`` is only a priority key used to order the search; it says
    nothing about the images actually stored in ``path``.
    """

    path: str
    size: int
