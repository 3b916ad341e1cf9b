"""Path helpers shared by the theme scanners and the icon finder."""

from __future__ import annotations

# Recognised image extensions, in order of preference.
ICON_TYPES: tuple[str, ...] = (".png", ".svg", ".xpm")


def build_filename(*elements: str) -> str:
    """Join *elements* with single ``/`` separators.

    Unlike ``os.path.join`` an absolute element does not discard what
    came before it, so ``build_filename("/snap/foo", "/icon.png")`` is
    ``"/snap/foo/icon.png"``.  A leading separator on the first element
    and a trailing one on the last element are kept.
    """
    parts = [e for e in elements if e]
    if not parts:
        return ""

    result = "/".join(p.strip("/") for p in parts if p.strip("/"))
    if parts[0].startswith("/"):
        result = "/" + result
    if parts[-1].endswith("/") and not result.endswith("/"):
        result += "/"
    return result


def has_image_extension(filename: str, extensions: tuple[str, ...] = ICON_TYPES) -> bool:
    """Return True if *filename* already carries one of *extensions*."""
    return filename.endswith(extensions)
