"""Request path rules applied on top of the static file lookup."""
from __future__ import annotations

from pathlib import PurePosixPath

__all__ = [
    "hidden_segment",
]


def hidden_segment(path: str) -> str | None:
    """Return the first dotfile segment of `path`, or None.

    `path` is the normalised, root-relative path the static app looks up.
    "." and ".." are not dotfiles; whether ".." escapes the served root is
    decided by the lookup itself.
    """
    for part in PurePosixPath(path.replace("\\", "/")).parts:
        if part.startswith(".") and part not in (".", ".."):
            return part
    return None
