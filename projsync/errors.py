"""Save-time error taxonomy.

Every failure that can happen during a save ends up as a plain,
human-readable string in the save's error list.  The helpers below are the
only places those strings are built, so the wording stays uniform across the
writer, the exporter runner and the exporters themselves.
"""

from __future__ import annotations

from pathlib import Path


class SaveError(Exception):
    """Raised by an exporter when it cannot produce its output.

    The exporter runner catches it and records ``message`` in the save's
    error list; it never aborts the remaining exporters.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ---------------------------------------------------------------------------
# Message factories
# ---------------------------------------------------------------------------


def directory_unwritable(path: str | Path) -> str:
    """The generated-code folder could not be created."""
    return f"Couldn't create folder: {Path(path)}"


def target_folder_unwritable(path: str | Path) -> str:
    """An exporter's target folder could not be created."""
    return f"Can't create folder: {Path(path)}"


def file_unwritable(path: str | Path) -> str:
    """A diff-and-write operation failed."""
    return f"Can't write to file: {Path(path)}"


def resources_unwritable(path: str | Path) -> str:
    return f"Can't create binary resources file: {Path(path)}"
