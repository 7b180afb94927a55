"""Clean-out of the generated-code folder.

Before a save regenerates its output, everything left in the generated-code
folder by a previous save is removed, except entries on a keep-list
(version-control metadata, build-system files the user placed there).  A
folder that still holds a kept entry survives, as do all of its ancestors.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class DirectoryEntries(Protocol):
    """Access to directory contents, so the traversal can run on fakes."""

    def list_children(self, directory: Path) -> list[tuple[Path, bool]]:
        """Return ``(path, is_directory)`` for each immediate child."""
        ...

    def delete(self, path: Path) -> None:
        """Delete a file, or a directory with everything under it."""
        ...


class FileSystemEntries:
    """``DirectoryEntries`` backed by the real filesystem.

    Symlinks are reported as plain files so a link to a folder elsewhere is
    unlinked rather than followed.
    """

    def list_children(self, directory: Path) -> list[tuple[Path, bool]]:
        return [
            (child, child.is_dir() and not child.is_symlink())
            for child in sorted(directory.iterdir())
        ]

    def delete(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()


class DirectoryReconciler:
    """Prunes a folder of everything not on a keep-list."""

    def __init__(
        self,
        keep_names: Iterable[str],
        entries: DirectoryEntries | None = None,
    ) -> None:
        self.keep_names = frozenset(keep_names)
        self.entries = entries if entries is not None else FileSystemEntries()

    def should_keep(self, name: str) -> bool:
        return name in self.keep_names

    def reconcile(self, directory: str | Path) -> bool:
        """Recursively delete non-kept content of *directory*.

        Returns:
            ``True`` when nothing was kept, i.e. *directory* is now empty and
            may itself be deleted by the caller.
        """
        folder_is_now_empty = True
        to_delete: list[Path] = []

        for child, is_dir in self.entries.list_children(Path(directory)):
            if self.should_keep(child.name):
                folder_is_now_empty = False
            elif is_dir:
                if self.reconcile(child):
                    to_delete.append(child)
                else:
                    folder_is_now_empty = False
            else:
                to_delete.append(child)

        for path in reversed(to_delete):
            self.entries.delete(path)

        return folder_is_now_empty


def reconcile(
    directory: str | Path,
    keep_names: Iterable[str],
    entries: DirectoryEntries | None = None,
) -> bool:
    """Convenience wrapper around ``DirectoryReconciler.reconcile``."""
    return DirectoryReconciler(keep_names, entries).reconcile(directory)
