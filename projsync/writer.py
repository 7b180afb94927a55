"""Idempotent file writes and registration into the generated-files manifest.

Every file the save pipeline produces goes through
``overwrite_file_if_different``: the existing bytes are compared with the new
content first, and the file is only touched when they differ.  Regenerating
an unchanged project therefore leaves modification times alone, which keeps
external build tools from rebuilding needlessly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from . import errors
from .context import SaveContext
from .manifest import ManifestItem


def overwrite_file_if_different(path: str | Path, data: bytes) -> bool:
    """Write *data* to *path* unless the file already holds exactly that.

    Returns:
        ``True`` if the file now holds *data* (written or already identical),
        ``False`` if it could not be written.
    """
    file_path = Path(path)
    try:
        if file_path.is_file() and file_path.read_bytes() == data:
            return True
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)
    except OSError:
        return False
    return True


def _encode(content: str | bytes) -> bytes:
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


class ArtifactWriter:
    """Writes generated files and tracks them in the save's manifest.

    This is the only path by which save stages put files into the
    generated-code folder.  Failures never raise: they are recorded in the
    context's error list and the affected file is left out of the manifest.
    """

    def __init__(self, context: SaveContext) -> None:
        self.context = context

    @property
    def generated_code_folder(self) -> Path:
        return self.context.generated_code_folder

    def replace_file_if_different(self, path: str | Path, content: str | bytes) -> bool:
        """Diff-and-write *path*; record an error on failure."""
        if not overwrite_file_if_different(path, _encode(content)):
            self.context.add_error(errors.file_unwritable(path))
            return False
        return True

    def save_generated_file(
        self,
        relative_path: str,
        content: str | bytes,
        *,
        compile: bool = True,
    ) -> Optional[ManifestItem]:
        """Write a file under the generated-code folder and register it.

        Args:
            relative_path: Path relative to the generated-code folder.
            content: Full new file content.
            compile: Whether toolchains should compile the file.

        Returns:
            The manifest entry for the file, or ``None`` if the folder or
            the file could not be written.
        """
        try:
            self.generated_code_folder.mkdir(parents=True, exist_ok=True)
        except OSError:
            self.context.add_error(errors.directory_unwritable(self.generated_code_folder))
            return None

        file_path = self.generated_code_folder / relative_path
        if not self.replace_file_if_different(file_path, content):
            return None

        return self.add_file_to_generated_group(file_path, compile=compile)

    def add_file_to_generated_group(self, path: str | Path, *, compile: bool = True) -> ManifestItem:
        """Register *path*; registering an already-present path is a no-op."""
        return self.context.generated_group.add_file(path, compile=compile)
