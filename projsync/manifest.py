"""Manifest of files produced by a save.

A ``ManifestGroup`` is a small tree: each group holds file entries and
nested subgroups.  The save pipeline owns one canonical group for the
generated-code folder; every exporter receives its own deep copy of it, so
whatever an exporter adds never leaks into the canonical tree or into the
next exporter's copy.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Literal, Optional, Union

from pydantic import BaseModel, Field


class ManifestItem(BaseModel):
    """A single file entry."""

    kind: Literal["file"] = "file"
    path: Path = Field(..., description="Absolute, resolved file path")
    compile: bool = Field(default=True, description="Whether toolchains should compile this file")

    @property
    def name(self) -> str:
        return self.path.name


class ManifestGroup(BaseModel):
    """A named group of file entries and subgroups."""

    kind: Literal["group"] = "group"
    name: str
    id: str = ""
    children: list[Union[ManifestItem, "ManifestGroup"]] = Field(default_factory=list)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def num_children(self) -> int:
        return len(self.children)

    def find_item_for_file(self, path: str | Path) -> Optional[ManifestItem]:
        """Search this group and every subgroup for *path*."""
        target = Path(path).resolve()
        for child in self.children:
            if isinstance(child, ManifestGroup):
                found = child.find_item_for_file(target)
                if found is not None:
                    return found
            elif child.path == target:
                return child
        return None

    def iter_files(self) -> Iterator[ManifestItem]:
        """Yield every file entry, depth-first, in child order."""
        for child in self.children:
            if isinstance(child, ManifestGroup):
                yield from child.iter_files()
            else:
                yield child

    def count_files(self) -> int:
        return sum(1 for _ in self.iter_files())

    def find_group(self, name: str) -> Optional["ManifestGroup"]:
        """Return the direct subgroup called *name*, if any."""
        for child in self.children:
            if isinstance(child, ManifestGroup) and child.name == name:
                return child
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_file(self, path: str | Path, compile: bool = True) -> ManifestItem:
        """Add *path* unless the tree already holds it; return its entry."""
        existing = self.find_item_for_file(path)
        if existing is not None:
            return existing

        item = ManifestItem(path=Path(path).resolve(), compile=compile)
        self.children.append(item)
        return item

    def add_group(self, name: str, id: str = "") -> "ManifestGroup":
        """Return the subgroup called *name*, creating it if needed."""
        group = self.find_group(name)
        if group is None:
            group = ManifestGroup(name=name, id=id)
            self.children.append(group)
        return group

    def sort_alphabetically(self, keep_groups_at_start: bool = True) -> None:
        """Sort direct children case-insensitively by name."""
        def key(child: Union[ManifestItem, ManifestGroup]) -> tuple[int, str, str]:
            rank = 0 if keep_groups_at_start and isinstance(child, ManifestGroup) else 1
            return (rank, child.name.lower(), child.name)

        self.children.sort(key=key)

    def sort_recursively(self) -> None:
        self.sort_alphabetically(keep_groups_at_start=True)
        for child in self.children:
            if isinstance(child, ManifestGroup):
                child.sort_recursively()

    # ------------------------------------------------------------------
    # Snapshot / restore
    # ------------------------------------------------------------------

    def snapshot(self) -> "ManifestGroup":
        """Return a deep copy sharing no substructure with this group."""
        return self.model_copy(deep=True)

    def restore(self, snapshot: "ManifestGroup") -> None:
        """Replace this group's contents with a deep copy of *snapshot*."""
        copy = snapshot.model_copy(deep=True)
        self.name = copy.name
        self.id = copy.id
        self.children = copy.children


ManifestGroup.model_rebuild()
