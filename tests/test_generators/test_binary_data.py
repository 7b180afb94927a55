"""Tests for resource embedding (projsync.generators.binary_data)."""

from __future__ import annotations

from pathlib import Path

import pytest

from projsync.generators.binary_data import ResourceFile

pytestmark = pytest.mark.unit


@pytest.fixture
def resources(project_dir: Path) -> list[str]:
    (project_dir / "Resources").mkdir()
    (project_dir / "Resources" / "icon.png").write_bytes(b"\x89PNG")
    (project_dir / "Resources" / "notes.txt").write_bytes(b"hi")
    (project_dir / "Other").mkdir()
    (project_dir / "Other" / "icon.png").write_bytes(b"")
    return ["Resources/icon.png", "Resources/notes.txt", "Other/icon.png"]


class TestResourceFile:
    def test_no_resources(self, make_project):
        assert ResourceFile(make_project()).num_files() == 0

    def test_variable_names_unique(self, make_project, resources):
        resource_file = ResourceFile(make_project(resources=resources))
        assert resource_file.num_files() == 3
        assert resource_file.variable_names() == ["icon_png", "notes_txt", "icon_png2"]

    def test_header(self, make_project, resources):
        _, header = ResourceFile(make_project(resources=resources)).generate("BinaryData.h")

        assert "#ifndef BINARYDATA_H_AB12CD_INCLUDED" in header
        assert "namespace BinaryData" in header
        assert "    extern const char*   icon_png;" in header
        assert "    const int            icon_pngSize = 4;" in header
        assert "    const int            notes_txtSize = 2;" in header
        assert "    const int            icon_png2Size = 0;" in header
        assert header.endswith("#endif  // BINARYDATA_H_AB12CD_INCLUDED\n")

    def test_cpp(self, make_project, resources):
        cpp, _ = ResourceFile(make_project(resources=resources)).generate("BinaryData.h")

        assert '#include "BinaryData.h"' in cpp
        assert "static const unsigned char temp_binary_data_0[] =\n{ 137,80,78,71,0 };" in cpp
        assert "{ 104,105,0 };" in cpp
        assert "{ 0 };" in cpp
        assert "const char* notes_txt = (const char*) temp_binary_data_1;" in cpp

    def test_long_data_wrapped(self, make_project, project_dir: Path):
        (project_dir / "big.bin").write_bytes(bytes(range(1, 81)))
        cpp, _ = ResourceFile(make_project(resources=["big.bin"])).generate("BinaryData.h")

        array = cpp.split("temp_binary_data_0[] =\n", 1)[1].split(" };", 1)[0]
        rows = array.split(",\n  ")
        assert len(rows) == 3
        assert rows[0].count(",") == 39
        assert rows[2] == "0"

    def test_custom_class_name(self, make_project, resources):
        cpp, header = ResourceFile(make_project(resources=resources), class_name="Assets").generate("Assets.h")
        assert "namespace Assets" in cpp
        assert "ASSETS_H_AB12CD_INCLUDED" in header

    def test_missing_resource_raises(self, make_project):
        with pytest.raises(OSError):
            ResourceFile(make_project(resources=["missing.png"])).generate("BinaryData.h")

    def test_deterministic(self, make_project, resources):
        resource_file = ResourceFile(make_project(resources=resources))
        assert resource_file.generate("BinaryData.h") == resource_file.generate("BinaryData.h")
