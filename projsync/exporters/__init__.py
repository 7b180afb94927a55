"""projsync exporters -- one native build file per toolchain target.

Key classes:
    ProjectExporter   - Base class every toolchain exporter implements
    MakefileExporter  - GNU Make
    CMakeExporter     - CMake
    ExporterRunner    - Runs all targets with per-exporter manifest isolation
"""

from .base import ProjectExporter
from .cmake import CMakeExporter
from .makefile import MakefileExporter
from .runner import EXPORTER_TYPES, ExporterRunner, create_exporter

__all__ = [
    "ProjectExporter",
    "MakefileExporter",
    "CMakeExporter",
    "ExporterRunner",
    "EXPORTER_TYPES",
    "create_exporter",
]
