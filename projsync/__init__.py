"""projsync -- keeps a project's generated code and build files in sync.

Saving a project rewrites its project document, clears stale output from the
generated-code folder, regenerates the configuration and aggregate headers
and the embedded-resource files, and writes one native build file per
toolchain target.  Files whose content is unchanged are never rewritten.

Quick usage::

    from projsync import Project, ProjectSaver

    project = Project.load("MyApp.json")
    error = ProjectSaver(project, project.file).save()
    if error:
        print(error)
"""

from .config import Config
from .errors import SaveError
from .manifest import ManifestGroup, ManifestItem
from .models import ConfigFlag, ExporterSettings, FlagState, Project
from .modules import LibraryModule, Module, ModuleInfo, ModuleList
from .saver import ProjectSaver

__all__ = [
    "Config",
    "ConfigFlag",
    "ExporterSettings",
    "FlagState",
    "LibraryModule",
    "ManifestGroup",
    "ManifestItem",
    "Module",
    "ModuleInfo",
    "ModuleList",
    "Project",
    "ProjectSaver",
    "SaveError",
]
