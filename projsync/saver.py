"""projsync save orchestrator.

Implements the save sequence that keeps a project's generated code in sync:

Stage 1: PROJECT FILE   -- Persist the project document.
Stage 2: MODULES        -- Resolve the required modules from the catalog.
Stage 3: APP CONFIG     -- Write the configuration header.
Stage 4: BINARY DATA    -- Embed resources (or delete a stale pair).
Stage 5: APP HEADER     -- Write the aggregate header.
Stage 6: EXPORTERS      -- Write one build file per toolchain target.
Stage 7: APP CONFIG     -- Rewrite the configuration header after exporters.
Stage 8: README         -- Explain the generated-code folder.

Stages 1-2 always run.  Every later stage only runs while no error has been
recorded, except that one failing exporter does not stop the others.

Usage::

    python -m projsync MyApp.json
    python -m projsync MyApp.json --save-as ../release/MyApp.json
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from . import errors
from .config import Config
from .context import SaveContext
from .exporters.base import ProjectExporter
from .exporters.runner import ExporterFactory, ExporterRunner, create_exporter
from .generators import (
    AppConfigGenerator,
    AppHeaderGenerator,
    ReadmeGenerator,
    ResourceFile,
    TemplateRenderer,
)
from .manifest import ManifestGroup
from .models import Project
from .modules import Module, ModuleList
from .project_types import get_project_type
from .reconcile import DirectoryReconciler
from .utils import (
    console,
    format_duration,
    print_error,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
)
from .writer import ArtifactWriter


class ProjectSaver:
    """Saves a project and regenerates everything derived from it.

    A saver is single-use: construct one per save.

    Attributes:
        project: The project being saved.  Only its ``file`` pointer is
            modified, and only kept if the save succeeds.
        project_file: Where the project document is written.
        config: Pipeline configuration.
        context: State accumulated by this save (errors, manifest, outputs).
    """

    def __init__(
        self,
        project: Project,
        project_file: str | Path,
        config: Optional[Config] = None,
        *,
        module_list: Optional[ModuleList] = None,
        exporter_factory: Optional[ExporterFactory] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.project = project
        self.project_file = Path(project_file).resolve()
        self.config = config or Config()
        self.module_list = module_list
        self.renderer = renderer or TemplateRenderer()
        self.exporter_factory = exporter_factory or self._default_exporter_factory

        self.context = SaveContext(
            project=project,
            generated_code_folder=self.project_file.parent / project.generated_code_folder,
            generated_group=ManifestGroup(
                name=self.config.generated_group_name,
                id=self.config.generated_group_id,
            ),
            extra_app_config_content=self.config.extra_app_config_content,
        )
        self.writer = ArtifactWriter(self.context)
        self._has_saved = False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def generated_code_folder(self) -> Path:
        return self.context.generated_code_folder

    @property
    def generated_group(self) -> ManifestGroup:
        return self.context.generated_group

    @property
    def errors(self) -> list[str]:
        return self.context.errors

    def set_extra_app_config_content(self, content: str) -> None:
        self.context.extra_app_config_content = content

    # ------------------------------------------------------------------
    # Save sequence
    # ------------------------------------------------------------------

    def save(self) -> str:
        """Run the full save sequence.

        Returns:
            The first error message, or an empty string on success.

        Raises:
            RuntimeError: If this saver has already been used.
        """
        if self._has_saved or self.generated_group.num_children() != 0:
            raise RuntimeError("ProjectSaver.save() can only be called once per instance")
        self._has_saved = True

        self._clean_generated_code_folder()

        old_file = self.project.file
        self.project.file = self.project_file

        completed = False
        try:
            self._run_stages()
            completed = True
        finally:
            if not completed or not self.context.ok:
                self.project.file = old_file

        return self.context.first_error()

    def _run_stages(self) -> None:
        self.write_main_project_file()
        modules = self.resolve_modules()

        if self.context.ok:
            self.write_app_config_file(modules)

        if self.context.ok:
            self.write_binary_data_files()

        if self.context.ok:
            self.write_app_header(modules)

        if self.context.ok:
            self.write_projects(modules)

        if self.context.ok:
            # Repeated: exporter preparation may have added config content.
            self.write_app_config_file(modules)

        if self.generated_code_folder.is_dir() and self.context.ok:
            self.write_readme_file()

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _clean_generated_code_folder(self) -> None:
        if not self.generated_code_folder.is_dir():
            return
        try:
            DirectoryReconciler(self.config.keep_names).reconcile(self.generated_code_folder)
        except OSError as exc:
            print_warning(f"Couldn't fully clear {self.generated_code_folder}: {exc}")

    def write_main_project_file(self) -> None:
        self.writer.replace_file_if_different(self.project_file, self.project.to_json_bytes())

    def resolve_modules(self) -> list[Module]:
        if self.module_list is None:
            self.module_list = ModuleList()
            self.module_list.rescan(self.config.modules_path(self.project_file.parent))
        return self.module_list.create_required_modules(self.project)

    def write_app_config_file(self, modules: list[Module]) -> None:
        filename = self.project.app_config_filename
        self.context.app_config_file = self.generated_code_folder / filename

        content = AppConfigGenerator(self.config.tool_name).generate(
            self.project, modules, self.context.extra_app_config_content
        )
        self.writer.save_generated_file(filename, content)

    def write_binary_data_files(self) -> None:
        name = self.config.binary_data_name
        cpp_path = self.generated_code_folder / f"{name}.cpp"
        header_path = self.generated_code_folder / f"{name}.h"

        resource_file = ResourceFile(self.project, class_name=name)
        if resource_file.num_files() == 0:
            self._delete_stale_files(cpp_path, header_path)
            return

        try:
            cpp_text, header_text = resource_file.generate(header_path.name)
        except OSError:
            self.context.add_error(errors.resources_unwritable(cpp_path))
            return

        cpp_item = self.writer.save_generated_file(cpp_path.name, cpp_text, compile=True)
        header_item = self.writer.save_generated_file(header_path.name, header_text, compile=False)
        if cpp_item is not None and header_item is not None:
            self.context.binary_data_cpp = cpp_path
            self.context.binary_data_header = header_path

    def _delete_stale_files(self, *paths: Path) -> None:
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError:
                self.context.add_error(errors.file_unwritable(path))

    def write_app_header(self, modules: list[Module]) -> None:
        app_config_file = self.context.app_config_file
        has_app_config = app_config_file is not None and app_config_file.is_file()

        binary_header = self.context.binary_data_header
        binary_header_name = (
            binary_header.name if binary_header is not None and binary_header.is_file() else None
        )

        content = AppHeaderGenerator(self.renderer).generate(
            self.project, modules, has_app_config, binary_header_name
        )
        self.writer.save_generated_file(self.project.juce_header_filename, content)

    def write_projects(self, modules: list[Module]) -> None:
        project_type = get_project_type(self.project.project_type)
        runner = ExporterRunner(self.context, project_type, self.exporter_factory)
        runner.run(modules)

    def write_readme_file(self) -> None:
        content = ReadmeGenerator(self.config.tool_name, self.renderer).generate()
        self.writer.save_generated_file(self.config.readme_filename, content, compile=False)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _default_exporter_factory(self, project: Project, index: int) -> ProjectExporter:
        return create_exporter(project, index, renderer=self.renderer, tool_name=self.config.tool_name)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``projsync`` / ``python -m projsync``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="projsync",
        description="projsync -- save a project and regenerate its generated code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  projsync MyApp.json\n"
            "  projsync MyApp.json --save-as ../release/MyApp.json\n"
            "  projsync MyApp.json --modules-dir ~/modules --config projsync.json\n"
        ),
    )
    parser.add_argument("project", help="Path to the project JSON document")
    parser.add_argument(
        "--save-as",
        default=None,
        help="Write the project to this location instead of its current one",
    )
    parser.add_argument("--modules-dir", default=None, help="Module catalog folder")
    parser.add_argument(
        "--config",
        default=None,
        help="Configuration JSON (default: PROJSYNC_* environment variables)",
    )

    args = parser.parse_args(argv)

    project_path = Path(args.project)
    if not project_path.exists():
        console.print(f"[bold red]Error:[/bold red] Project file not found: {project_path}")
        sys.exit(1)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
        project = Project.load(project_path)
    except (OSError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if args.modules_dir:
        config.modules_dir = Path(args.modules_dir)

    target = Path(args.save_as) if args.save_as else project_path
    print_stage_header(f"Saving {project.name}")

    start = time.monotonic()
    saver = ProjectSaver(project, target, config)
    result = saver.save()
    elapsed = time.monotonic() - start

    print_summary_table(
        {
            "Project file": str(saver.project_file),
            "Generated code": str(saver.generated_code_folder),
            "Generated files": str(saver.generated_group.count_files()),
            "Exporters": ", ".join(e.name or e.type for e in project.exporters) or "none",
            "Errors": str(len(saver.errors)),
            "Duration": format_duration(elapsed),
        },
        title="Save Summary",
    )

    if result:
        print_error(f"Save failed: {result}")
        sys.exit(1)

    print_success("Project saved successfully!")
