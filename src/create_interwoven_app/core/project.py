"""Project creation: copy, substitute, install."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from typing_extensions import TypeAlias

from create_interwoven_app.chains.models import ChainDescriptor, NetworkSelection

from .fs import FileSystem, LocalFileSystem, PathLike
from .installers import InstallerError, InstallerResult, install_dependencies
from .logs import ScaffoldLogger
from .replacements import build_replacements
from .templates import TEMPLATES_ROOT, TemplateWalker, copy_template

Installer: TypeAlias = Callable[[Path], Awaitable[InstallerResult]]

MANUAL_INSTALL_HINT = 'You can run "npm install" manually later.'


@dataclass(slots=True)
class ProjectSummary:
    """Outcome of a successful :meth:`ProjectCreator.create_project` call."""

    project_name: str
    target_dir: Path
    template: str
    replacements: Mapping[str, str]
    updated_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    installed: bool = False
    install_error: str | None = None


class ProjectCreator:
    """Materializes a template into a new project directory."""

    def __init__(
        self,
        template: str = "default",
        *,
        templates_dir: PathLike | None = None,
        fs: FileSystem | None = None,
        logger: ScaffoldLogger | None = None,
        installer: Installer | None = None,
        install: bool = True,
    ) -> None:
        self.template = template
        self.templates_dir = Path(templates_dir) if templates_dir is not None else TEMPLATES_ROOT
        self.template_dir = self.templates_dir / template
        self.fs = fs or LocalFileSystem()
        self.logger = logger or ScaffoldLogger()
        self.installer = installer or install_dependencies
        self.install = install

    async def create_project(
        self,
        project_name: str,
        target_dir: PathLike,
        network_or_chain: NetworkSelection | ChainDescriptor | str = "testnet",
    ) -> ProjectSummary:
        """Create ``project_name`` in ``target_dir``.

        Copy and write failures propagate as :class:`TemplateError`. A failed
        install is reported as a warning and recorded on the summary.
        """
        target = Path(target_dir)
        await self.fs.ensure_dir(target)

        self.logger.step("Copying template files...")
        await copy_template(self.template_dir, target, fs=self.fs)

        self.logger.step("Configuring project...")
        replacements = build_replacements(project_name, network_or_chain)
        walker = TemplateWalker(replacements, fs=self.fs, logger=self.logger)
        await walker.walk(target)

        summary = ProjectSummary(
            project_name=project_name,
            target_dir=target,
            template=self.template,
            replacements=replacements,
            updated_files=list(walker.updated),
            skipped_files=list(walker.skipped),
        )
        if self.install:
            await self._install(target, summary)
        return summary

    async def _install(self, target: Path, summary: ProjectSummary) -> None:
        self.logger.step("Installing dependencies...")
        self.logger.info("This might take a few minutes.")
        try:
            result = await self.installer(target)
        except InstallerError as exc:
            summary.install_error = str(exc)
        else:
            if result.success:
                summary.installed = True
                self.logger.success("Dependencies installed successfully")
                return
            summary.install_error = result.error or "install failed"

        self.logger.warn(f"Dependency installation failed. {MANUAL_INSTALL_HINT}")
        self.logger.debug(f"Install error: {summary.install_error}")


__all__ = ["Installer", "MANUAL_INSTALL_HINT", "ProjectCreator", "ProjectSummary"]
