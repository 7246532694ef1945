"""Input validation that gates project creation.

Every validator returns a :class:`ValidationOutcome` instead of raising, so the
CLI can report the first failing rule and exit before anything touches disk.
"""

from __future__ import annotations

import os
import re
import stat as stat_mod
from dataclasses import dataclass

from .fs import FileSystem, LocalFileSystem, PathLike

PROJECT_NAME_MIN_LENGTH = 1
PROJECT_NAME_MAX_LENGTH = 214
PROJECT_NAME_ALLOWED = re.compile(r"^[a-z0-9\-_@./]+$", re.IGNORECASE | re.ASCII)
SCOPED_PACKAGE_PATTERN = re.compile(r"^@[a-z0-9_-]+/[a-z0-9_.-]+$")
RESERVED_NAMES: tuple[str, ...] = (
    "node_modules",
    "favicon.ico",
    "package.json",
    "package-lock.json",
    "yarn.lock",
    ".git",
    ".gitignore",
    "readme",
    "license",
    "changelog",
)
SUPPORTED_NETWORKS: tuple[str, ...] = ("testnet", "mainnet")


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of a validation check."""

    is_valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> ValidationOutcome:
        return cls(is_valid=True, error=None)

    @classmethod
    def fail(cls, error: str) -> ValidationOutcome:
        return cls(is_valid=False, error=error)


def validate_project_name(name: object) -> ValidationOutcome:
    """Check a project name against npm-style package naming rules.

    Rules run in a fixed order and the first failure wins.
    """
    if not name or not isinstance(name, str):
        return ValidationOutcome.fail("Project name is required")

    trimmed = name.strip()
    if len(trimmed) < PROJECT_NAME_MIN_LENGTH:
        return ValidationOutcome.fail("Project name cannot be empty")
    if len(trimmed) > PROJECT_NAME_MAX_LENGTH:
        return ValidationOutcome.fail(f"Project name cannot exceed {PROJECT_NAME_MAX_LENGTH} characters")

    if not PROJECT_NAME_ALLOWED.match(trimmed):
        return ValidationOutcome.fail(
            "Project name can only contain letters, numbers, hyphens, underscores, dots, and forward slashes"
        )

    lowered = trimmed.lower()
    if any(lowered == reserved or lowered.startswith(reserved + ".") for reserved in RESERVED_NAMES):
        return ValidationOutcome.fail(f'"{trimmed}" is a reserved name and cannot be used as a project name')

    if trimmed.startswith("@") and not SCOPED_PACKAGE_PATTERN.match(trimmed):
        return ValidationOutcome.fail("Scoped package names must be in format @scope/package-name")

    if trimmed.startswith((".", "-")) or trimmed.endswith((".", "-")):
        return ValidationOutcome.fail("Project name cannot start or end with a period or hyphen")

    return ValidationOutcome.ok()


async def validate_target_directory(path: PathLike, fs: FileSystem | None = None) -> ValidationOutcome:
    """Accept a missing or empty directory; reject anything else.

    I/O errors are reported as validation failures rather than raised.
    """
    fs = fs or LocalFileSystem()
    try:
        if not await fs.path_exists(path):
            return ValidationOutcome.ok()
        entries = await fs.readdir(path)
    except OSError as exc:
        return ValidationOutcome.fail(f"Unable to access directory: {_describe(exc)}")

    if not entries:
        return ValidationOutcome.ok()
    basename = os.path.basename(os.path.normpath(os.fspath(path)))
    return ValidationOutcome.fail(
        f'Directory "{basename}" is not empty. Please choose a different name or remove the existing directory.'
    )


async def validate_template(
    name: object,
    templates_dir: PathLike,
    fs: FileSystem | None = None,
) -> ValidationOutcome:
    """Check that ``name`` refers to a template directory under ``templates_dir``.

    Names with path separators or ``..`` are rejected before any filesystem access.
    """
    if not name or not isinstance(name, str):
        return ValidationOutcome.fail("Template name is required")

    if ".." in name or "/" in name or "\\" in name:
        return ValidationOutcome.fail("Invalid template name. Template names cannot contain path separators.")

    fs = fs or LocalFileSystem()
    template_dir = os.path.join(os.fspath(templates_dir), name)
    try:
        if not await fs.path_exists(template_dir):
            return ValidationOutcome.fail(f'Template "{name}" not found')
        info = await fs.stat(template_dir)
    except OSError as exc:
        return ValidationOutcome.fail(f"Unable to access template: {_describe(exc)}")

    if not stat_mod.S_ISDIR(info.st_mode):
        return ValidationOutcome.fail(f'Template "{name}" is not a valid directory')
    return ValidationOutcome.ok()


def validate_network(network: object) -> ValidationOutcome:
    """Validate the legacy ``--network`` flag value."""
    if network not in SUPPORTED_NETWORKS:
        return ValidationOutcome.fail('Invalid network option. Please use "testnet" or "mainnet".')
    return ValidationOutcome.ok()


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc) or exc.__class__.__name__


__all__ = [
    "PROJECT_NAME_MAX_LENGTH",
    "RESERVED_NAMES",
    "SUPPORTED_NETWORKS",
    "ValidationOutcome",
    "validate_network",
    "validate_project_name",
    "validate_target_directory",
    "validate_template",
]
