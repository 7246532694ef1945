"""Template copying and placeholder substitution."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path

from .fs import FileSystem, LocalFileSystem, PathLike
from .logs import ScaffoldLogger
from .results import capture

TEMPLATES_ROOT = Path(__file__).resolve().parents[1] / "templates"

BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".ico",
        ".svg",
        ".woff",
        ".woff2",
        ".ttf",
        ".eot",
        ".mp4",
        ".mov",
        ".avi",
        ".webm",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
    }
)
SKIP_DIRECTORIES: frozenset[str] = frozenset(
    {"node_modules", ".git", ".next", ".nuxt", "dist", "build", ".cache"}
)
_SKIPPED_FILE_PATTERNS = (
    re.compile(r"\.(lock|log)$", re.IGNORECASE),
    re.compile(r"^\.DS_Store$", re.IGNORECASE),
    re.compile(r"^Thumbs\.db$", re.IGNORECASE),
    re.compile(r"\.(tmp|temp)$", re.IGNORECASE),
)


class TemplateError(RuntimeError):
    """Base error for template operations."""


class TemplateNotFoundError(TemplateError):
    """Raised when the requested template does not exist."""


class TemplateCopyError(TemplateError):
    """Raised when the template tree cannot be copied into the project."""


class TemplateWriteError(TemplateError):
    """Raised when a substituted file cannot be written back."""


def should_process_directory(name: str) -> bool:
    """Return ``False`` for skip-listed and hidden directories."""
    if name in SKIP_DIRECTORIES:
        return False
    return not name.startswith(".")


def should_process_file(name: str) -> bool:
    """Return ``False`` for binary and junk files that must not be rewritten."""
    if os.path.splitext(name)[1].lower() in BINARY_EXTENSIONS:
        return False
    return not any(pattern.search(name) for pattern in _SKIPPED_FILE_PATTERNS)


def should_copy(path: PathLike) -> bool:
    """Copy-phase filter; case-sensitive and separate from :func:`should_process_file`."""
    name = os.path.basename(os.fspath(path))
    return not name.startswith(".DS_Store") and ".tmp" not in name and name != "Thumbs.db"


def apply_replacements(text: str, replacements: Mapping[str, str]) -> tuple[str, bool]:
    """Replace every ``{{KEY}}`` token; unknown tokens are left as they are."""
    changed = False
    for key, value in replacements.items():
        pattern = re.compile(re.escape(f"{{{{{key}}}}}"))
        if pattern.search(text):
            # lambda keeps backslashes in the value literal
            text = pattern.sub(lambda _match, value=value: value, text)
            changed = True
    return text, changed


class TemplateWalker:
    """Depth-first substitution pass over a copied template tree.

    One directory is listed at a time and each entry is handled before the
    next one, so eligibility rules apply in a deterministic order.
    """

    def __init__(
        self,
        replacements: Mapping[str, str],
        fs: FileSystem | None = None,
        logger: ScaffoldLogger | None = None,
    ) -> None:
        self.replacements = replacements
        self.fs = fs or LocalFileSystem()
        self.logger = logger or ScaffoldLogger()
        self.processed: list[Path] = []
        self.updated: list[Path] = []
        self.skipped: list[Path] = []

    async def walk(self, root: PathLike) -> None:
        root = Path(root)
        listing = await capture(lambda: self.fs.readdir(root), kind="list", context=f"reading directory {root}")
        if not listing.ok:
            raise TemplateError(f"Failed to read directory {root}: {listing.error.message}") from listing.error.cause

        for entry in listing.unwrap():
            path = root / entry.name
            if entry.is_dir():
                if should_process_directory(entry.name):
                    await self.walk(path)
            elif entry.is_file() and should_process_file(entry.name):
                await self.process_file(path)

    async def process_file(self, path: PathLike) -> bool:
        """Substitute placeholders in one file; return ``True`` when it was rewritten."""
        path = Path(path)
        read = await capture(
            lambda: self.fs.read_text(path),
            kind="read",
            context=f"reading file {path}",
            catch=(OSError, UnicodeDecodeError),
        )
        if not read.ok:
            self.logger.warn(f"Skipping file {path}: {read.error.message}")
            self.skipped.append(path)
            return False

        self.processed.append(path)
        content, changed = apply_replacements(read.unwrap(), self.replacements)
        if not changed:
            return False

        written = await capture(lambda: self.fs.write_text(path, content), kind="write", context=f"writing file {path}")
        if not written.ok:
            raise TemplateWriteError(f"Failed to write file {path}: {written.error.message}") from written.error.cause
        self.updated.append(path)
        self.logger.debug(f"Updated placeholders in {path}")
        return True


async def copy_template(template_dir: PathLike, target_dir: PathLike, fs: FileSystem | None = None) -> None:
    """Copy the template tree into ``target_dir``, skipping OS junk files."""
    fs = fs or LocalFileSystem()
    copied = await capture(
        lambda: fs.copy(template_dir, target_dir, filter=should_copy),
        kind="copy",
        context="copying template",
    )
    if not copied.ok:
        raise TemplateCopyError(f"Failed to copy template: {copied.error.message}") from copied.error.cause


def available_templates(templates_dir: PathLike | None = None) -> list[str]:
    """Return the names of the template directories that ship with the tool."""
    root = Path(templates_dir) if templates_dir is not None else TEMPLATES_ROOT
    if not root.is_dir():
        return []
    return sorted(p.name for p in root.iterdir() if p.is_dir() and not p.name.startswith((".", "_")))


def resolve_template_dir(name: str, templates_dir: PathLike | None = None) -> Path:
    root = Path(templates_dir) if templates_dir is not None else TEMPLATES_ROOT
    candidate = root / name
    if not candidate.is_dir():
        raise TemplateNotFoundError(f"Template '{name}' not found.")
    return candidate


__all__ = [
    "BINARY_EXTENSIONS",
    "SKIP_DIRECTORIES",
    "TEMPLATES_ROOT",
    "TemplateCopyError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateWalker",
    "TemplateWriteError",
    "apply_replacements",
    "available_templates",
    "copy_template",
    "resolve_template_dir",
    "should_copy",
    "should_process_directory",
    "should_process_file",
]
