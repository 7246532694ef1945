"""Asynchronous filesystem port used by the validators and the template walker."""

from __future__ import annotations

import asyncio
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

PathLike = str | os.PathLike[str]
CopyFilter = Callable[[Path], bool]


@dataclass(frozen=True, slots=True)
class DirEntry:
    """A single directory listing entry."""

    name: str
    path: Path
    kind: str  # "dir", "file" or "other"

    def is_dir(self) -> bool:
        return self.kind == "dir"

    def is_file(self) -> bool:
        return self.kind == "file"


class FileSystem(Protocol):
    """Interface the core needs from the filesystem.

    Every method may raise :class:`OSError` with a human-readable message.
    """

    async def path_exists(self, path: PathLike) -> bool:
        ...

    async def readdir(self, path: PathLike) -> list[DirEntry]:
        ...

    async def read_text(self, path: PathLike) -> str:
        ...

    async def write_text(self, path: PathLike, content: str) -> None:
        ...

    async def ensure_dir(self, path: PathLike) -> None:
        ...

    async def copy(self, src: PathLike, dest: PathLike, *, filter: CopyFilter | None = None) -> None:
        ...

    async def stat(self, path: PathLike) -> os.stat_result:
        ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the local disk.

    Blocking calls run in a worker thread so the event loop stays responsive.
    """

    async def path_exists(self, path: PathLike) -> bool:
        return await asyncio.to_thread(os.path.lexists, path)

    async def readdir(self, path: PathLike) -> list[DirEntry]:
        return await asyncio.to_thread(_list_dir, Path(path))

    async def read_text(self, path: PathLike) -> str:
        return await asyncio.to_thread(_read_text, Path(path))

    async def write_text(self, path: PathLike, content: str) -> None:
        await asyncio.to_thread(_write_text, Path(path), content)

    async def ensure_dir(self, path: PathLike) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)

    async def copy(self, src: PathLike, dest: PathLike, *, filter: CopyFilter | None = None) -> None:
        await asyncio.to_thread(_copy_tree, Path(src), Path(dest), filter)

    async def stat(self, path: PathLike) -> os.stat_result:
        return await asyncio.to_thread(os.stat, path)


def _list_dir(path: Path) -> list[DirEntry]:
    entries: list[DirEntry] = []
    with os.scandir(path) as it:
        for item in it:
            if item.is_dir(follow_symlinks=False):
                kind = "dir"
            elif item.is_file(follow_symlinks=False):
                kind = "file"
            else:
                kind = "other"
            entries.append(DirEntry(name=item.name, path=Path(item.path), kind=kind))
    return entries


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF line endings intact across a read/write cycle
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_text(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def _copy_tree(src: Path, dest: Path, keep: CopyFilter | None) -> None:
    def _ignore(directory: str, names: list[str]) -> set[str]:
        if keep is None:
            return set()
        return {name for name in names if not keep(Path(directory) / name)}

    shutil.copytree(src, dest, symlinks=True, ignore=_ignore, dirs_exist_ok=True)


__all__ = ["CopyFilter", "DirEntry", "FileSystem", "LocalFileSystem", "PathLike"]
