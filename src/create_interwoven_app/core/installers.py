"""Dependency installation for freshly generated projects."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from typing_extensions import TypeAlias

from .fs import PathLike

logger = logging.getLogger(__name__)

Spawner: TypeAlias = Callable[..., Awaitable[asyncio.subprocess.Process]]

DEFAULT_INSTALL_COMMAND = "npm"
DEFAULT_INSTALL_ARGS: tuple[str, ...] = ("install", "--legacy-peer-deps")
DEFAULT_INSTALL_TIMEOUT = 600.0
_REAP_TIMEOUT = 10.0


class InstallerError(RuntimeError):
    """Raised when the install command cannot be started."""


@dataclass(slots=True)
class InstallerResult:
    """Result returned after running the install command."""

    command: Sequence[str]
    success: bool
    returncode: int | None = None
    timed_out: bool = False
    error: str | None = None

    @property
    def status(self) -> str:
        if self.timed_out:
            return "timeout"
        return "success" if self.success else "error"


def _describe_timeout(seconds: float) -> str:
    if seconds >= 60 and seconds % 60 == 0:
        minutes = int(seconds // 60)
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    return f"{seconds:g} seconds"


async def install_dependencies(
    project_dir: PathLike,
    *,
    command: str = DEFAULT_INSTALL_COMMAND,
    args: Sequence[str] = DEFAULT_INSTALL_ARGS,
    timeout: float = DEFAULT_INSTALL_TIMEOUT,
    spawn: Spawner | None = None,
) -> InstallerResult:
    """Run the package manager in ``project_dir`` with the terminal's stdio.

    The command is executed directly, never through a shell. When it runs past
    ``timeout`` seconds it is sent SIGTERM and the result reports failure.
    """
    spawn = spawn or asyncio.create_subprocess_exec
    argv = (command, *args)
    label = " ".join(argv[:2])
    logger.debug("Running %s in %s", " ".join(argv), project_dir)

    try:
        process = await spawn(*argv, cwd=str(Path(project_dir)))
    except OSError as exc:
        raise InstallerError(f"Failed to start {label}: {exc.strerror or exc}") from exc

    try:
        returncode = await asyncio.wait_for(process.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        process.terminate()
        try:
            await asyncio.wait_for(process.wait(), timeout=_REAP_TIMEOUT)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
        return InstallerResult(
            command=argv,
            success=False,
            returncode=process.returncode,
            timed_out=True,
            error=f"{label} timed out after {_describe_timeout(timeout)}",
        )

    if returncode != 0:
        return InstallerResult(
            command=argv,
            success=False,
            returncode=returncode,
            error=f"{label} failed with exit code {returncode}",
        )
    return InstallerResult(command=argv, success=True, returncode=returncode)


__all__ = [
    "DEFAULT_INSTALL_ARGS",
    "DEFAULT_INSTALL_COMMAND",
    "DEFAULT_INSTALL_TIMEOUT",
    "InstallerError",
    "InstallerResult",
    "Spawner",
    "install_dependencies",
]
