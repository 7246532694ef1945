"""Structured results for fallible filesystem operations."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

ErrorKind = Literal["read", "write", "list", "copy", "install", "network", "unknown"]


@dataclass(frozen=True, slots=True)
class OperationError:
    """Describes a failed operation without mutating the original exception."""

    kind: ErrorKind
    message: str
    context: str
    cause: BaseException | None = None

    def describe(self) -> str:
        return f"{self.context}: {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an :class:`OperationError`."""

    value: T | None = None
    error: OperationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise RuntimeError(self.error.describe()) from self.error.cause
        return self.value  # type: ignore[return-value]


async def capture(
    operation: Callable[[], Awaitable[T]],
    *,
    kind: ErrorKind,
    context: str,
    catch: tuple[type[BaseException], ...] = (OSError,),
) -> Result[T]:
    """Await ``operation`` and wrap the outcome in a :class:`Result`.

    Only exceptions listed in ``catch`` are converted; anything else propagates.
    """
    try:
        value = await operation()
    except catch as exc:
        message = getattr(exc, "strerror", None) or str(exc) or exc.__class__.__name__
        return Result(error=OperationError(kind=kind, message=message, context=context, cause=exc))
    return Result(value=value)


__all__ = ["ErrorKind", "OperationError", "Result", "capture"]
