"""Structured error types for the fnkit helpers."""

from __future__ import annotations

from dataclasses import dataclass


class FnKitError(Exception):
    """Base class for structured fnkit errors."""


class NotCallableError(FnKitError, TypeError):
    """A value that must be invokable is not."""

    @classmethod
    def for_value(cls, value: object, *, where: str) -> "NotCallableError":
        return cls(f"{where} expects a callable, got {type(value).__name__}")


class TypeNotFoundError(FnKitError, LookupError):
    """A type identifier does not resolve to a constructible class."""


@dataclass(eq=False)
class ConstructionError(FnKitError):
    """Wraps the failure raised by a class constructor."""

    target: type
    message: str
    cause: BaseException | None = None

    @classmethod
    def from_exception(cls, target: type, err: BaseException) -> "ConstructionError":
        return cls(target=target, message=str(err), cause=err)

    def __str__(self) -> str:
        name = getattr(self.target, "__qualname__", repr(self.target))
        kind = type(self.cause).__name__ if self.cause is not None else "error"
        return f"Could not construct {name}: {kind}: {self.message}"


class ReflectionError(FnKitError, ValueError):
    """A callable form cannot be resolved to an introspectable function."""


class NotConvertibleError(FnKitError, TypeError):
    """A value cannot be coerced into a list or dict."""


class EmptySequenceError(FnKitError, ValueError):
    """A reduction over an empty input has no seed to return."""
