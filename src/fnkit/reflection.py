"""Signature introspection for the callable forms fnkit accepts."""

from __future__ import annotations

import builtins
import importlib
import inspect
import logging
from dataclasses import dataclass

from .classes import resolve_class
from .errors import FnKitError, ReflectionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reflection:
    """Resolved callable together with its signature."""

    target: object
    signature: inspect.Signature
    owner: type | None = None
    name: str | None = None

    @property
    def parameters(self) -> tuple[inspect.Parameter, ...]:
        return tuple(self.signature.parameters.values())

    @property
    def number_of_parameters(self) -> int:
        return len(self.signature.parameters)

    @property
    def number_of_required_parameters(self) -> int:
        return sum(
            1
            for param in self.parameters
            if param.default is inspect.Parameter.empty
            and param.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        )

    @property
    def is_method(self) -> bool:
        return self.owner is not None


def _resolve_owner(owner: object) -> type:
    if isinstance(owner, type):
        return owner
    if isinstance(owner, str):
        try:
            return resolve_class(owner)
        except FnKitError as exc:
            raise ReflectionError(f"Cannot resolve class {owner!r}") from exc
    # An instance stands in for its class, the way a bound method would.
    return type(owner)


def _resolve_method(owner: object, method_name: object) -> tuple[type, object, str]:
    if not isinstance(method_name, str) or not method_name:
        raise ReflectionError(f"Method name must be a non-empty string, got {method_name!r}")
    cls = _resolve_owner(owner)
    target = owner if not isinstance(owner, (type, str)) else cls
    try:
        return cls, getattr(target, method_name), method_name
    except AttributeError as exc:
        raise ReflectionError(f"{cls.__qualname__} has no method {method_name!r}") from exc


def _resolve_function_path(path: str) -> object:
    module_name, _, attr = path.rpartition(".")
    try:
        if not module_name:
            return getattr(builtins, attr)
        return getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise ReflectionError(f"Cannot resolve function {path!r}") from exc


def _signature_of(target: object, *, where: str) -> inspect.Signature:
    if not callable(target):
        raise ReflectionError(f"{where} is not callable")
    try:
        return inspect.signature(target)
    except (TypeError, ValueError) as exc:
        raise ReflectionError(f"{where} has no introspectable signature") from exc


def func_reflect(function: object, method_name: str | None = None) -> Reflection:
    """Create a reflection of any callable form.

    All of these describe the same kind of target::

        func_reflect("collections.OrderedDict", "fromkeys")
        func_reflect(("collections.OrderedDict", "fromkeys"))
        func_reflect("collections.OrderedDict::fromkeys")
        func_reflect(str.lower)
        func_reflect(lambda foo: foo)

    Methods are read off the class with ``getattr``, so an instance method
    keeps its ``self`` parameter while a classmethod arrives bound.
    """
    owner: type | None = None
    name: str | None = None

    if method_name is not None:
        owner, target, name = _resolve_method(function, method_name)
    elif isinstance(function, str) and "::" in function.strip(":"):
        class_name, _, name = function.partition("::")
        owner, target, name = _resolve_method(class_name, name)
    elif isinstance(function, (tuple, list)):
        if len(function) != 2:
            raise ReflectionError(f"Expected a (class, method) pair, got {len(function)} items")
        owner, target, name = _resolve_method(*function)
    elif isinstance(function, str):
        target = _resolve_function_path(function.strip())
    else:
        target = function

    where = f"{owner.__qualname__}.{name}" if owner is not None else repr(target)
    signature = _signature_of(target, where=where)
    logger.debug("Reflected %s as %s", where, signature)
    return Reflection(target=target, signature=signature, owner=owner, name=name or getattr(target, "__name__", None))


def func_arity(function: object, method_name: str | None = None) -> int:
    """Return the number of declared parameters of a callable.

        func_arity(str.split)               # 3
        func_arity(lambda foo, bar: None)   # 2
    """
    return func_reflect(function, method_name).number_of_parameters
