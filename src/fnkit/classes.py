"""Instantiate classes from a name and a variable-length argument list."""

from __future__ import annotations

import builtins
import importlib
import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache

from .config import CLASS_CACHE_MAX
from .errors import ConstructionError, TypeNotFoundError

logger = logging.getLogger(__name__)


def _split_qualified_name(fqcn: str) -> tuple[str, str]:
    if ":" in fqcn:
        module_name, _, attr_path = fqcn.partition(":")
        return module_name, attr_path
    module_name, _, attr_path = fqcn.rpartition(".")
    return module_name, attr_path


def _import_longest_prefix(module_name: str, attr_path: str):
    # "pkg.mod.Outer.Inner" has to try "pkg.mod.Outer" before "pkg.mod".
    parts = module_name.split(".")
    trailing = [attr_path] if attr_path else []
    while parts:
        try:
            return importlib.import_module(".".join(parts)), ".".join(trailing)
        except ModuleNotFoundError as exc:
            if exc.name is None or not ".".join(parts).startswith(exc.name):
                raise
            trailing.insert(0, parts.pop())
    raise ModuleNotFoundError(f"No module named {module_name!r}", name=module_name)


def _walk_attributes(root: object, attr_path: str) -> object:
    value = root
    for attr in attr_path.split("."):
        value = getattr(value, attr)
    return value


@lru_cache(maxsize=CLASS_CACHE_MAX)
def _resolve_class_cached(fqcn: str) -> type:
    name = fqcn.strip()
    if not name:
        raise TypeNotFoundError("Empty class name")

    module_name, attr_path = _split_qualified_name(name)
    try:
        if not module_name:
            value = getattr(builtins, attr_path)
        else:
            module, attr_path = _import_longest_prefix(module_name, attr_path)
            value = _walk_attributes(module, attr_path) if attr_path else module
    except (ImportError, AttributeError) as exc:
        raise TypeNotFoundError(f"Class {fqcn!r} could not be found") from exc

    if not isinstance(value, type):
        raise TypeNotFoundError(f"{fqcn!r} resolves to a {type(value).__name__}, not a class")
    return value


def resolve_class(fqcn: str | type) -> type:
    """Resolve a class object or a fully qualified class name to a class.

    Accepted names are ``"package.module.Class"``, ``"package.module:Class"``
    (the colon form allows nested attribute paths) and bare builtin names
    such as ``"dict"``.
    """
    if isinstance(fqcn, type):
        return fqcn
    if not isinstance(fqcn, str):
        raise TypeNotFoundError(f"Expected a class or class name, got {type(fqcn).__name__}")
    return _resolve_class_cached(fqcn)


def class_new_args(
    fqcn: str | type,
    args: Iterable[object] = (),
    kwargs: Mapping[str, object] | None = None,
):
    """Instantiate ``fqcn`` with an argument sequence.

    Comparable to calling a function with a spread argument list, but for
    classes::

        contact = class_new_args("myapp.models.Contact", ["John", "Smith"])
    """
    cls = resolve_class(fqcn)
    positional = tuple(args)
    keywords = dict(kwargs or {})
    logger.debug(
        "Constructing %s with %d positional and %d keyword arguments",
        cls.__qualname__,
        len(positional),
        len(keywords),
    )
    try:
        return cls(*positional, **keywords)
    except Exception as exc:
        raise ConstructionError.from_exception(cls, exc) from exc


def class_new(fqcn: str | type, /, *args, **kwargs):
    """Instantiate ``fqcn`` with the remaining arguments.

        contact = class_new("myapp.models.Contact", "John", "Smith")
    """
    return class_new_args(fqcn, args, kwargs)
