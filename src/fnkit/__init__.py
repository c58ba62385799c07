"""fnkit public API."""

import logging

from .arrays import arrayval
from .classes import class_new, class_new_args, resolve_class
from .errors import (
    ConstructionError,
    EmptySequenceError,
    FnKitError,
    NotCallableError,
    NotConvertibleError,
    ReflectionError,
    TypeNotFoundError,
)
from .functional import (
    ANY,
    Composition,
    Mapper,
    Partial,
    Reducer,
    func_apply,
    func_concat,
    func_map,
    func_reduce,
    identity,
)
from .reflection import Reflection, func_arity, func_reflect

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "class_new",
    "class_new_args",
    "resolve_class",
    "ANY",
    "func_apply",
    "func_map",
    "func_reduce",
    "func_concat",
    "func_reflect",
    "func_arity",
    "identity",
    "arrayval",
    "Partial",
    "Mapper",
    "Reducer",
    "Composition",
    "Reflection",
    "FnKitError",
    "NotCallableError",
    "TypeNotFoundError",
    "ConstructionError",
    "ReflectionError",
    "NotConvertibleError",
    "EmptySequenceError",
]
