"""Coerce container-like and scalar values into plain lists and dicts."""

from __future__ import annotations

import dataclasses
import io
import logging
import numbers
from collections import UserDict, UserList
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Callable, Final

from .errors import NotConvertibleError

logger = logging.getLogger(__name__)

_SCALAR_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, numbers.Number)
_RESOURCE_TYPES: Final[tuple[type, ...]] = (io.IOBase,)
_TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


class SourceShape(str, Enum):
    NATIVE = "native"
    SNAPSHOT = "snapshot"
    ITERABLE = "iterable"
    INDEXABLE = "indexable"
    STRUCTURED = "structured"
    SCALAR = "scalar"


def _is_scalar(value: object) -> bool:
    return isinstance(value, _SCALAR_TYPES)


def _is_namedtuple(value: object) -> bool:
    return isinstance(value, tuple) and callable(getattr(value, "_asdict", None))


def _is_native(value: object) -> bool:
    return isinstance(value, (list, tuple, dict))


def _is_snapshottable(value: object) -> bool:
    if isinstance(value, (UserList, UserDict)):
        return True
    return not isinstance(value, type) and callable(getattr(value, "tolist", None))


def _is_iterable(value: object) -> bool:
    return isinstance(value, Iterable) and not _is_scalar(value) and not isinstance(value, _RESOURCE_TYPES)


def _is_indexable(value: object) -> bool:
    return hasattr(type(value), "__getitem__")


def _public_fields(value: object) -> dict[str, object] | None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_") and hasattr(value, f.name)
        }

    fields: dict[str, object] = {}
    found = False
    for cls in reversed(type(value).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            found = True
            if not slot.startswith("_") and hasattr(value, slot):
                fields[slot] = getattr(value, slot)
    try:
        attrs = vars(value)
    except TypeError:
        return fields if found else None
    fields.update((key, item) for key, item in attrs.items() if not key.startswith("_"))
    return fields


def _is_structured(value: object) -> bool:
    if value is None or _is_scalar(value) or isinstance(value, _RESOURCE_TYPES):
        return False
    return _public_fields(value) is not None


def _key_collection(preserve_keys: object) -> tuple[object, ...] | None:
    if isinstance(preserve_keys, Iterable) and not isinstance(preserve_keys, _TEXT_TYPES):
        return tuple(preserve_keys)
    return None


def _native(value, keep_keys: bool):
    if _is_namedtuple(value):
        return dict(value._asdict())
    return dict(value) if isinstance(value, dict) else list(value)


def _snapshot(value, keep_keys: bool):
    if isinstance(value, (UserList, UserDict)):
        return _native(value.data, keep_keys)
    snapshot = value.tolist()
    return list(snapshot) if isinstance(snapshot, (list, tuple)) else [snapshot]


def _drain(value, keep_keys: bool):
    if isinstance(value, Mapping):
        if keep_keys:
            return dict(value.items())
        return [item for _, item in value.items()]
    return list(value)


def _structured(value, keep_keys: bool):
    return _public_fields(value)


def _scalar(value, keep_keys: bool):
    return [value]


def _classify(value: object, keys: tuple[object, ...] | None) -> SourceShape | None:
    if _is_native(value):
        return SourceShape.NATIVE
    if _is_snapshottable(value):
        return SourceShape.SNAPSHOT
    if _is_iterable(value):
        return SourceShape.ITERABLE
    if keys is not None and _is_indexable(value) and not _is_scalar(value):
        return SourceShape.INDEXABLE
    if _is_structured(value):
        return SourceShape.STRUCTURED
    if _is_scalar(value):
        return SourceShape.SCALAR
    return None


_CONVERTERS: Final[dict[SourceShape, Callable[[object, bool], object]]] = {
    SourceShape.NATIVE: _native,
    SourceShape.SNAPSHOT: _snapshot,
    SourceShape.ITERABLE: _drain,
    SourceShape.STRUCTURED: _structured,
    SourceShape.SCALAR: _scalar,
}


def _lookup_present(source: object, key: object) -> tuple[bool, object]:
    if isinstance(source, list):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(source):
            return True, source[key]
        return False, None
    if isinstance(source, dict):
        if key in source:
            return True, source[key]
        return False, None
    try:
        return True, source[key]
    except LookupError:
        return False, None


def _filter_keys(source: object, keys: tuple[object, ...]) -> dict[object, object]:
    filtered: dict[object, object] = {}
    for key in keys:
        present, item = _lookup_present(source, key)
        if present:
            filtered[key] = item
    return filtered


def arrayval(value: object, preserve_keys: bool | Iterable[object] = False) -> list[object] | dict[object, object]:
    """Coerce a value into a list or dict.

    ``preserve_keys`` selects the key policy: falsy returns a dense list of
    values, ``True`` keeps the keys (or field names) of keyed sources, and
    any other iterable of keys returns a dict restricted to those keys that
    are present.

        arrayval(UserList(["a", "b", "c"]))   # ['a', 'b', 'c']
        arrayval(Contact(foo="bar", fizz="buzz"), True)
        # {'foo': 'bar', 'fizz': 'buzz'}
    """
    keys = _key_collection(preserve_keys)
    keep_keys = keys is not None or bool(preserve_keys)

    shape = _classify(value, keys)
    if shape is None:
        raise NotConvertibleError(
            f"A value of type {type(value).__name__} could not be coerced into an array"
        )
    logger.debug("Coercing %s value as %s", type(value).__name__, shape.value)

    if shape is SourceShape.INDEXABLE:
        return _filter_keys(value, keys)

    result = _CONVERTERS[shape](value, keep_keys)
    if keys is not None:
        return _filter_keys(result, keys)
    if not keep_keys and isinstance(result, dict):
        return list(result.values())
    return result
