"""Partial application, mapping, reduction and composition of callables.

Every combinator validates its callable arguments when it is built and
returns a small frozen object that is itself callable. Bound arguments and
chains are stored as tuples; callers must not keep mutating an object they
handed in as a bound argument.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from .errors import EmptySequenceError, NotCallableError


class _Placeholder:
    """Marker type for an argument slot left open by ``func_apply``."""

    __slots__ = ()
    _instance: "_Placeholder | None" = None

    def __new__(cls) -> "_Placeholder":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self) -> str:
        return "ANY"

    def __copy__(self) -> "_Placeholder":
        return self

    def __deepcopy__(self, memo) -> "_Placeholder":
        return self


ANY: Final = _Placeholder()

_MISSING: Final = object()


def _require_callable(value: object, *, where: str) -> None:
    if not callable(value):
        raise NotCallableError.for_value(value, where=where)


def _callable_name(value: object) -> str:
    name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None)
    return name if isinstance(name, str) else repr(value)


def identity(value):
    return value


@dataclass(frozen=True, eq=False)
class Partial:
    """A callable with some positional and keyword arguments bound ahead of time."""

    func: Callable
    args: tuple[object, ...] = ()
    kwargs: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _require_callable(self.func, where="func_apply")
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))

    @property
    def placeholders(self) -> int:
        return sum(1 for value in self.args if value is ANY)

    def arguments_for(self, call_args: Iterable[object]) -> list[object]:
        """Interleave bound arguments with the caller's, filling ``ANY`` slots in order."""
        final = list(call_args)
        for index, value in enumerate(self.args):
            if value is not ANY:
                final.insert(index, value)
        return final

    def __call__(self, *args, **kwargs):
        return self.func(*self.arguments_for(args), **{**self.kwargs, **kwargs})

    def __repr__(self) -> str:
        parts = [_callable_name(self.func)]
        parts.extend(repr(value) for value in self.args)
        parts.extend(f"{key}={value!r}" for key, value in self.kwargs.items())
        return f"func_apply({', '.join(parts)})"


@dataclass(frozen=True)
class Mapper:
    """Applies a unary callable to every element of an input collection."""

    func: Callable

    def __post_init__(self) -> None:
        _require_callable(self.func, where="func_map")

    def __call__(self, values: Iterable[object]):
        if isinstance(values, Mapping):
            return {key: self.func(value) for key, value in values.items()}
        return [self.func(value) for value in values]


@dataclass(frozen=True)
class Reducer:
    """Left fold of a binary callable with an optional default seed."""

    func: Callable
    default_initial: object = _MISSING

    def __post_init__(self) -> None:
        _require_callable(self.func, where="func_reduce")

    def __call__(self, values: Iterable[object], initial: object = _MISSING):
        if initial is _MISSING:
            initial = self.default_initial

        items = iter(values)
        if initial is _MISSING:
            try:
                acc = next(items)
            except StopIteration:
                raise EmptySequenceError("Reduction of an empty sequence with no initial value") from None
        else:
            acc = initial

        for item in items:
            acc = self.func(acc, item)
        return acc

    def __repr__(self) -> str:
        if self.default_initial is _MISSING:
            return f"func_reduce({_callable_name(self.func)})"
        return f"func_reduce({_callable_name(self.func)}, {self.default_initial!r})"


@dataclass(frozen=True)
class Composition:
    """Left-to-right chain: ``Composition((f, g))(x) == g(f(x))``."""

    funcs: tuple[Callable, ...] = ()

    def __post_init__(self) -> None:
        funcs = tuple(self.funcs)
        for position, func in enumerate(funcs):
            _require_callable(func, where=f"func_concat argument {position}")
        object.__setattr__(self, "funcs", funcs)

    def __call__(self, *args, **kwargs):
        if not self.funcs:
            if kwargs or len(args) != 1:
                raise TypeError("An empty composition takes exactly one positional argument")
            return identity(args[0])

        first, *rest = self.funcs
        value = first(*args, **kwargs)
        for func in rest:
            value = func(value)
        return value

    def __repr__(self) -> str:
        return f"func_concat({', '.join(_callable_name(func) for func in self.funcs)})"


def func_apply(func: Callable, /, *args, **kwargs) -> Partial:
    """Create a partial application of ``func``.

    Positional slots given as ``ANY`` stay open for the eventual caller::

        split_once = func_apply(str.split, ANY, ",", 1)
        split_once("1,2,3,4")  # ['1', '2,3,4']
    """
    return Partial(func, args, kwargs)


def func_map(func: Callable) -> Mapper:
    """Lift a unary callable so it maps over a whole collection.

        capitalize_all = func_map(str.capitalize)
        capitalize_all(["john", "mary", "nick"])  # ['John', 'Mary', 'Nick']
    """
    return Mapper(func)


def func_reduce(func: Callable, initial: object = _MISSING) -> Reducer:
    """Lift a binary callable into a left fold.

    The seed is the ``initial`` passed to the reducer call when given, else
    the ``initial`` given here, else the first element. Falsy seeds count
    as given.

        concat_all = func_reduce(lambda a, b: a + b)
        concat_all(["a", "b", "c", "d", "e"])  # 'abcde'
    """
    return Reducer(func, initial)


def func_concat(*funcs: Callable) -> Composition:
    """Chain callables so each receives the previous one's result.

        slugify = func_concat(str.lower, func_apply(str.replace, ANY, " ", "-"))
        slugify("There Be Dragons Here")  # 'there-be-dragons-here'
    """
    return Composition(funcs)
