"""Opaque ``repr`` for classes holding sensitive data.

A generated ``repr`` can leak secrets through careless logging; the one
installed here shows only the class name and, optionally, the type names
of some of its attributes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

__all__ = ["implement"]

T = TypeVar("T", bound=type)


def _type_name(value: Any) -> str:
    kind = type(value)
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


def _install(cls: T, params: tuple[str, ...]) -> T:
    name = cls.__name__

    if params:

        def __repr__(self: Any) -> str:
            types = ", ".join(_type_name(getattr(self, p)) for p in params)
            return f"{name}<{types}> {{ ... }}"

    else:

        def __repr__(self: Any) -> str:
            return f"{name} {{ ... }}"

    cls.__repr__ = __repr__  # type: ignore[assignment]
    return cls


def implement(
    cls: T | None = None, *, params: Sequence[str] = ()
) -> T | Callable[[T], T]:
    """Give ``cls`` an opaque ``repr`` that hides its contents.

    Without ``params`` the repr is ``"Name { ... }"``.  With ``params``, a
    sequence of attribute names, it is ``"Name<T1, T2> { ... }"`` where each
    ``Tn`` is the type name of the matching attribute's value.  Can be used
    directly (``implement(Cls)``) or as a decorator (``@implement`` or
    ``@implement(params=[...])``).
    """
    if isinstance(params, str):
        raise TypeError("params must be a sequence of attribute names, not a string")
    names = tuple(params)
    for p in names:
        if not isinstance(p, str) or not p.isidentifier():
            raise ValueError(f"invalid parameter name: {p!r}")
    if cls is None:
        return lambda c: _install(c, names)
    return _install(cls, names)