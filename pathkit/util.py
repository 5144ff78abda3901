"""Shared helpers."""
import os
import typing
from . import types


def to_str(path: types.PathLike, name: str = 'path') -> str:
    """
    Provide common interface when using path-like objects.

    Only text paths are supported, so `bytes` (or a path-like object
    resolving to `bytes`) is rejected.
    """

    if not isinstance(path, str):
        try:
            path = os.fspath(path)
        except TypeError:
            raise TypeError("'{}' must be a string or path-like object, not {}".format(name, type(path).__name__))
        if not isinstance(path, str):
            raise TypeError("'{}' must resolve to a string, not {}".format(name, type(path).__name__))
    return path


def to_sep(sep: typing.Optional[str]) -> str:
    """Resolve the separator, defaulting to the host separator."""

    return os.sep if not sep else sep


class Immutable(object):
    """Immutable."""

    __slots__: typing.Tuple[typing.Any, ...] = tuple()

    def __init__(self, **kwargs: typing.Any) -> None:
        """Initialize."""

        for k, v in kwargs.items():
            super(Immutable, self).__setattr__(k, v)

    def _cache(self, name: str, value: typing.Any) -> None:
        """Store a lazily computed value."""

        super(Immutable, self).__setattr__(name, value)

    def __setattr__(self, name: str, value: typing.Any) -> None:  # pragma: no cover
        """Prevent mutability."""

        raise AttributeError('Class is immutable!')
