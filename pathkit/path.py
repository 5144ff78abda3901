"""
Path Kit.

Text based path normalization.

Licensed under MIT
Copyright (c) 2018 - 2020 Isaac Muse <isaacmuse@gmail.com>

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
documentation files (the "Software"), to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or substantial portions
of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED
TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
IN THE SOFTWARE.
"""
import os
import string
import typing
from . import types
from . import util

__all__ = (
    "is_absolute", "expand", "normalize", "relative", "within", "join", "root", "Path"
)

CURRENT = '.'
PARENT = '..'

_DRIVE_LETTERS = frozenset(string.ascii_letters)


def _is_drive(name: str) -> bool:
    """Check if the first path component marks an absolute path."""

    return name == '' or (len(name) == 2 and name[0] in _DRIVE_LETTERS and name[1] == ':')


def _strip(path: str, sep: str) -> str:
    """Strip a single trailing separator."""

    return path[:-1] if path.endswith(sep) else path


def _get_cwd(sep: str, cwd: types.OptPathLike) -> str:
    """
    Resolve the working directory.

    If no working directory is provided, the process' working directory is used
    with the host separator rewritten to `sep`.
    """

    if cwd is None:
        cwd = os.getcwd()
        if sep != os.sep:
            cwd = cwd.replace(os.sep, sep)
    else:
        cwd = util.to_str(cwd, 'cwd')
    if not is_absolute(cwd, sep):
        raise ValueError("The working directory must be an absolute path, not '{}'".format(cwd))
    return cwd


def _expand(path: str, base: typing.Optional[str], sep: str, cwd: types.OptPathLike) -> str:
    """Expand the path against the base, and the base against the working directory."""

    if is_absolute(path, sep):
        return path
    if not base:
        base = _get_cwd(sep, cwd)
    elif not is_absolute(base, sep):
        current = _get_cwd(sep, cwd)
        base = _expand(base, current, sep, current)
    return _strip(base, sep) + sep + path


def _split(path: str, base: typing.Optional[str], sep: str, cwd: types.OptPathLike) -> typing.Tuple[str, typing.List[str]]:
    """Split the expanded path into the drive and the remaining resolved components."""

    parts = _expand(path, base, sep, cwd).split(sep)
    stack = []  # type: typing.List[str]
    for part in parts[1:]:
        if part in ('', CURRENT):
            continue
        if part == PARENT:
            # Never step above the drive.
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return parts[0], stack


def _join_parts(drive: str, parts: typing.List[str], sep: str) -> str:
    """Join the drive and components."""

    return drive + sep + sep.join(parts)


def _reference(
    to: types.OptPathLike, base: types.OptPathLike, sep: str, cwd: types.OptPathLike
) -> typing.Tuple[str, typing.List[str]]:
    """Get the normalized reference directory for `relative` and `within`."""

    ref = to if to else base
    ref = util.to_str(ref, 'to') if ref else _get_cwd(sep, cwd)
    return _split(ref, None, sep, cwd)


def is_absolute(path: types.PathLike, sep: typing.Optional[str] = None) -> bool:
    """
    Check if the path is absolute.

    A path is absolute if it starts with the separator, or if its first component
    is a Windows drive (`C:`). An empty path is relative.
    """

    path = util.to_str(path)
    if not path:
        return False
    return _is_drive(path.split(util.to_sep(sep), 1)[0])


def expand(
    path: types.PathLike,
    base: types.OptPathLike = None,
    sep: typing.Optional[str] = None,
    *,
    cwd: types.OptPathLike = None
) -> str:
    """Expand a relative path to a full path based on `base` (the working directory by default)."""

    sep = util.to_sep(sep)
    return _expand(util.to_str(path), util.to_str(base, 'base') if base else None, sep, cwd)


def normalize(
    path: types.PathLike,
    base: types.OptPathLike = None,
    sep: typing.Optional[str] = None,
    *,
    cwd: types.OptPathLike = None
) -> str:
    """
    Expand the path and strip the special elements (`.`, `..`, and empty ones).

    `..` at the root is a no-op, so excess parent references simply resolve to the root.
    The file system is never consulted.
    """

    sep = util.to_sep(sep)
    drive, parts = _split(util.to_str(path), util.to_str(base, 'base') if base else None, sep, cwd)
    return _join_parts(drive, parts, sep)


def relative(
    path: types.PathLike,
    base: types.OptPathLike = None,
    sep: typing.Optional[str] = None,
    *,
    to: types.OptPathLike = None,
    cwd: types.OptPathLike = None
) -> str:
    """
    Get the path relative to `to`.

    `path` is resolved against `base`, and `to` defaults to `base`. If the two are on
    different drives, no relative path exists, so the normalized `path` is returned.
    """

    sep = util.to_sep(sep)
    base = util.to_str(base, 'base') if base else None
    drive, target = _split(util.to_str(path), base, sep, cwd)
    ref_drive, ref = _reference(to, base, sep, cwd)

    if drive != ref_drive:
        return _join_parts(drive, target, sep)

    common = 0
    for a, b in zip(target, ref):
        if a != b:
            break
        common += 1

    parts = [PARENT] * (len(ref) - common) + target[common:]
    return sep.join(parts) if parts else CURRENT


def within(
    path: types.PathLike,
    base: types.OptPathLike = None,
    sep: typing.Optional[str] = None,
    *,
    to: types.OptPathLike = None,
    cwd: types.OptPathLike = None
) -> bool:
    """Check if the path lays within the directory `to` (`base` by default)."""

    sep = util.to_sep(sep)
    base = util.to_str(base, 'base') if base else None
    target = _join_parts(*_split(util.to_str(path), base, sep, cwd), sep)
    prefix = _join_parts(*_reference(to, base, sep, cwd), sep)
    return target == prefix or target.startswith(prefix if prefix.endswith(sep) else prefix + sep)


def join(path: types.PathLike, *paths: types.PathLike, sep: typing.Optional[str] = None) -> str:
    """Append paths with exactly one separator between each piece."""

    sep = util.to_sep(sep)
    result = util.to_str(path)
    for p in paths:
        result = result.rstrip(sep) + sep + util.to_str(p).lstrip(sep)
    return result


def root(sep: typing.Optional[str] = None, *, cwd: types.OptPathLike = None) -> str:
    """Get the root path: `/` for Unix style paths, the root of the working drive otherwise."""

    sep = util.to_sep(sep)
    if sep == '/':
        return sep
    return _get_cwd(sep, cwd).split(sep, 1)[0] + sep


class Path(util.Immutable):
    """
    Path value object.

    Wraps a path with the base it is relative to, and lazily computes
    (and caches) its expanded and normalized forms.
    """

    __slots__ = ("_path", "_base", "_sep", "_cwd", "_expanded", "_normalized")

    def __init__(
        self,
        path: types.PathLike,
        base: types.OptPathLike = None,
        sep: typing.Optional[str] = None,
        *,
        cwd: types.OptPathLike = None
    ) -> None:
        """Initialize."""

        sep = util.to_sep(sep)
        base = util.to_str(base, 'base') if base else None
        super(Path, self).__init__(
            _path=util.to_str(path),
            _base=_strip(base, sep) if base and base != sep else base,
            _sep=sep,
            _cwd=cwd,
            _expanded=None,
            _normalized=None
        )

    @property
    def path(self) -> str:
        """Get the path as given."""

        return self._path

    @property
    def base(self) -> typing.Optional[str]:
        """Get the base directory, `None` if the working directory is used."""

        return self._base

    @property
    def sep(self) -> str:
        """Get the separator."""

        return self._sep

    def is_absolute(self) -> bool:
        """Test if this is an absolute path."""

        return is_absolute(self._path, self._sep)

    def expand(self) -> str:
        """Expand to a full path."""

        if self._expanded is None:
            self._cache('_expanded', expand(self._path, self._base, self._sep, cwd=self._cwd))
        return self._expanded

    def normalize(self) -> str:
        """Get the normalized full path."""

        if self._normalized is None:
            self._cache('_normalized', normalize(self.expand(), None, self._sep, cwd=self._cwd))
        return self._normalized

    def within(self, to: types.OptPathLike = None) -> bool:
        """Check if the path lays within `to` (the base by default)."""

        return within(self.normalize(), self._base, self._sep, to=to, cwd=self._cwd)

    def relative(self, to: types.OptPathLike = None) -> str:
        """Get the path relative to `to` (the base by default)."""

        return relative(self.normalize(), self._base, self._sep, to=to, cwd=self._cwd)

    def join(self, *paths: types.PathLike) -> 'Path':
        """Get a new path with `paths` appended."""

        return Path(join(self._path, *paths, sep=self._sep), self._base, self._sep, cwd=self._cwd)

    def __str__(self) -> str:
        """String."""

        return self._path

    def __fspath__(self) -> str:
        """File system path."""

        return self._path

    def __repr__(self) -> str:  # pragma: no cover
        """Representation."""

        return "{}({!r}, base={!r}, sep={!r})".format(type(self).__name__, self._path, self._base, self._sep)

    def __hash__(self) -> int:
        """Hash."""

        return hash((type(self), self._path, self._base, self._sep))

    def __eq__(self, other: typing.Any) -> bool:
        """Equal."""

        return (
            isinstance(other, Path) and
            self._path == other._path and
            self._base == other._base and
            self._sep == other._sep
        )

    def __ne__(self, other: typing.Any) -> bool:
        """Not equal."""

        return not self == other
