"""
Path Kit.

A lazy, stack driven implementation of `glob`.

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
import re
from . import _pkparse
from . import filesystem
from . import path as _path
from . import util

__all__ = (
    "LITERAL", "WILDCARD", "GLOBSTAR",
    "Glob", "PatternError", "CompiledPattern",
    "compile", "translate", "iglob", "glob", "globmatch", "globfilter", "is_magic"
)

LITERAL = _pkparse.LITERAL
WILDCARD = _pkparse.WILDCARD
GLOBSTAR = _pkparse.GLOBSTAR

PatternError = _pkparse.PatternError
CompiledPattern = _pkparse.CompiledPattern


def _get_pattern(pattern, sep):
    """Get the compiled pattern."""

    if isinstance(pattern, CompiledPattern):
        if sep and sep != pattern.sep:
            raise PatternError(
                "Pattern was compiled with separator {!r}, not {!r}".format(pattern.sep, sep)
            )
        return pattern
    return _pkparse.compile(pattern, sep)


class Glob(object):
    """
    Glob patterns.

    Walks the directory tree with an explicit stack of `(path, index)` frames, where
    `index` points at the next pattern segment to match. A frame whose index is past
    the last segment is a match. Matches are produced lazily, one at a time, and the
    order is not defined.
    """

    def __init__(self, pattern, root_dir=None, sep=None, fs=None, cwd=None):
        """Initialize the directory walker object."""

        self.pattern = _get_pattern(pattern, sep)
        self.sep = self.pattern.sep
        self.fs = fs if fs is not None else filesystem.FileSystem()
        self.current = _path.CURRENT
        self.specials = (_path.CURRENT, _path.PARENT)
        self.root_dir = util.to_str(root_dir, 'root_dir') if root_dir else self.current
        self.cwd = cwd

    def _join(self, path, name):
        """Join the name to the path without doubling the separator at the root."""

        return path + name if path.endswith(self.sep) else path + self.sep + name

    def _get_starting_path(self):
        """
        Get the starting location.

        The root directory is normalized, and if it is not a directory,
        its parent is used instead.
        """

        cwd = self.cwd
        if cwd is None and not _path.is_absolute(self.root_dir, self.sep):
            cwd = self.fs.getcwd(self.sep)
        base = _path.normalize(self.root_dir, None, self.sep, cwd=cwd)
        if not self.fs.is_dir(base):
            base = _path.normalize(self._join(base, _path.PARENT), None, self.sep)
        return base

    def _iter(self, path):
        """List a directory, anything that is not a directory has no entries."""

        if not self.fs.is_dir(path):
            return []
        return self.fs.listdir(path)

    def on_error(self, path, error):
        """On directory listing error."""

        return None

    def on_match(self, path):
        """On match."""

        return path

    def glob(self):
        """Starts off the glob iterator."""

        segments = self.pattern.segments
        last = len(segments) - 1
        pending = [(self._get_starting_path(), 0)]

        while pending:
            path, index = pending.pop()
            if index > last:
                yield self.on_match(path)
                continue

            segment = segments[index]

            if segment.is_literal:
                # Probe directly, literals match files and directories alike.
                target = self._join(path, segment.text)
                if self.fs.exists(target):
                    pending.append((target, index + 1))
                continue

            if segment.is_globstar and index < last:
                # Try the rest of the pattern against this directory (zero directories).
                pending.append((path, index + 1))

            try:
                names = self._iter(path)
            except OSError as e:
                value = self.on_error(path, e)
                if value is not None:
                    yield value
                continue

            if segment.is_wildcard:
                matcher = _pkparse.compile_segment(segment).fullmatch
                for name in names:
                    if matcher(name):
                        pending.append((self._join(path, name), index + 1))

            else:
                # Retry the `globstar` one level down.
                for name in names:
                    if name in self.specials:
                        continue
                    target = self._join(path, name)
                    pending.append((target, index))
                    if index == last:
                        yield self.on_match(target)


def compile(pattern, *, sep=None):  # noqa A001
    """Compile the glob pattern."""

    return _pkparse.compile(pattern, sep)


def translate(pattern, *, sep=None, base=None):
    """Translate glob pattern to a regular expression."""

    return _pkparse.translate(_get_pattern(pattern, sep), base)


def iglob(pattern, *, root_dir=None, sep=None, fs=None, cwd=None):
    """Glob."""

    yield from Glob(pattern, root_dir, sep, fs, cwd).glob()


def glob(pattern, *, root_dir=None, sep=None, fs=None, cwd=None):
    """Glob."""

    return list(iglob(pattern, root_dir=root_dir, sep=sep, fs=fs, cwd=cwd))


def globmatch(filename, pattern, *, sep=None, base=None):
    """
    Check if filename matches pattern.

    Without `base`, the pattern may match any trailing run of path components.
    """

    return re.search(translate(pattern, sep=sep, base=base), util.to_str(filename, 'filename')) is not None


def globfilter(filenames, pattern, *, sep=None, base=None):
    """Filter names using pattern."""

    matches = []
    regex = re.compile(translate(pattern, sep=sep, base=base))

    for filename in filenames:
        if regex.search(util.to_str(filename, 'filename')):
            matches.append(filename)
    return matches


def is_magic(pattern):
    """Check if the pattern has any wildcards."""

    return '*' in util.to_str(pattern, 'pattern')
