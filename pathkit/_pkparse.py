"""
Path Kit.

Compile glob patterns and translate them to regular expressions.

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
import copyreg
import functools
from collections import namedtuple
from . import path as _path
from . import util

LITERAL = 0
WILDCARD = 1
GLOBSTAR = 2

GLOBSTAR_MARKER = '**'

RE_STARS = re.compile(r'\*{3,}')
RE_SPECIAL = re.compile(r'([.+?*^$|()\[\]{}\\])')

# Pieces to construct the expression
# Start of string or following a separator
_OPEN_ANCHOR = r'(?:^|%(sep)s)'
# Anchored at the start of string
_ANCHOR = r'^'
# Star inside a path component
_PATH_STAR = r'[^%(sep)s]*'
# `GLOBSTAR` followed by more segments: zero or more directories
_GLOBSTAR_DIR = r'(.+%(sep)s)?'
# `GLOBSTAR` at the end: anything, directories and files alike
_GLOBSTAR_END = r'.+'
# End of pattern
_EOP = r'$'


class PatternError(ValueError):
    """Pattern error."""


class Segment(namedtuple('Segment', ['kind', 'text'])):
    """Compiled pattern segment."""

    @property
    def is_literal(self):
        """Check if segment is literal text."""

        return self.kind == LITERAL

    @property
    def is_wildcard(self):
        """Check if segment matches names within one directory."""

        return self.kind == WILDCARD

    @property
    def is_globstar(self):
        """Check if segment matches zero or more directories."""

        return self.kind == GLOBSTAR


def escape_sep(sep):
    """Escape the separator."""

    return '\\' + sep if RE_SPECIAL.match(sep) or sep == '/' else re.escape(sep)


def escape(text, sep):
    """Escape regular expression special characters and the separator."""

    value = RE_SPECIAL.sub(r'\\\1', text)
    if not RE_SPECIAL.match(sep):
        value = value.replace(sep, escape_sep(sep))
    return value


class CompiledPattern(util.Immutable):
    """Compiled glob pattern."""

    __slots__ = ("_pattern", "_segments", "_sep", "_hash")

    def __init__(self, pattern, segments, sep):
        """Initialization."""

        super(CompiledPattern, self).__init__(
            _pattern=pattern,
            _segments=tuple(segments),
            _sep=sep,
            _hash=hash((type(self), tuple(segments), sep))
        )

    @property
    def pattern(self):
        """Get the source pattern."""

        return self._pattern

    @property
    def segments(self):
        """Get the segments."""

        return self._segments

    @property
    def sep(self):
        """Get the separator."""

        return self._sep

    def __hash__(self):
        """Hash."""

        return self._hash

    def __len__(self):
        """Length."""

        return len(self._segments)

    def __iter__(self):
        """Iterate the segments."""

        return iter(self._segments)

    def __getitem__(self, index):
        """Get segment."""

        return self._segments[index]

    def __eq__(self, other):
        """Equal."""

        return (
            isinstance(other, CompiledPattern) and
            self._segments == other._segments and
            self._sep == other._sep
        )

    def __ne__(self, other):
        """Not equal."""

        return not self == other

    def __repr__(self):  # pragma: no cover
        """Representation."""

        return "{}({!r}, sep={!r})".format(type(self).__name__, self._pattern, self._sep)

    def translate(self, base=None):
        """Translate to a regular expression."""

        return translate(self, base)


def _pickle(p):
    return CompiledPattern, (p._pattern, p._segments, p._sep)


copyreg.pickle(CompiledPattern, _pickle)


def _check_sep(sep):
    """Validate the separator."""

    if not isinstance(sep, str) or len(sep) != 1:
        raise PatternError('The separator must be a single character, not {!r}'.format(sep))
    return sep


def _parse_segment(name, sep):
    """
    Classify a raw segment.

    Any `**` in the segment makes the whole segment a `GLOBSTAR`,
    discarding the other characters (`b**` is just `**`).
    """

    if GLOBSTAR_MARKER in name:
        return Segment(GLOBSTAR, GLOBSTAR_MARKER)
    if '*' not in name:
        return Segment(LITERAL, name)
    star = _PATH_STAR % {'sep': escape_sep(sep)}
    return Segment(WILDCARD, star.join(escape(part, sep) for part in name.split('*')))


def split(pattern, sep):
    """
    Split the pattern into segments.

    The pattern is normalized as a path relative to the root, so `.` and `..`
    are resolved, `..` can never climb above the root, and an absolute
    pattern is treated as relative.
    """

    pattern = RE_STARS.sub(GLOBSTAR_MARKER, pattern)
    _, names = _path._split(pattern, sep, sep, None)

    segments = []
    for name in names:
        segment = _parse_segment(name, sep)
        if segment.is_globstar and segments and segments[-1].is_globstar:
            continue
        segments.append(segment)
    return segments


@functools.lru_cache(maxsize=256, typed=True)
def _compile(pattern, sep):
    """Compile the pattern."""

    return CompiledPattern(pattern, split(pattern, sep), sep)


def compile(pattern, sep=None):  # noqa A001
    """Compile a glob pattern."""

    pattern = util.to_str(pattern, 'pattern')
    if not pattern:
        raise PatternError('The pattern cannot be empty')
    return _compile(pattern, _check_sep(util.to_sep(sep)))


def _norm_base(base, sep):
    """Normalize the base prefix separators."""

    if sep == '\\':
        base = base.replace('/', sep)
    return base.rstrip(sep)


def translate(pattern, base=None):
    """
    Translate a compiled pattern to a regular expression.

    Without `base`, the expression may match at the start of the string
    or after any separator. With `base`, the expression is anchored to
    the start and must begin with `base`.
    """

    sep = pattern.sep
    esep = escape_sep(sep)
    fmt = {'sep': esep}

    if base is None:
        result = [_OPEN_ANCHOR % fmt]
    else:
        result = [_ANCHOR, escape(_norm_base(util.to_str(base, 'base'), sep), sep), esep]

    last = len(pattern) - 1
    for index, segment in enumerate(pattern):
        if segment.is_literal:
            result.append(escape(segment.text, sep) + esep)
        elif segment.is_wildcard:
            result.append(segment.text + esep)
        elif index == last:
            result.append(_GLOBSTAR_END)
        else:
            result.append(_GLOBSTAR_DIR % fmt)

    # Keep the separator when it is all that is left of a root base.
    if result[-1].endswith(esep) and (len(pattern) or result[-2]):
        result[-1] = result[-1][:-len(esep)]
    result.append(_EOP)
    return ''.join(result)


@functools.lru_cache(maxsize=256, typed=True)
def compile_segment(segment):
    """Compile a wildcard segment for name matching."""

    return re.compile(segment.text)
