"""File system access used by the glob walker."""
import errno
import os
from . import path as _path
from . import util

__all__ = ("FileSystem", "MemoryFileSystem")


class FileSystem(object):
    """
    Host file system access.

    The glob walker only ever needs to probe existence, check for directories,
    list directory entries, and get the working directory. Provide the same
    methods to glob over anything that looks like a directory tree.
    """

    def exists(self, path):
        """Check if the path exists."""

        return os.path.exists(path)

    def is_dir(self, path):
        """Check if the path is a directory."""

        return os.path.isdir(path)

    def listdir(self, path):
        """
        List the names in the directory.

        The listing is fully read so that no directory handle stays open
        while the caller is suspended.
        """

        with os.scandir(path) as scan:
            return [f.name for f in scan]

    def getcwd(self, sep=None):
        """Get the current working directory using the given separator."""

        sep = util.to_sep(sep)
        cwd = os.getcwd()
        return cwd.replace(os.sep, sep) if sep != os.sep else cwd


class MemoryFileSystem(FileSystem):
    """
    Virtual file system.

    Built from file and directory paths. Parent directories are created as needed.
    Relative paths are resolved against `cwd` (the root by default). Directories
    listed in `denied` raise `PermissionError` when listed.
    """

    def __init__(self, files=(), dirs=(), sep='/', cwd=None, denied=()):
        """Initialize."""

        self.sep = sep
        self.cwd = cwd if cwd is not None else (sep if sep == '/' else 'C:' + sep)
        # Directories map to their entry names, files map to `None`.
        self._nodes = {_path.root(sep, cwd=self.cwd): []}
        for name in dirs:
            self._add(name, True)
        for name in files:
            self._add(name, False)
        self._denied = {self._key(name) for name in denied}

    def _key(self, path):
        """Get the normalized lookup key."""

        return _path.normalize(path, None, self.sep, cwd=self.cwd)

    def _add(self, name, is_dir):
        """Add a file or directory along with its parents."""

        drive, parts = _path._split(util.to_str(name), None, self.sep, self.cwd)
        current = drive + self.sep
        if current not in self._nodes:
            self._nodes[current] = []
        for index, part in enumerate(parts, 1):
            child = _path.join(current, part, sep=self.sep)
            directory = is_dir or index < len(parts)
            node = self._nodes.get(child, False)
            if node is False:
                self._nodes[current].append(part)
                self._nodes[child] = [] if directory else None
            elif directory and node is None:
                raise ValueError("'{}' is a file and cannot be used as a directory".format(child))
            elif not directory and node is not None:
                raise ValueError("'{}' is a directory and cannot be used as a file".format(child))
            current = child

    def exists(self, path):
        """Check if the path exists."""

        return self._key(path) in self._nodes

    def is_dir(self, path):
        """Check if the path is a directory."""

        return self._nodes.get(self._key(path)) is not None

    def listdir(self, path):
        """List the names in the directory."""

        key = self._key(path)
        if key not in self._nodes:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        if self._nodes[key] is None:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        if key in self._denied:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        return list(self._nodes[key])

    def getcwd(self, sep=None):
        """Get the current working directory."""

        return self.cwd
