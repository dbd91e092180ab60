from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional

from batchfiles.errors import DirectoryCreationError, InvalidNameError, PathOutsideRootError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y%m%d"
_SEPARATORS = ("/", "\\")


class FileSystemStorage:
    """Storage backend allocating uniquely named files under a root directory."""

    def __init__(self, root: Path, clock: Callable[[], datetime] = datetime.now) -> None:
        self.root = Path(root).expanduser().resolve()
        self.clock = clock
        ensure_directory(self.root)

    def resolve_directory(self, subpath: Optional[str], name: str) -> Path:
        """Map a logical (path, name) pair onto a directory under the root.

        The name must not contain a separator; nesting is only expressed
        through ``subpath``, which must stay inside the root.
        """
        if any(separator in name for separator in _SEPARATORS):
            raise InvalidNameError(name)
        relative = (subpath or "").lstrip("/\\")
        directory = Path(os.path.normpath(self.root / relative))
        if directory != self.root and self.root not in directory.parents:
            raise PathOutsideRootError(directory, self.root)
        return directory

    def allocate(self, subpath: Optional[str], name: str) -> Path:
        """Create an empty, uniquely named file and return its path.

        The file name is ``<name>.<yyyyMMdd>.<token>``. Uniqueness relies on the
        exclusive create performed by :func:`tempfile.mkstemp`, so concurrent
        callers in any process never receive the same path.
        """
        directory = ensure_directory(self.resolve_directory(subpath, name))
        prefix = f"{name}.{self.date_infix()}."
        fd, raw_path = tempfile.mkstemp(prefix=prefix, dir=directory)
        os.close(fd)
        path = Path(raw_path)
        logger.debug("Allocated %s", path)
        return path

    def date_infix(self) -> str:
        return self.clock().strftime(DATE_FORMAT)

    def relative_path(self, file: Path) -> Optional[Path]:
        """Return ``file`` relative to the root, or None if it is not a strict descendant."""
        absolute = Path(os.path.abspath(file))
        # Resolve the parent only, the file itself may be a symlink.
        absolute = absolute.parent.resolve() / absolute.name
        try:
            relative = absolute.relative_to(self.root)
        except ValueError:
            return None
        if relative == Path("."):
            return None
        return relative

    def iter_files(self, strict: bool = True) -> Iterator[Path]:
        """Yield every regular file under the root.

        Directory symlinks are not followed. Traversal errors propagate as
        ``OSError``; with ``strict=False`` only a failure on the root itself
        propagates and unreadable subdirectories are logged and skipped.
        """
        onerror = _raise if strict else self._skip_subdirectory
        for dirpath, _dirnames, filenames in os.walk(self.root, onerror=onerror):
            for filename in filenames:
                path = Path(dirpath) / filename
                if path.is_file():
                    yield path

    def _skip_subdirectory(self, error: OSError) -> None:
        if error.filename is None or Path(error.filename) == self.root:
            raise error
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error)


def ensure_directory(directory: Path) -> Path:
    """Create ``directory`` and its ancestors, failing if it is not a directory afterwards."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except (FileExistsError, NotADirectoryError) as exc:
        raise DirectoryCreationError(directory) from exc
    if not directory.is_dir():
        raise DirectoryCreationError(directory)
    return directory


def _raise(error: OSError) -> None:
    raise error
