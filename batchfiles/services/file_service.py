from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from batchfiles.config import Settings
from batchfiles.models.schemas import FileInfo
from batchfiles.storage import FileSystemStorage, TriggerWriter

logger = logging.getLogger(__name__)


class LocalFileService:
    """File repository on the local disk with a mirrored trigger tree.

    Producers call :meth:`create_file`, write the contents, then call
    :meth:`create_trigger` to hand the file over to batch consumers. Every
    call re-reads the directory tree; nothing is cached between calls.
    """

    def __init__(self, settings: Settings, storage: Optional[FileSystemStorage] = None) -> None:
        self.storage = storage or FileSystemStorage(settings.output_dir)
        self.triggers = TriggerWriter(self.storage, settings.trigger_dir)
        logger.info("File service using output %s and triggers %s", self.storage.root, self.triggers.root)

    def create_file(self, path: Optional[str], name: str) -> Path:
        """Allocate an empty, uniquely named file under ``path`` in the output root."""
        return self.storage.allocate(path, name)

    def create_trigger(self, file_path: Path) -> Path:
        """Publish the trigger for a completed stored file and return its path."""
        return self.triggers.write(Path(file_path))

    def list_files(self, start: int, page_size: int) -> List[FileInfo]:
        """Return one page of stored files ordered by relative path.

        A negative ``start`` is rejected; a non-positive ``page_size`` or a
        ``start`` past the end yields an empty page.
        """
        if start < 0:
            raise ValueError(f"start must not be negative (got {start})")
        if page_size <= 0:
            return []

        files = sorted(self.storage.iter_files(), key=self._sort_key)
        page: List[FileInfo] = []
        for file in files[start : start + page_size]:
            try:
                page.append(FileInfo.from_stored_file(file, self.storage.root, self.triggers.root))
            except FileNotFoundError:
                logger.debug("File %s vanished while listing", file)
        return page

    def count_files(self) -> int:
        """Return the number of stored files, for computing page counts."""
        return sum(1 for _ in self.storage.iter_files())

    def delete_all(self) -> int:
        """Delete every stored file and return how many were found.

        Deletion is best effort: a file that cannot be removed is logged and
        skipped but still counted, and unreadable subdirectories are skipped.
        Only a traversal failure on the output root itself raises. Trigger
        files are left in place.
        """
        count = 0
        for file in self.storage.iter_files(strict=False):
            count += 1
            try:
                file.unlink()
            except OSError as exc:
                logger.warning("Could not delete %s: %s", file, exc)
        logger.info("Deleted %d files from %s", count, self.storage.root)
        return count

    def get_trigger_directory(self) -> Path:
        return self.triggers.root

    def get_upload_directory(self) -> Path:
        return self.storage.root

    def _sort_key(self, file: Path) -> str:
        return file.relative_to(self.storage.root).as_posix()
