from __future__ import annotations

import logging
import os
from pathlib import Path

from batchfiles.errors import PathOutsideRootError
from batchfiles.storage.filesystem import FileSystemStorage

logger = logging.getLogger(__name__)


class TriggerWriter:
    """Write marker files that mirror stored files under a separate trigger root.

    A trigger lives at the same relative path as its stored file and contains
    the stored file's absolute path. Consumers poll the trigger root.
    """

    def __init__(self, storage: FileSystemStorage, root: Path) -> None:
        self.storage = storage
        self.root = Path(root).expanduser().resolve()

    def trigger_path(self, stored_file: Path) -> Path:
        relative = self.storage.relative_path(stored_file)
        if relative is None:
            raise PathOutsideRootError(stored_file, self.storage.root)
        return self.root / relative

    def write(self, stored_file: Path) -> Path:
        """Write (or overwrite) the trigger for ``stored_file`` and return its path."""
        trigger = self.trigger_path(stored_file)
        trigger.parent.mkdir(parents=True, exist_ok=True)
        # Plain text write, readers may observe a partially written trigger.
        trigger.write_text(os.path.abspath(stored_file), encoding="utf-8")
        logger.debug("Wrote trigger %s for %s", trigger, stored_file)
        return trigger
