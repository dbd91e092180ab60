"""
Local-disk file repository for batch job pickup.

Producers allocate uniquely named files under an output root and publish a
trigger file at the same relative path under a trigger root once a file is
complete. Storage, trigger writing and the service facade live in separate
modules so the layers can evolve independently.
"""

from .config import Settings, get_settings  # noqa: F401
from .errors import (  # noqa: F401
    DirectoryCreationError,
    FileServiceError,
    InvalidNameError,
    PathOutsideRootError,
)
from .models import FileInfo  # noqa: F401
from .services import LocalFileService  # noqa: F401
