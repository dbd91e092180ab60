from .file_service import LocalFileService  # noqa: F401
