"""Exception hierarchy for the batch file repository."""


class FileServiceError(Exception):
    """Base exception for all file repository errors."""

    pass


class InvalidNameError(FileServiceError, ValueError):
    """Raised when a file name tries to encode a directory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"The name to create must be a file without a directory ({name}). "
            "Use the path parameter to create a directory."
        )


class DirectoryCreationError(FileServiceError, OSError):
    """Raised when a directory is missing or not a directory after creation."""

    def __init__(self, directory) -> None:
        self.directory = directory
        super().__init__(f"Could not create directory: {directory}")


class PathOutsideRootError(FileServiceError, ValueError):
    """Raised when a path or trigger request falls outside the output root."""

    def __init__(self, path, root) -> None:
        self.path = path
        self.root = root
        super().__init__(f"{path} is not inside the output directory {root}")
