"""Pydantic models exposed by the file repository."""

from .schemas import FileInfo  # noqa: F401
