from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FileInfo(BaseModel):
    """Read-only view of a stored file, recomputed on every listing."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path relative to the output root, using forward slashes.")
    name: str
    output_path: Path
    trigger_path: Path
    size: int
    modified_at: datetime
    triggered: bool = Field(False, description="Whether the trigger file currently exists.")

    @classmethod
    def from_stored_file(cls, file: Path, output_root: Path, trigger_root: Path) -> "FileInfo":
        """Project a stored file onto both the output and trigger trees."""
        relative = file.relative_to(output_root)
        trigger = trigger_root / relative
        stat = file.stat()
        return cls(
            path=relative.as_posix(),
            name=file.name,
            output_path=file,
            trigger_path=trigger,
            size=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime),
            triggered=trigger.is_file(),
        )
