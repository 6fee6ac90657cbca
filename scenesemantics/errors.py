"""Mini README: Error taxonomy shared across the scenesemantics engine.

Structure:
    * SceneSemanticsError - common base class.
    * ProviderUnavailableError - the mesh provider has no current frame.
    * ExportIOError - a directory or file operation failed during export.
    * UnmappedLabelError - a face classification outside the fixed label set.

None of these escape the public query or export operations; they are caught
where they occur, logged, and converted into empty or default results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class SceneSemanticsError(Exception):
    """Base class for engine errors."""


class ProviderUnavailableError(SceneSemanticsError):
    """Raised by providers when no frame is available to snapshot."""


class ExportIOError(SceneSemanticsError):
    """Wraps an ``OSError`` raised while touching the export destination."""

    def __init__(self, path: Path, operation: str, cause: Optional[OSError] = None) -> None:
        self.path = path
        self.operation = operation
        self.cause = cause
        message = f"Failed to {operation} {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class UnmappedLabelError(SceneSemanticsError):
    """Raised when a raw classification does not map onto ``Label``."""

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Unmapped classification value {raw!r}")
