"""Exception hierarchy for mdprune.

Every fatal failure carries the offending path so the CLI can render
an actionable message. Per-file problems during scanning (unreadable
markdown, unreadable subdirectories) are not represented here as fatal
errors; the scanner recovers from them locally.
"""

from pathlib import Path


class MdPruneError(Exception):
    """Base exception for mdprune errors."""


# === Setup errors ===


class ScanRootError(MdPruneError):
    """Base exception for an unusable scan root."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ScanRootNotFoundError(ScanRootError):
    """Raised when the target directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory does not exist: {path}", path)


class ScanRootNotADirectoryError(ScanRootError):
    """Raised when the target path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path is not a directory: {path}", path)


class CanonicalizeError(ScanRootError):
    """Raised when the target directory cannot be canonicalized."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to canonicalize directory {path}: {reason}", path)


# === Configuration errors ===


class ConfigError(MdPruneError):
    """Base exception for settings file errors."""


class ConfigParseError(ConfigError):
    """Raised when the settings file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the settings file content is invalid."""


class InvalidExtensionsError(MdPruneError, ValueError):
    """Raised when an image extension list is empty or malformed."""


# === Extraction errors ===


class MarkdownReadError(MdPruneError):
    """Raised when a markdown document cannot be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read markdown file {path}: {reason}")
        self.path = path


# === Action errors ===


class ImageActionError(MdPruneError):
    """Base exception for a failed delete, recycle, or move."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ImageDeleteError(ImageActionError):
    """Raised when an orphaned image cannot be deleted."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to delete {path}: {reason}", path)


class ImageRecycleError(ImageActionError):
    """Raised when an orphaned image cannot be moved to the trash."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to move to recycle bin {path}: {reason}", path)


class ImageMoveError(ImageActionError):
    """Raised when an orphaned image cannot be moved to the holding directory."""

    def __init__(self, path: Path, destination: Path, reason: str) -> None:
        super().__init__(f"Failed to move {path} to {destination}: {reason}", path)
        self.destination = destination


class DestinationDirectoryError(ImageActionError):
    """Raised when the holding directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to create directory {path}: {reason}", path)
