"""Exception hierarchy for Corefont."""


class CoreFontError(Exception):
    """Base exception for all Corefont errors."""

    pass


class CorruptFileError(CoreFontError):
    """An AFM source violates the expected structure."""

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            message = f"Corrupt AFM file: {reason}"
        else:
            message = f"Corrupt AFM file (line {line_number}): {reason}"
        super().__init__(message)


class MissingBoundingBoxError(CorruptFileError):
    """StartCharMetrics was reached before a valid FontBBox line."""

    def __init__(self, line_number: int | None = None) -> None:
        super().__init__("StartCharMetrics before FontBBox", line_number)


class MetricsIOError(CoreFontError):
    """A file or directory could not be read, or an artifact not written."""

    description = "I/O error on"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{self.description} '{path}': {reason}")


class SourceDirectoryError(MetricsIOError):
    """The AFM source directory is missing or cannot be listed."""

    description = "Cannot list source directory"


class ArtifactWriteError(MetricsIOError):
    """The generated artifact could not be written."""

    description = "Failed to write"


class BuildError(CoreFontError):
    """A parse or I/O failure while building the registry.

    Attributes:
        filename: Name of the AFM file being processed
        cause: The originating exception
    """

    def __init__(self, filename: str, cause: Exception) -> None:
        self.filename = filename
        self.cause = cause
        super().__init__(f"Failed to build metrics from '{filename}': {cause}")

    @property
    def is_corrupt_file(self) -> bool:
        """True if the build failed on malformed AFM content."""
        return isinstance(self.cause, CorruptFileError)
