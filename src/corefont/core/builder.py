"""Registry building from a directory of AFM files.

This module coordinates the metrics build: list the source directory, parse
each AFM file in ascending filename order, and collect the results into a
FontMetricsRegistry. The build is sequential and fail-fast: the first error
aborts it and no partial registry is returned.

Key components:
- list_font_files: Sorted listing of AFM files in a directory
- font_name_for: Font identifier derived from a filename
- RegistryBuilder: Build orchestrator
- build_registry: Convenience wrapper around RegistryBuilder
"""

import time
from pathlib import Path

import structlog

from corefont.config import CoreFontSettings, SourceConfig
from corefont.core.parser import AFMParser
from corefont.domain.metrics import FontMetrics, FontMetricsRegistry
from corefont.exceptions import BuildError, CorruptFileError, SourceDirectoryError
from corefont.utils import BuildLogger, BuildStats


def list_font_files(source_dir: Path, extension: str = ".afm") -> list[Path]:
    """List the font metric files of a directory.

    Only regular files whose names end with the extension and have a
    non-empty stem are returned; other entries are ignored. The result is
    sorted by filename so builds never depend on the file system's
    enumeration order.

    Args:
        source_dir: Directory to list
        extension: File extension to match (case-sensitive)

    Returns:
        Paths sorted ascending by filename

    Raises:
        SourceDirectoryError: If the directory is missing or cannot be read
    """
    if not source_dir.exists():
        raise SourceDirectoryError(str(source_dir), "no such directory")
    if not source_dir.is_dir():
        raise SourceDirectoryError(str(source_dir), "not a directory")

    try:
        entries = list(source_dir.iterdir())
    except OSError as e:
        raise SourceDirectoryError(str(source_dir), e.strerror or str(e)) from e

    font_files = [
        entry
        for entry in entries
        if entry.name.endswith(extension)
        and len(entry.name) > len(extension)
        and entry.is_file()
    ]
    return sorted(font_files, key=lambda path: path.name)


def font_name_for(filename: str, extension: str = ".afm") -> str:
    """Derive the font identifier from a filename.

    The extension is removed; no other normalization is applied.

    Args:
        filename: File name (e.g., "Helvetica-Bold.afm")
        extension: Extension to strip

    Returns:
        Font identifier (e.g., "Helvetica-Bold")
    """
    if filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


class RegistryBuilder:
    """Builds a FontMetricsRegistry from a directory of AFM files.

    Example:
        builder = RegistryBuilder(CoreFontSettings())
        registry = builder.build(Path("Core14_AFMs"))
        print(builder.stats.files_parsed)
    """

    def __init__(
        self,
        settings: CoreFontSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            settings: Corefont settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or CoreFontSettings()
        self.logger = logger or structlog.get_logger(__name__)
        self.build_logger = BuildLogger(self.logger)
        self.parser = AFMParser(
            reject_duplicate_glyphs=self.settings.parser.reject_duplicate_glyphs,
        )

    @property
    def stats(self) -> BuildStats:
        """Statistics of the most recent build."""
        return self.build_logger.stats

    def build(self, source_dir: Path) -> FontMetricsRegistry:
        """Parse every font metric file of a directory into a registry.

        Args:
            source_dir: Directory holding the AFM files

        Returns:
            Registry with one entry per file, in ascending filename order

        Raises:
            SourceDirectoryError: If the directory cannot be listed
            BuildError: If any file cannot be read or is corrupt
        """
        source = self.settings.source
        self.build_logger = BuildLogger(self.logger)
        self.stats.start_time = time.time()

        font_files = list_font_files(source_dir, source.extension)
        self.build_logger.log_source_listed(source_dir, len(font_files))

        fonts: dict[str, FontMetrics] = {}
        for path in font_files:
            font_name = font_name_for(path.name, source.extension)
            fonts[font_name] = self._build_font(path, font_name, source)

        self.stats.end_time = time.time()
        return FontMetricsRegistry(fonts)

    def _build_font(self, path: Path, font_name: str, source: SourceConfig) -> FontMetrics:
        """Parse a single AFM file.

        Raises:
            BuildError: Wrapping the parse or read failure
        """
        self.build_logger.log_file_start(path.name)
        start_time = time.time()

        try:
            with path.open(encoding=source.encoding) as stream:
                metrics = self.parser.parse(stream)
        except (CorruptFileError, OSError, UnicodeDecodeError) as e:
            self.build_logger.log_file_error(path.name, e)
            raise BuildError(path.name, e) from e

        for glyph_name in self.parser.duplicate_glyphs:
            self.logger.debug("Duplicate glyph width replaced", file=path.name, glyph=glyph_name)

        duration_ms = (time.time() - start_time) * 1000
        self.build_logger.log_file_complete(
            path.name,
            font_name,
            metrics.glyph_count,
            duration_ms,
        )
        return metrics


def build_registry(source_dir: Path, extension: str = ".afm") -> FontMetricsRegistry:
    """Build a registry with default settings.

    Args:
        source_dir: Directory holding the AFM files
        extension: Font metric file extension

    Returns:
        FontMetricsRegistry
    """
    settings = CoreFontSettings(source=SourceConfig(extension=extension))
    return RegistryBuilder(settings).build(source_dir)
