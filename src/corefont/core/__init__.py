"""Core processing for corefont.

This module contains the AFM parser and the registry builder:

- AFM parsing (two-state line scanner over FontBBox and CharMetrics)
- Registry building (sorted directory listing, fail-fast per-file parsing)

Key functions:
- parse_afm: Parse one AFM stream into FontMetrics
- list_font_files: List AFM files of a directory in filename order
- font_name_for: Derive a font identifier from a filename
- build_registry: Build a FontMetricsRegistry with default settings

Key classes:
- AFMParser: The AFM scanner
- RegistryBuilder: Builds a registry from a directory
"""

from corefont.core.builder import (
    RegistryBuilder,
    build_registry,
    font_name_for,
    list_font_files,
)
from corefont.core.parser import AFMParser, ParserState, parse_afm

__all__ = [
    # Parser
    "AFMParser",
    "ParserState",
    # Builder
    "RegistryBuilder",
    "build_registry",
    "font_name_for",
    "list_font_files",
    "parse_afm",
]
