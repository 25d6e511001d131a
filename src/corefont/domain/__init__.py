"""Domain models for corefont.

This module contains the models for glyph encodings and font metrics. All
models are:

- Immutable once built (frozen dataclasses, read-only mapping views)
- Serializable to plain dictionaries for emission
- Independent of the AFM file format

Key classes:
- GlyphEncoding: Character code to glyph name map
- FontBoundingBox: Overall glyph extent of a font
- FontMetrics: Bounding box and glyph widths of one font
- FontMetricsRegistry: Font identifier to FontMetrics
"""

from corefont.domain.encoding import (
    ENCODINGS,
    SYMBOL_ENCODING,
    WIN_ANSI_ENCODING,
    ZAPF_DINGBATS_ENCODING,
    GlyphEncoding,
)
from corefont.domain.metrics import FontBoundingBox, FontMetrics, FontMetricsRegistry

__all__: list[str] = [
    # Encodings
    "ENCODINGS",
    "SYMBOL_ENCODING",
    "WIN_ANSI_ENCODING",
    "ZAPF_DINGBATS_ENCODING",
    "GlyphEncoding",
    # Metrics
    "FontBoundingBox",
    "FontMetrics",
    "FontMetricsRegistry",
]
