"""Font metrics domain models.

This module defines the records produced by the AFM parser and collected by
the registry builder:
- FontBoundingBox: overall glyph extent of a font
- FontMetrics: bounding box plus glyph width table for one font
- FontMetricsRegistry: font identifier to FontMetrics, read-only
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class FontBoundingBox:
    """Minimal rectangle enclosing all glyphs of a font, in font units.

    Attributes:
        xmin: Left edge
        ymin: Bottom edge
        xmax: Right edge
        ymax: Top edge
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Convert to a (xmin, ymin, xmax, ymax) tuple."""
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with xmin, ymin, xmax and ymax fields
        """
        return {
            "xmin": self.xmin,
            "ymin": self.ymin,
            "xmax": self.xmax,
            "ymax": self.ymax,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontBoundingBox":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with xmin, ymin, xmax and ymax fields

        Returns:
            FontBoundingBox instance
        """
        return cls(
            xmin=float(data["xmin"]),
            ymin=float(data["ymin"]),
            xmax=float(data["xmax"]),
            ymax=float(data["ymax"]),
        )


@dataclass(frozen=True)
class FontMetrics:
    """Metrics of a single font.

    The width table may be empty; that is a valid, if degenerate, font.

    Attributes:
        bbox: Font bounding box
        widths: Read-only map of glyph name to advance width (1000 units/em)
    """

    bbox: FontBoundingBox
    widths: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "widths", MappingProxyType(dict(self.widths)))

    @property
    def glyph_count(self) -> int:
        """Number of glyphs with a width entry."""
        return len(self.widths)

    def width_of(self, glyph_name: str) -> int | None:
        """Get the advance width of a glyph.

        Args:
            glyph_name: Glyph name (e.g., "space", "Alpha")

        Returns:
            Advance width, or None if the font has no such glyph
        """
        return self.widths.get(glyph_name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with bbox and widths; widths keep parse order
        """
        return {
            "bbox": self.bbox.to_dict(),
            "widths": dict(self.widths),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontMetrics":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of font metrics

        Returns:
            FontMetrics instance
        """
        return cls(
            bbox=FontBoundingBox.from_dict(data["bbox"]),
            widths={name: int(width) for name, width in data["widths"].items()},
        )


class FontMetricsRegistry(Mapping[str, FontMetrics]):
    """Read-only collection of font metrics keyed by font identifier.

    Iteration follows insertion order. The builder inserts in ascending
    filename order, so a registry built from the same directory always
    iterates the same way.

    Example:
        registry = build_registry(Path("Core14_AFMs"))
        registry["Helvetica"].width_of("space")
    """

    def __init__(self, fonts: Mapping[str, FontMetrics] | None = None) -> None:
        self._fonts: dict[str, FontMetrics] = dict(fonts or {})

    def __getitem__(self, font_name: str) -> FontMetrics:
        return self._fonts[font_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)

    def __repr__(self) -> str:
        return f"FontMetricsRegistry({list(self._fonts)!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary keyed by font identifier."""
        return {name: metrics.to_dict() for name, metrics in self._fonts.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontMetricsRegistry":
        """Deserialize from dictionary keyed by font identifier."""
        return cls({name: FontMetrics.from_dict(entry) for name, entry in data.items()})
