"""AFM parser.

This module scans an Adobe Font Metrics text stream and builds a FontMetrics
record from it. Only two sections of the format matter here:

- the header, for the FontBBox line
- the CharMetrics section, for each glyph's advance width (WX) and name (N)

Everything else (kerning, composites, comments, other header keys) is skipped.

Key components:
- ParserState: the two states of the scanner
- AFMParser: line-by-line scanner
- parse_afm: convenience wrapper around AFMParser
"""

import math
import re
from collections.abc import Iterable
from enum import Enum, auto

from corefont.domain.metrics import FontBoundingBox, FontMetrics
from corefont.exceptions import CorruptFileError, MissingBoundingBoxError

KEY_FONT_BBOX = "FontBBox"
KEY_START_CHAR_METRICS = "StartCharMetrics"
KEY_END_CHAR_METRICS = "EndCharMetrics"
KEY_CHAR = "C"

# C 32 ; WX 278 ; N space ; B 0 0 0 0 ;
CHAR_MIN_FIELDS = 8
CHAR_WIDTH_FIELD = 4
CHAR_NAME_FIELD = 7

FONT_BBOX_FIELDS = 5

# ASCII decimal notation only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParserState(Enum):
    """State of the AFM scanner.

    - HEADER: before StartCharMetrics; looks for FontBBox
    - CHAR_METRICS: between StartCharMetrics and EndCharMetrics
    """

    HEADER = auto()
    CHAR_METRICS = auto()


class AFMParser:
    """Parses one AFM stream into a FontMetrics record.

    The parser is a two-state scanner dispatching on the first token of each
    line. Blank lines and unrecognized keys are ignored in both states.
    A parser instance can be reused; each call to parse() starts fresh.

    Example:
        with open("Helvetica.afm", encoding="latin-1") as f:
            metrics = AFMParser().parse(f)
        metrics.width_of("space")  # 278
    """

    def __init__(self, reject_duplicate_glyphs: bool = False) -> None:
        """Initialize the parser.

        Args:
            reject_duplicate_glyphs: Raise CorruptFileError when a glyph name
                repeats in CharMetrics instead of keeping the later width
        """
        self.reject_duplicate_glyphs = reject_duplicate_glyphs
        self._reset()

    def _reset(self) -> None:
        self._state = ParserState.HEADER
        self._bbox: FontBoundingBox | None = None
        self._widths: dict[str, int] = {}
        self.duplicate_glyphs: list[str] = []

    @property
    def state(self) -> ParserState:
        """Current scanner state."""
        return self._state

    def parse(self, stream: Iterable[str]) -> FontMetrics:
        """Parse an AFM stream.

        Args:
            stream: Iterable of text lines, such as an open text file

        Returns:
            FontMetrics with the font bounding box and glyph widths

        Raises:
            MissingBoundingBoxError: If StartCharMetrics precedes FontBBox
            CorruptFileError: If a line is malformed or the stream ends
                before EndCharMetrics
            OSError: If reading the stream fails
        """
        self._reset()

        for line_number, line in enumerate(stream, start=1):
            fields = line.split()
            if not fields:
                continue

            if self._state is ParserState.HEADER:
                self._parse_header_line(fields, line_number)
            elif self._parse_char_metrics_line(fields, line_number):
                if self._bbox is None:
                    raise MissingBoundingBoxError(line_number)
                return FontMetrics(bbox=self._bbox, widths=self._widths)

        if self._state is ParserState.HEADER:
            raise CorruptFileError(f"unexpected end of file before {KEY_START_CHAR_METRICS}")
        raise CorruptFileError(f"unexpected end of file before {KEY_END_CHAR_METRICS}")

    def _parse_header_line(self, fields: list[str], line_number: int) -> None:
        key = fields[0]

        if key == KEY_FONT_BBOX:
            self._bbox = parse_font_bbox(fields, line_number)
        elif key == KEY_START_CHAR_METRICS:
            if self._bbox is None:
                raise MissingBoundingBoxError(line_number)
            self._widths = {}
            self._state = ParserState.CHAR_METRICS

    def _parse_char_metrics_line(self, fields: list[str], line_number: int) -> bool:
        """Handle one CharMetrics line.

        Returns:
            True when EndCharMetrics was reached
        """
        key = fields[0]

        if key == KEY_END_CHAR_METRICS:
            return True

        if key == KEY_CHAR:
            glyph_name, width = parse_char_metric(fields, line_number)
            if glyph_name in self._widths:
                if self.reject_duplicate_glyphs:
                    raise CorruptFileError(f"duplicate glyph '{glyph_name}'", line_number)
                self.duplicate_glyphs.append(glyph_name)
            self._widths[glyph_name] = width

        return False


def parse_font_bbox(fields: list[str], line_number: int | None = None) -> FontBoundingBox:
    """Parse the fields of a FontBBox line.

    Args:
        fields: Whitespace-split line, key included
        line_number: Line number for error reporting

    Returns:
        FontBoundingBox from the four numeric fields

    Raises:
        CorruptFileError: If there are not exactly four values or one is not a
            finite number
    """
    if len(fields) != FONT_BBOX_FIELDS:
        raise CorruptFileError(
            f"{KEY_FONT_BBOX} needs 4 values, got {len(fields) - 1}", line_number
        )

    values = []
    for raw_value in fields[1:]:
        if NUMBER_PATTERN.fullmatch(raw_value) is None:
            raise CorruptFileError(
                f"{KEY_FONT_BBOX} value is not a number: '{raw_value}'", line_number
            )
        value = float(raw_value)
        if not math.isfinite(value):
            raise CorruptFileError(
                f"{KEY_FONT_BBOX} value is not finite: '{raw_value}'", line_number
            )
        values.append(value)

    xmin, ymin, xmax, ymax = values
    return FontBoundingBox(xmin, ymin, xmax, ymax)


def parse_char_metric(fields: list[str], line_number: int | None = None) -> tuple[str, int]:
    """Parse the fields of a C (character metric) line.

    Only the advance width and the glyph name are taken; the name is used
    as-is.

    Args:
        fields: Whitespace-split line, key included
        line_number: Line number for error reporting

    Returns:
        Tuple of (glyph name, advance width)

    Raises:
        CorruptFileError: If the line is too short or the width is not an integer
    """
    if len(fields) < CHAR_MIN_FIELDS:
        raise CorruptFileError(
            f"{KEY_CHAR} line needs at least {CHAR_MIN_FIELDS} fields, got {len(fields)}",
            line_number,
        )

    raw_width = fields[CHAR_WIDTH_FIELD]
    if INTEGER_PATTERN.fullmatch(raw_width) is None:
        raise CorruptFileError(f"glyph width is not an integer: '{raw_width}'", line_number)

    return fields[CHAR_NAME_FIELD], int(raw_width)


def parse_afm(stream: Iterable[str], reject_duplicate_glyphs: bool = False) -> FontMetrics:
    """Parse an AFM stream with a fresh AFMParser.

    Args:
        stream: Iterable of text lines
        reject_duplicate_glyphs: Treat repeated glyph names as corrupt

    Returns:
        Parsed FontMetrics
    """
    return AFMParser(reject_duplicate_glyphs=reject_duplicate_glyphs).parse(stream)
