"""Glyph encodings: fixed maps from character code to glyph name.

This module defines the GlyphEncoding type and the three standard encodings
the core fonts are used with:
- WIN_ANSI_ENCODING: CP1252 (Latin text fonts)
- SYMBOL_ENCODING: built-in encoding of the Symbol font
- ZAPF_DINGBATS_ENCODING: built-in encoding of the ZapfDingbats font
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from corefont.domain.glyph_maps import (
    SYMBOL_GLYPH_MAP,
    WIN_ANSI_GLYPH_MAP,
    ZAPF_DINGBATS_GLYPH_MAP,
)

MIN_CODE = 0
MAX_CODE = 255


@dataclass(frozen=True)
class GlyphEncoding:
    """Immutable single-byte encoding.

    Attributes:
        name: Encoding name (e.g., "WinAnsi")
        glyphs: Read-only map of character code to glyph name
    """

    name: str
    glyphs: Mapping[int, str] = field(repr=False)

    def __post_init__(self) -> None:
        for code, glyph_name in self.glyphs.items():
            if not MIN_CODE <= code <= MAX_CODE:
                raise ValueError(f"{self.name}: code {code} outside {MIN_CODE}-{MAX_CODE}")
            if not glyph_name:
                raise ValueError(f"{self.name}: empty glyph name for code {code}")
        object.__setattr__(self, "glyphs", MappingProxyType(dict(self.glyphs)))

    def get(self, code: int) -> str | None:
        """Return the glyph name for a code, or None if the code is unmapped."""
        return self.glyphs.get(code)

    def code_for(self, glyph_name: str) -> int | None:
        """Return the lowest code mapped to a glyph name, or None."""
        for code, name in self.items():
            if name == glyph_name:
                return code
        return None

    def items(self) -> Iterator[tuple[int, str]]:
        """Iterate (code, glyph name) pairs in ascending code order.

        The order is independent of how the table was declared, so anything
        serialized from it is reproducible.
        """
        for code in sorted(self.glyphs):
            yield code, self.glyphs[code]

    def __getitem__(self, code: int) -> str:
        return self.glyphs[code]

    def __contains__(self, code: object) -> bool:
        return code in self.glyphs

    def __len__(self) -> int:
        return len(self.glyphs)


WIN_ANSI_ENCODING = GlyphEncoding("WinAnsi", WIN_ANSI_GLYPH_MAP)
SYMBOL_ENCODING = GlyphEncoding("Symbol", SYMBOL_GLYPH_MAP)
ZAPF_DINGBATS_ENCODING = GlyphEncoding("ZapfDingbats", ZAPF_DINGBATS_GLYPH_MAP)

ENCODINGS: Mapping[str, GlyphEncoding] = MappingProxyType(
    {
        encoding.name: encoding
        for encoding in (WIN_ANSI_ENCODING, SYMBOL_ENCODING, ZAPF_DINGBATS_ENCODING)
    }
)
