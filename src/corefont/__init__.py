"""Corefont - Core font metrics generator.

Corefont parses the Adobe Font Metrics (AFM) files of the standard Type 1 core
fonts into a font metrics registry (bounding box and glyph widths per font) and
emits it, together with the WinAnsi, Symbol and ZapfDingbats glyph maps, as an
embeddable module for text layout code that has no access to font programs.

Example:
    $ corefont Core14_AFMs -o core_font_metrics.py

This will parse every .afm file in Core14_AFMs and write core_font_metrics.py.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
