"""
Text layout with a sprite font. This only depends on the exported asset,
so it works on fonts that were generated elsewhere and loaded from disk.

.. currentmodule:: spritefont.layout

.. autosummary::
    :toctree: layout/

    layout_text
    measure_text
    render_text
    TextLine
    PlacedGlyph

"""

from ._tokenizers import tokenize_text, segment_text, split_paragraphs  # noqa: F401
from ._layout import (  # noqa: F401
    PlacedGlyph,
    TextLine,
    lookup_glyph,
    measure_segment,
    measure_text,
    layout_text,
)
from ._render import parse_color, render_text  # noqa: F401
