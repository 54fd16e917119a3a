"""
The errors raised while generating a sprite font.

All of these are fatal for a generation run. They stem from the font or the
configuration, so retrying with the same input gives the same error.

.. currentmodule:: spritefont.errors

.. autosummary::
    :toctree: errors/

    SpriteFontError
    MissingFallbackGlyphError
    GlyphTooLargeError
    UnsupportedSurfaceError

"""

from .utils import format_codepoint


class SpriteFontError(RuntimeError):
    """Base class for errors that abort a sprite font generation run."""


class MissingFallbackGlyphError(SpriteFontError):
    """The font has no glyph for the fallback codepoint.

    Every codepoint that the font cannot render is substituted with the
    fallback glyph, so without it there is nothing sensible to produce.
    """

    def __init__(self, codepoint, size=None):
        self.codepoint = codepoint
        self.size = size
        msg = f"Font is missing a '{chr(codepoint)}' ({format_codepoint(codepoint)}) glyph for fallback"
        if size is not None:
            msg += f" (size {size}px)"
        super().__init__(msg + ".")


class GlyphTooLargeError(SpriteFontError):
    """A glyph bitmap does not fit in a single atlas page."""

    def __init__(self, codepoint, width, height, page_size):
        self.codepoint = codepoint
        self.width = width
        self.height = height
        self.page_size = page_size
        super().__init__(
            f"Glyph {format_codepoint(codepoint)} ({width}x{height}) does not fit "
            f"in a {page_size}x{page_size} page. Reduce the size or padding."
        )


class UnsupportedSurfaceError(SpriteFontError):
    """The pixel buffer for a page or the stacked atlas cannot be allocated."""

    def __init__(self, width, height, reason=""):
        self.width = width
        self.height = height
        msg = f"Cannot allocate a {width}x{height} surface"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
