"""
Text layout against a sprite font asset.

The layout only needs the exported descriptor, not the font or the atlas
image. Text is split into paragraphs on line breaks, and each paragraph
into runs of whitespace and non-whitespace. Runs are appended to a line
until the next one would make it wider than the maximum width, at which
point a new line starts. Runs are never split, so a single word wider
than the maximum width gets a line of its own and overflows. A run of
whitespace that does not fit starts the next line, so no text is lost.

All glyphs get y=0. Stacking the lines vertically, with whatever line
spacing is desired, is up to the renderer.
"""

from ..asset import FALLBACK_CODEPOINT
from ._tokenizers import split_paragraphs, segment_text


class PlacedGlyph:
    """A glyph with its pen position, relative to the start of its line."""

    __slots__ = ["metrics", "x", "y"]

    def __init__(self, metrics, x, y=0):
        self.metrics = metrics
        self.x = x
        self.y = y

    def __repr__(self):
        return f"<PlacedGlyph {self.metrics.codepoint} at ({self.x:0.5g}, {self.y:0.5g})>"


class TextLine:
    """A line of placed glyphs."""

    __slots__ = ["baseline", "glyphs", "height", "width"]

    def __init__(self, glyphs, width, height, baseline):
        self.glyphs = glyphs
        self.width = width
        self.height = height
        self.baseline = baseline

    def __repr__(self):
        return f"<TextLine {len(self.glyphs)} glyphs, {self.width:0.5g}x{self.height}>"

    @property
    def text(self):
        """The text of the glyphs on this line (fallback glyphs show as such)."""
        return "".join(chr(g.metrics.codepoint) for g in self.glyphs)


def lookup_glyph(asset, codepoint):
    """Get the metrics for a codepoint, the fallback glyph's metrics if
    the asset does not have it, or None if there is no fallback either.
    """
    glyphs = asset.glyphs
    glyph = glyphs.get(str(codepoint), None)
    if glyph is None:
        glyph = glyphs.get(str(FALLBACK_CODEPOINT), None)
    return glyph


def measure_segment(segment, start_x, asset, prev=None):
    """Place the glyphs of a segment, starting at start_x.

    Parameters:
        segment (str): the text to measure.
        start_x (float): the pen position of the first glyph.
        asset (SpriteFontAsset): the font to measure with.
        prev (GlyphMetrics): the glyph before the segment, for kerning.

    Returns a tuple (glyphs, width, last), where width is the total
    advance of the segment and last is the metrics of the final glyph.
    """
    placed = []
    x = 0
    for char in segment:
        glyph = lookup_glyph(asset, ord(char))
        if glyph is None:
            continue  # No glyph and no fallback: skip the character
        # Keyed by the typed codepoint, also when the fallback glyph stands in
        kern = prev.kerning.get(ord(char), 0) if prev is not None else 0
        placed.append(PlacedGlyph(glyph, start_x + x + kern, 0))
        x += glyph.x_advance + kern
        prev = glyph
    return placed, x, prev


def measure_text(text, asset):
    """Get the width of a single line of text, without wrapping."""
    _, width, _ = measure_segment(text, 0, asset)
    return width


def layout_text(text, max_width, asset):
    """Lay out text into lines.

    Parameters:
        text (str): the text. Line breaks ("\\n" or "\\r\\n") start a new paragraph.
        max_width (float): the maximum line width in pixels. Zero or
            less disables wrapping.
        asset (SpriteFontAsset): the sprite font to lay out with.

    Returns a list of TextLine objects. Characters that the asset has no
    glyph for are shown as the "?" glyph, or skipped if that is missing too.
    """
    wrap = max_width is not None and max_width > 0
    line_height = asset.line_height
    baseline = asset.baseline

    lines = []
    for paragraph in split_paragraphs(text):
        if not paragraph:
            # A blank line
            lines.append(TextLine([], 0, line_height, baseline))
            continue

        current = []
        x = 0
        prev = None

        for segment in segment_text(paragraph):
            glyphs, width, last = measure_segment(segment, x, asset, prev)
            if wrap and current and x + width > max_width:
                lines.append(TextLine(current, x, line_height, baseline))
                current, x, prev = [], 0, None
                glyphs, width, last = measure_segment(segment, 0, asset, None)
            current.extend(glyphs)
            x += width
            prev = last

        if current:
            lines.append(TextLine(current, x, line_height, baseline))

    return lines
