"""
Glyph rasterization: turn one codepoint of a font into a bitmap plus metrics.

Each glyph gets its own cell. The cell is as large as the glyph's outline
plus padding on all sides. Whitespace glyphs (space, NBSP and tab) draw
nothing, but their cell spans the width of a space and the full
ascender-to-descender height, so they still reserve room in the atlas.
"""

import math

import numpy as np

from ..asset import GlyphBounds
from ..errors import MissingFallbackGlyphError
from ..utils import logger, format_codepoint, blit
from ._config import FALLBACK_CODEPOINT, TAB_WIDTH


TAB_CODEPOINT = 0x09
SPACE_CODEPOINTS = (0x20, 0xA0)

# Synthesized styles
ITALIC_SLANT = 0.2  # horizontal shear per unit of height
BOLD_STRENGTH = 1 / 24  # extra stroke width, as a fraction of the font size


class GlyphMetricsStub:
    """The metrics of a rasterized glyph, before it has a place in the atlas."""

    __slots__ = [
        "baseline",
        "bounds",
        "height",
        "kerning",
        "width",
        "x_advance",
        "x_offset",
        "y_offset",
    ]

    def __init__(
        self, *, x_advance, x_offset, y_offset, baseline, bounds, kerning, width, height
    ):
        self.x_advance = x_advance
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.baseline = baseline
        self.bounds = bounds
        self.kerning = kerning
        self.width = width
        self.height = height


class GlyphBitmap:
    """A rasterized glyph: an alpha bitmap and its metrics.

    The alpha array has shape (height, width) and dtype uint8.
    """

    __slots__ = ["alpha", "codepoint", "metrics"]

    def __init__(self, codepoint, alpha, metrics):
        self.codepoint = codepoint
        self.alpha = alpha
        self.metrics = metrics

    def __repr__(self):
        return f"<GlyphBitmap {format_codepoint(self.codepoint)} {self.width}x{self.height}>"

    @property
    def width(self):
        return self.alpha.shape[1]

    @property
    def height(self):
        return self.alpha.shape[0]


def apply_alpha_threshold(alpha):
    """Threshold an alpha channel at 50%: pixels above 127 become
    fully opaque, all others fully transparent. This is the 1-bit mode
    for pixel-art fonts.
    """
    return np.where(alpha > 127, 255, 0).astype(np.uint8)


def embolden(alpha, strength):
    """Thicken a glyph bitmap by smearing it ``strength`` pixels to the right.
    The returned array is ``strength`` columns wider.
    """
    strength = int(strength)
    if strength <= 0 or alpha.size == 0:
        return alpha
    h, w = alpha.shape
    result = np.zeros((h, w + strength), np.uint8)
    for shift in range(strength + 1):
        region = result[:, shift : shift + w]
        np.maximum(region, alpha, out=region)
    return result


def check_fallback(font, fallback_codepoint=FALLBACK_CODEPOINT, size=None):
    """Raise MissingFallbackGlyphError if the font cannot render the fallback."""
    if not font.has_glyph(fallback_codepoint):
        raise MissingFallbackGlyphError(fallback_codepoint, size)


def rasterize(font, codepoint, config, fallback_codepoint=FALLBACK_CODEPOINT, codepoints=None):
    """Rasterize the glyph for one codepoint.

    Parameters:
        font (FontHandle): the font to render from.
        codepoint (int): the codepoint to produce a glyph for.
        config (RasterConfig): the size, style and other parameters.
        fallback_codepoint (int): the glyph to use when the font has no glyph
            for codepoint. The font must have this glyph.
        codepoints (list): the full requested set, to look up kerning pairs
            against. Only used if ``config.include_kerning`` is set.

    Returns a GlyphBitmap.
    """
    check_fallback(font, fallback_codepoint, config.size)

    scale = config.size / font.units_per_em
    padding = config.padding

    is_tab = codepoint == TAB_CODEPOINT
    is_space = codepoint in SPACE_CODEPOINTS
    space_like = is_tab or is_space

    # Select the glyph that provides the shape
    space_source = 0x20 if font.has_glyph(0x20) else fallback_codepoint
    if is_tab:
        source = fallback_codepoint
    elif font.has_glyph(codepoint):
        source = codepoint
    elif is_space:
        source = space_source
    else:
        logger.debug(
            f"Font has no glyph for {format_codepoint(codepoint)}, "
            f"using {format_codepoint(fallback_codepoint)}."
        )
        source = fallback_codepoint

    # Metrics in pixels
    space_advance = font.get_advance(space_source) * scale
    x_min, y_min, x_max, y_max = (v * scale for v in font.get_bbox(source))
    ascent = font.ascender * scale
    descent = abs(font.descender * scale)

    # Cell size
    if space_like:
        width = math.ceil(space_advance + padding * 2)
        height = math.ceil(ascent + descent + padding * 2)
    else:
        width = math.ceil((x_max - x_min) + padding * 2)
        height = math.ceil((y_max - y_min) + padding * 2)
    width, height = max(1, width), max(1, height)

    # Draw the glyph. The pen sits on the baseline, with the outline's
    # left edge at the padding, and its top at the padding.
    alpha = np.zeros((height, width), np.uint8)
    if not space_like:
        slant = ITALIC_SLANT if config.style == "italic" else 0.0
        glyph, left, top = font.render(source, config.size, slant=slant)
        if config.weight == "bold":
            glyph = embolden(glyph, round(config.size * BOLD_STRENGTH))
        pen_x = math.floor(-x_min + padding + 0.5)
        pen_y = math.floor(y_max + padding + 0.5)
        blit(alpha, glyph, pen_x + left, pen_y - top)

    if not config.antialias:
        alpha = apply_alpha_threshold(alpha)

    # Advance
    if is_tab:
        x_advance = space_advance * TAB_WIDTH
    elif is_space:
        x_advance = space_advance
    else:
        x_advance = font.get_advance(source) * scale

    # Kerning against every requested glyph, stored sparse
    kerning = {}
    if config.include_kerning:
        for other in codepoints or ():
            other_source = other if font.has_glyph(other) else fallback_codepoint
            kern = font.get_kerning(source, other_source) * scale
            if kern != 0:
                kerning[other] = kern

    metrics = GlyphMetricsStub(
        x_advance=x_advance,
        x_offset=math.floor(x_min) - padding,
        y_offset=math.floor(-y_max) - padding,
        baseline=math.ceil(ascent + padding),
        bounds=GlyphBounds(x_min, x_max, y_min, y_max),
        kerning=kerning,
        width=width,
        height=height,
    )
    return GlyphBitmap(codepoint, alpha, metrics)


def rasterize_glyphs(font, codepoints, config, fallback_codepoint=FALLBACK_CODEPOINT):
    """Rasterize a glyph for each codepoint. Returns a list of GlyphBitmap,
    in the order of the given codepoints.

    Fails with MissingFallbackGlyphError before rendering anything if
    the font lacks the fallback glyph.
    """
    codepoints = list(codepoints)
    check_fallback(font, fallback_codepoint, config.size)
    n_missing = sum(
        1 for cp in codepoints if cp != TAB_CODEPOINT and not font.has_glyph(cp)
    )
    if n_missing:
        logger.info(
            f"{n_missing} of {len(codepoints)} codepoints are not in {font!r}, "
            f"these use the fallback glyph."
        )
    return [
        rasterize(font, cp, config, fallback_codepoint, codepoints)
        for cp in codepoints
    ]
