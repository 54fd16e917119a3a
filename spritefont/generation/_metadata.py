import math

from ..asset import GlyphMetrics, SpriteFontAsset
from ._config import PAGE_SIZE


class AtlasInfo:
    """Information about the atlas and font that the glyph metrics do not carry.

    Parameters:
        face (str): the font name to store in the descriptor.
        page_count (int): the number of pages in the atlas.
        page_size (int): the width and height of a page.
        ascender_px (float): the font's ascender in pixels.
        descender_px (float): the font's descender in pixels (its sign is ignored).
        image (str): the filename of the atlas image, if already known.
    """

    __slots__ = ["ascender_px", "descender_px", "face", "image", "page_count", "page_size"]

    def __init__(
        self,
        face,
        page_count,
        ascender_px,
        descender_px,
        *,
        page_size=PAGE_SIZE,
        image="",
    ):
        self.face = face
        self.page_count = page_count
        self.page_size = page_size
        self.ascender_px = ascender_px
        self.descender_px = descender_px
        self.image = image

    @classmethod
    def from_font(cls, font, config, page_count, *, page_size=PAGE_SIZE, image=""):
        """Create an AtlasInfo using the name and vertical metrics of a FontHandle."""
        scale = config.size / font.units_per_em
        return cls(
            font.full_name,
            page_count,
            font.ascender * scale,
            font.descender * scale,
            page_size=page_size,
            image=image,
        )


def get_line_height(ascender_px, descender_px, padding):
    return math.ceil((ascender_px + abs(descender_px)) + padding * 2)


def get_baseline(ascender_px, padding):
    return math.ceil(ascender_px + padding)


def build(placements, config, atlas_info):
    """Build the SpriteFontAsset from the packed glyphs.

    Each glyph's placement is merged with its metrics and stored under
    its codepoint (as a string). This is a pure data transformation.
    """
    glyphs = {}
    for placed in placements:
        stub = placed.metrics
        glyph = GlyphMetrics(
            placed.codepoint,
            x_advance=stub.x_advance,
            x_offset=stub.x_offset,
            y_offset=stub.y_offset,
            baseline=stub.baseline,
            bounds=stub.bounds,
            kerning=stub.kerning,
            page=placed.page,
            x=placed.x,
            y=placed.y,
            width=placed.width,
            height=placed.height,
        )
        key = str(glyph.codepoint)
        if key in glyphs:
            raise ValueError(f"Codepoint {key} is packed more than once.")
        glyphs[key] = glyph

    page_size = atlas_info.page_size
    padding = config.padding
    return SpriteFontAsset(
        face=atlas_info.face,
        size=config.size,
        style=config.style,
        weight=config.weight,
        page_count=atlas_info.page_count,
        line_height=get_line_height(
            atlas_info.ascender_px, atlas_info.descender_px, padding
        ),
        baseline=get_baseline(atlas_info.ascender_px, padding),
        padding=padding,
        antialias=config.antialias,
        image=atlas_info.image,
        glyphs=glyphs,
        page_width=page_size,
        page_height=page_size * atlas_info.page_count,
    )
