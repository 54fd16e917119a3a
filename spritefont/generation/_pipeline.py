import time

from ..utils import logger, assert_type
from ._config import RasterConfig, PAGE_SIZE, FALLBACK_CODEPOINT
from ._font import FontHandle
from ._codepoints import unique_sorted
from ._rasterizer import rasterize_glyphs
from ._packer import ShelfPacker
from ._composer import compose
from ._metadata import AtlasInfo, build


def generate_sprite_font(
    font,
    codepoints,
    config=None,
    *,
    page_size=PAGE_SIZE,
    fallback_codepoint=FALLBACK_CODEPOINT,
    face=None,
    image="",
):
    """Generate a sprite font: rasterize, pack, compose, and build the descriptor.

    Parameters:
        font (FontHandle, str): the font, or the filename of a font.
        codepoints (iterable): the codepoints to include. The fallback
            codepoint is always added.
        config (RasterConfig): the generation parameters. Default RasterConfig().
        page_size (int): the width and height of an atlas page.
        fallback_codepoint (int): the glyph to use for codepoints the font lacks.
        face (str): the name to store in the descriptor. Default the font's name.
        image (str): the image filename to store in the descriptor.

    Returns a tuple (asset, image), where image is the stacked alpha atlas.
    Running this twice with the same input gives identical results.
    """
    if isinstance(font, str):
        font = FontHandle(font)
    assert_type("font", font, FontHandle)
    if config is None:
        config = RasterConfig()
    assert_type("config", config, RasterConfig)

    codepoints = unique_sorted(list(codepoints) + [fallback_codepoint])

    t0 = time.perf_counter()
    bitmaps = rasterize_glyphs(font, codepoints, config, fallback_codepoint)
    logger.info(f"Rasterized {len(bitmaps)} glyphs at {config.size}px.")

    packer = ShelfPacker(page_size)
    placements = packer.pack(bitmaps)
    logger.info(f"Packed {len(placements)} glyphs over {packer.page_count} pages.")

    atlas, page_count = compose(placements, page_size)

    atlas_info = AtlasInfo.from_font(
        font, config, page_count, page_size=page_size, image=image
    )
    if face is not None:
        atlas_info.face = face
    asset = build(placements, config, atlas_info)

    logger.debug(f"Generated sprite font in {time.perf_counter() - t0:0.3f}s.")
    return asset, atlas
