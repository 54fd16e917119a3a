"""
Composition of packed glyphs into the atlas image.

Each page is a square alpha canvas. The pages are stacked vertically into
one image: page i occupies rows [i * page_size, (i + 1) * page_size). This
layout is what the exported descriptor describes, so it must not change.

Glyphs are always drawn at integer positions and at their own size, so
every atlas pixel is a copy of exactly one glyph pixel. There is thus no
difference between point and linear sampling, and the 1-bit alpha of
non-antialiased glyphs is preserved as is.
"""

import numpy as np

from ..errors import UnsupportedSurfaceError
from ..utils import blit
from ._config import PAGE_SIZE


def allocate_surface(width, height):
    """Allocate an empty (transparent) alpha surface of the given size."""
    try:
        if width <= 0 or height <= 0:
            raise ValueError("size must be positive")
        return np.zeros((height, width), np.uint8)
    except (MemoryError, ValueError) as err:
        raise UnsupportedSurfaceError(width, height, str(err)) from err


def compose_pages(placements, page_size=PAGE_SIZE):
    """Draw the packed glyphs onto their pages. Returns a list of page arrays."""
    page_count = 1 + max((p.page for p in placements), default=0)
    pages = [allocate_surface(page_size, page_size) for _ in range(page_count)]
    for placed in placements:
        assert placed.x + placed.width <= page_size
        assert placed.y + placed.height <= page_size
        blit(pages[placed.page], placed.bitmap.alpha, placed.x, placed.y)
    return pages


def compose(placements, page_size=PAGE_SIZE):
    """Compose the atlas image.

    Parameters:
        placements (list): the PackedGlyph objects produced by the packer.
        page_size (int): the width and height of a page.

    Returns a tuple (image, page_count), where image is an uint8 alpha
    array of shape (page_size * page_count, page_size).
    """
    pages = compose_pages(placements, page_size)
    page_count = len(pages)
    stacked = allocate_surface(page_size, page_size * page_count)
    for i, page in enumerate(pages):
        stacked[i * page_size : (i + 1) * page_size] = page
    return stacked, page_count
