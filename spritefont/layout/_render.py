"""
Drawing laid-out text with a sprite font atlas, e.g. to preview a font.
"""

import math

import numpy as np

from ..utils import blit


def parse_color(color):
    """Get an (r, g, b) tuple of ints from a "#rrggbb" / "#rgb" string or a tuple."""
    if isinstance(color, str):
        hex = color.lstrip("#")
        if len(hex) == 3:
            hex = "".join(c * 2 for c in hex)
        if len(hex) != 6:
            raise ValueError(f"Invalid color string: '{color}'")
        return tuple(int(hex[i : i + 2], 16) for i in (0, 2, 4))
    elif isinstance(color, (tuple, list)) and len(color) == 3:
        return tuple(max(0, min(255, int(c))) for c in color)
    else:
        raise TypeError(f"Color must be a hex string or an (r, g, b) tuple, not {color!r}")


def render_text(lines, asset, atlas, color=(255, 255, 255)):
    """Draw lines of text into a new image.

    Parameters:
        lines (list): TextLine objects, as produced by ``layout_text()``.
        asset (SpriteFontAsset): the sprite font the lines were laid out with.
        atlas (ndarray): the atlas image, either alpha (h, w) or RGBA (h, w, 4).
        color: the text color, as a hex string or (r, g, b) tuple.

    Returns an RGBA uint8 array. Lines are stacked using their height.
    The image is as wide as the widest line, and at least 1x1 pixel.
    """
    rgb = parse_color(color)
    atlas = np.asarray(atlas)
    alpha_atlas = atlas[..., 3] if atlas.ndim == 3 else atlas

    width = max([1] + [math.ceil(line.width) for line in lines])
    height = sum(line.height for line in lines) or asset.line_height
    mask = np.zeros((max(1, height), width), np.uint8)

    page_size = asset.page_width
    line_top = 0
    for line in lines:
        for placed in line.glyphs:
            m = placed.metrics
            src_y = m.page * page_size + m.y
            src = alpha_atlas[src_y : src_y + m.height, m.x : m.x + m.width]
            dst_x = math.floor(placed.x + m.x_offset + 0.5)
            dst_y = math.floor(line_top + placed.y + line.baseline + m.y_offset + 0.5)
            blit(mask, src, dst_x, dst_y)
        line_top += line.height

    image = np.zeros(mask.shape + (4,), np.uint8)
    image[..., :3] = rgb
    image[..., 3] = mask
    return image
