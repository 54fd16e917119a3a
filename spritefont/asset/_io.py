"""
Reading and writing sprite fonts: the atlas as a PNG image, and the
descriptor as a JSON file with the ".asset" extension, next to the image.
"""

import os
import json

import numpy as np
import imageio.v3 as iio

from ..utils import logger
from ._types import SpriteFontAsset


def asset_to_json(asset):
    """Serialize the asset to a JSON string (UTF-8 safe, indented)."""
    return json.dumps(asset.to_dict(), indent=2, ensure_ascii=False)


def asset_from_json(text):
    """Deserialize an asset from a JSON string."""
    return SpriteFontAsset.from_dict(json.loads(text))


def to_rgba(image):
    """Convert an alpha atlas to white RGBA pixels, the format of the PNG file."""
    image = np.asarray(image, np.uint8)
    if image.ndim == 3:
        return image
    rgba = np.full(image.shape + (4,), 255, np.uint8)
    rgba[..., 3] = image
    return rgba


def get_asset_path(png_path):
    """Get the path of the descriptor that belongs to the given image path."""
    base, _ = os.path.splitext(png_path)
    return base + ".asset"


def save_sprite_font(asset, image, png_path):
    """Save a sprite font to disk.

    Parameters:
        asset (SpriteFontAsset): the descriptor.
        image (ndarray): the stacked atlas, alpha (h, w) or RGBA (h, w, 4).
        png_path (str): where to write the image. A ".png" extension is
            added if missing. The descriptor goes next to it, with the
            ".asset" extension.

    Returns the asset that was written, with its image field set to the
    basename of the png file.
    """
    if not png_path.lower().endswith(".png"):
        png_path += ".png"
    asset_path = get_asset_path(png_path)

    asset = asset.copy(image=os.path.basename(png_path))

    # Both files are written under a temporary name first, so that a
    # failure leaves neither of them behind.
    tmp_png_path = png_path + ".partial"
    tmp_asset_path = asset_path + ".partial"
    try:
        iio.imwrite(tmp_png_path, to_rgba(image), extension=".png")
        with open(tmp_asset_path, "wt", encoding="utf-8") as f:
            f.write(asset_to_json(asset))
        os.replace(tmp_png_path, png_path)
        os.replace(tmp_asset_path, asset_path)
    finally:
        for path in (tmp_png_path, tmp_asset_path):
            if os.path.exists(path):
                os.remove(path)

    logger.info(f"Saved sprite font to {png_path} and {asset_path}")
    return asset


def load_asset(asset_path):
    """Load only the descriptor of a sprite font."""
    with open(asset_path, "rt", encoding="utf-8") as f:
        return asset_from_json(f.read())


def load_sprite_font(asset_path):
    """Load a sprite font from disk.

    Returns a tuple (asset, image), where image is the RGBA atlas. The
    image is looked up relative to the descriptor.
    """
    asset = load_asset(asset_path)
    image_path = os.path.join(os.path.dirname(asset_path), asset.image)
    image = to_rgba(iio.imread(image_path, extension=".png"))
    expected = asset.page_height, asset.page_width
    if image.shape[:2] != expected:
        logger.warning(
            f"Atlas image {image_path} is {image.shape[1]}x{image.shape[0]}, "
            f"expected {expected[1]}x{expected[0]}."
        )
    return asset, image
