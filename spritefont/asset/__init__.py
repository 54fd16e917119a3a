"""
The sprite font asset: the exported glyph metrics and atlas descriptor,
and reading/writing it to disk.

.. currentmodule:: spritefont.asset

.. autosummary::
    :toctree: asset/

    SpriteFontAsset
    GlyphMetrics
    GlyphBounds
    save_sprite_font
    load_sprite_font
    load_asset

"""

from ._types import (  # noqa: F401
    FALLBACK_CODEPOINT,
    GlyphBounds,
    GlyphMetrics,
    SpriteFontAsset,
)
from ._io import (  # noqa: F401
    asset_to_json,
    asset_from_json,
    to_rgba,
    get_asset_path,
    save_sprite_font,
    load_asset,
    load_sprite_font,
)
