"""
The stages of sprite font generation:

* Glyph rasterization: a bitmap plus metrics for each codepoint.
* Shelf packing: a page and position for each bitmap.
* Atlas composition: the pages drawn and stacked into one image.
* Metadata: the per-glyph metrics and atlas descriptor.

``generate_sprite_font()`` runs all of them. Each stage is a pure function
of its input, so independent fonts can be generated concurrently.

.. currentmodule:: spritefont.generation

.. autosummary::
    :toctree: generation/

    generate_sprite_font
    RasterConfig
    FontHandle
    rasterize
    pack
    compose
    build
    resolve_codepoints

"""

from ._config import (  # noqa: F401
    RasterConfig,
    PAGE_SIZE,
    FALLBACK_CODEPOINT,
    TAB_WIDTH,
)
from ._font import FontHandle  # noqa: F401
from ._codepoints import (  # noqa: F401
    presets,
    REQUIRED_PRESETS,
    OPTIONAL_PRESETS,
    parse_custom_ranges,
    resolve_codepoints,
)
from ._rasterizer import (  # noqa: F401
    GlyphBitmap,
    GlyphMetricsStub,
    apply_alpha_threshold,
    rasterize,
    rasterize_glyphs,
)
from ._packer import Shelf, Page, PackedGlyph, ShelfPacker, pack  # noqa: F401
from ._composer import compose  # noqa: F401
from ._metadata import AtlasInfo, build  # noqa: F401
from ._pipeline import generate_sprite_font  # noqa: F401
