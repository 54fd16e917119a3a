"""
Spritefont: bake a TrueType/OpenType font into a bitmap atlas plus a
metrics descriptor, and lay out text against it.

Generate a sprite font and write it to disk::

    import spritefont as sf

    config = sf.RasterConfig(24, padding=1, antialias=False)
    codepoints = sf.resolve_codepoints(["ascii"])
    asset, atlas = sf.generate_sprite_font("MyFont.ttf", codepoints, config)
    sf.save_sprite_font(asset, atlas, "my-font.png")

And later, possibly in another process::

    asset, atlas = sf.load_sprite_font("my-font.asset")
    lines = sf.layout_text("Hello world", 200, asset)
    image = sf.render_text(lines, asset, atlas)

"""

from .utils import logger  # noqa: F401
from .errors import (  # noqa: F401
    SpriteFontError,
    MissingFallbackGlyphError,
    GlyphTooLargeError,
    UnsupportedSurfaceError,
)
from .asset import (  # noqa: F401
    GlyphBounds,
    GlyphMetrics,
    SpriteFontAsset,
    save_sprite_font,
    load_sprite_font,
    load_asset,
)
from .generation import (  # noqa: F401
    RasterConfig,
    FontHandle,
    resolve_codepoints,
    parse_custom_ranges,
    rasterize,
    pack,
    compose,
    build,
    generate_sprite_font,
)
from .layout import layout_text, measure_text, render_text  # noqa: F401


__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
