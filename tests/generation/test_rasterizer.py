import numpy as np
from pytest import raises, approx

from spritefont import FontHandle, RasterConfig, MissingFallbackGlyphError
from spritefont.generation import apply_alpha_threshold, rasterize, rasterize_glyphs


def test_alpha_threshold():
    alpha = np.array([[0, 100, 127, 128, 140, 255]], np.uint8)
    result = apply_alpha_threshold(alpha)
    assert result.dtype == np.uint8
    assert result.tolist() == [[0, 0, 0, 255, 255, 255]]


def test_rasterize_glyph(font_path):
    font = FontHandle(font_path)
    config = RasterConfig(16, padding=1)

    bitmap = rasterize(font, 0x41, config, codepoints=[0x41, 0x42])
    assert bitmap.codepoint == 0x41
    assert (bitmap.width, bitmap.height) == (11, 13)

    # The glyph is drawn inside the padding
    alpha = bitmap.alpha
    assert alpha[1:12, 1:10].min() > 200
    assert alpha[0, :].max() == 0
    assert alpha[-1, :].max() == 0
    assert alpha[:, 0].max() == 0
    assert alpha[:, -1].max() == 0

    m = bitmap.metrics
    assert m.x_advance == 10
    assert m.x_offset == -1
    assert m.y_offset == -12
    assert m.baseline == 13
    assert (m.width, m.height) == (11, 13)
    assert (m.bounds.x_min, m.bounds.x_max) == (0, 9)
    assert (m.bounds.y_min, m.bounds.y_max) == (0, 11)
    assert m.kerning == {0x42: approx(-2)}


def test_rasterize_offsets(font_path):
    font = FontHandle(font_path)
    config = RasterConfig(16, padding=2)

    # B's outline starts 1px right of the origin
    bitmap = rasterize(font, 0x42, config)
    assert (bitmap.width, bitmap.height) == (12, 15)
    assert bitmap.metrics.x_offset == -1
    assert bitmap.metrics.y_offset == -13
    assert bitmap.metrics.baseline == 14
    assert bitmap.alpha[2:13, 2:10].min() > 200
    assert bitmap.alpha[:, :2].max() == 0


def test_rasterize_whitespace(font_path):
    font = FontHandle(font_path)
    config = RasterConfig(16, padding=1)

    space = rasterize(font, 0x20, config)
    assert (space.width, space.height) == (6, 18)
    assert space.alpha.max() == 0
    assert space.metrics.x_advance == 4

    # The font has no NBSP, but it is a space nonetheless
    nbsp = rasterize(font, 0xA0, config)
    assert (nbsp.width, nbsp.height) == (6, 18)
    assert nbsp.alpha.max() == 0
    assert nbsp.metrics.x_advance == 4

    # A tab is four spaces wide and draws nothing
    tab = rasterize(font, 0x09, config)
    assert (tab.width, tab.height) == (6, 18)
    assert tab.alpha.max() == 0
    assert tab.metrics.x_advance == 16


def test_rasterize_missing_glyph_uses_fallback(font_path):
    font = FontHandle(font_path)
    config = RasterConfig(16)

    fallback = rasterize(font, 0x3F, config)
    missing = rasterize(font, 0x43, config)
    assert missing.codepoint == 0x43
    assert np.all(missing.alpha == fallback.alpha)
    assert missing.metrics.x_advance == fallback.metrics.x_advance
    assert missing.metrics.x_offset == fallback.metrics.x_offset


def test_rasterize_no_antialias(font_path):
    font = FontHandle(font_path)
    for style in ("normal", "italic"):
        config = RasterConfig(16, style=style, antialias=False)
        bitmap = rasterize(font, 0x41, config)
        assert set(np.unique(bitmap.alpha)) <= {0, 255}


def test_rasterize_style_and_weight(font_path):
    font = FontHandle(font_path)
    normal = rasterize(font, 0x41, RasterConfig(16))
    italic = rasterize(font, 0x41, RasterConfig(16, style="italic"))
    bold = rasterize(font, 0x41, RasterConfig(16, weight="bold"))

    # Same cells, different pixels
    assert italic.alpha.shape == normal.alpha.shape
    assert bold.alpha.shape == normal.alpha.shape
    assert not np.all(italic.alpha == normal.alpha)
    assert int(bold.alpha.sum()) > int(normal.alpha.sum())


def test_rasterize_kerning(font_path):
    font = FontHandle(font_path)
    codepoints = [0x41, 0x42, 0x43]

    a = rasterize(font, 0x41, RasterConfig(16), codepoints=codepoints)
    b = rasterize(font, 0x42, RasterConfig(16), codepoints=codepoints)
    assert a.metrics.kerning == {0x42: approx(-2)}
    assert b.metrics.kerning == {}

    a = rasterize(font, 0x41, RasterConfig(16, include_kerning=False), codepoints=codepoints)
    assert a.metrics.kerning == {}


def test_rasterize_missing_fallback(font_path_no_fallback):
    font = FontHandle(font_path_no_fallback)
    config = RasterConfig(16)

    with raises(MissingFallbackGlyphError) as err:
        rasterize(font, 0x41, config)
    assert err.value.codepoint == 0x3F

    with raises(MissingFallbackGlyphError):
        rasterize_glyphs(font, [0x41, 0x42], config)

    # Another fallback is fine
    bitmaps = rasterize_glyphs(font, [0x41, 0x43], config, fallback_codepoint=0x42)
    assert [b.codepoint for b in bitmaps] == [0x41, 0x43]


def test_rasterize_glyphs_order(font_path):
    font = FontHandle(font_path)
    bitmaps = rasterize_glyphs(font, [0x42, 0x20, 0x41], RasterConfig(16))
    assert [b.codepoint for b in bitmaps] == [0x42, 0x20, 0x41]


if __name__ == "__main__":
    test_alpha_threshold()
