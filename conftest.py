"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def predictable_random_numbers():
    """
    Called at start of each test, guarantees that calls to random produce the same output over subsequent tests runs,
    see http://docs.scipy.org/doc/numpy-1.10.1/reference/generated/numpy.random.seed.html
    """
    np.random.seed(0)


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Ensure any numerical errors raise a warning in our test suite
    The point is that we enforce such cases to be handled explicitly in our code
    Preferably using local `with np.errstate(...)` constructs
    """
    np.seterr(all="raise")


def _rect_glyph(x0, y0, x1, y1):
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    pen = TTGlyphPen(None)
    if x1 > x0 and y1 > y0:
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


def build_test_font(path, *, with_fallback=True, with_kerning=True):
    """Write a small TrueType font with rectangular glyphs.

    Units per em is 1024, so that at 16px every unit count below is a
    whole number of pixels: the ascender is 12px and the descender -4px.
    "A" is a 9x11 box, "B" an 8x11 box, "?" a 7x11 box (each 10px apart)
    and a space advances 4px. The pair "AB" is kerned by -2px.
    """
    from fontTools.fontBuilder import FontBuilder
    from fontTools.feaLib.builder import addOpenTypeFeaturesFromString

    upem, ascent, descent = 1024, 768, -256

    glyphs = {
        ".notdef": _rect_glyph(64, 0, 512, 704),
        "space": _rect_glyph(0, 0, 0, 0),
        "A": _rect_glyph(0, 0, 576, 704),
        "B": _rect_glyph(64, 0, 576, 704),
    }
    metrics = {".notdef": (640, 64), "space": (256, 0), "A": (640, 0), "B": (640, 64)}
    cmap = {0x20: "space", 0x41: "A", 0x42: "B"}
    if with_fallback:
        glyphs["question"] = _rect_glyph(64, 0, 512, 704)
        metrics["question"] = (640, 64)
        cmap[0x3F] = "question"

    glyph_order = list(glyphs.keys())

    fb = FontBuilder(upem, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ascent, descent=descent)
    fb.setupNameTable({"familyName": "Sprite Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ascent,
        sTypoDescender=descent,
        usWinAscent=ascent,
        usWinDescent=-descent,
    )
    fb.setupPost()
    fb.setupMaxp()
    if with_kerning:
        fea = (
            "languagesystem DFLT dflt;\n"
            "languagesystem latn dflt;\n"
            "feature kern { pos A B -128; } kern;\n"
        )
        addOpenTypeFeaturesFromString(fb.font, fea)
    fb.save(str(path))
    return str(path)


@pytest.fixture(scope="session")
def font_path(tmp_path_factory):
    """The filename of a small test font, see build_test_font()."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "SpriteTest.ttf")


@pytest.fixture(scope="session")
def font_path_no_fallback(tmp_path_factory):
    """A test font that has no "?" glyph."""
    return build_test_font(
        tmp_path_factory.mktemp("fonts") / "SpriteTestNoFallback.ttf",
        with_fallback=False,
    )
