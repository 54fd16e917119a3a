import json

from pytest import raises

from spritefont.asset import (
    GlyphBounds,
    GlyphMetrics,
    SpriteFontAsset,
    asset_to_json,
    asset_from_json,
)


def make_glyph(codepoint, **kwargs):
    d = dict(
        x_advance=6.0,
        x_offset=-1,
        y_offset=-8,
        baseline=9,
        bounds=GlyphBounds(0.0, 6.0, 0.0, 7.0),
        page=0,
        x=0,
        y=0,
        width=8,
        height=9,
    )
    d.update(kwargs)
    return GlyphMetrics(codepoint, **d)


def make_asset(glyphs):
    return SpriteFontAsset(
        face="Sprite Test Regular",
        size=10,
        style="normal",
        weight="normal",
        page_count=1,
        line_height=12,
        baseline=9,
        padding=1,
        antialias=True,
        image="test.png",
        glyphs={str(g.codepoint): g for g in glyphs},
        page_width=256,
        page_height=256,
    )


def test_glyph_metrics_readonly():
    g = make_glyph(65, kerning={66: -1.0})
    with raises(AttributeError):
        g.x = 3
    with raises(AttributeError):
        del g.page
    with raises(TypeError):
        g.kerning[67] = 1.0


def test_glyph_metrics_to_dict():
    g = make_glyph(65, kerning={67: 0.5, 66: -1.0}, page=1, x=10, y=20)
    d = g.to_dict()

    assert list(d.keys()) == [
        "codepoint",
        "xAdvance",
        "xOffset",
        "yOffset",
        "baseline",
        "bounds",
        "kerning",
        "page",
        "x",
        "y",
        "width",
        "height",
    ]
    assert d["bounds"] == {"xMin": 0.0, "xMax": 6.0, "yMin": 0.0, "yMax": 7.0}
    # Kerning keys are strings, in codepoint order
    assert list(d["kerning"].items()) == [("66", -1.0), ("67", 0.5)]

    g2 = GlyphMetrics.from_dict(json.loads(json.dumps(d)))
    assert g2 == g
    assert g2.kerning == {66: -1.0, 67: 0.5}


def test_asset_glyph_order():
    asset = make_asset([make_glyph(66), make_glyph(63), make_glyph(65)])
    assert list(asset.glyphs.keys()) == ["63", "65", "66"]
    assert asset.get_glyph(65).codepoint == 65
    assert asset.get_glyph(67) is None


def test_asset_copy():
    asset = make_asset([make_glyph(65)])
    asset2 = asset.copy(image="other.png")
    assert asset2.image == "other.png"
    assert asset.image == "test.png"
    assert asset2.glyphs == asset.glyphs
    assert asset2 != asset
    assert asset2.copy(image="test.png") == asset


def test_asset_json_schema():
    asset = make_asset([make_glyph(65, kerning={66: -1.0}), make_glyph(66)])
    d = json.loads(asset_to_json(asset))

    assert d["type"] == "spritefont"
    assert d["info"] == {
        "face": "Sprite Test Regular",
        "size": 10,
        "style": "normal",
        "weight": "normal",
        "pages": 1,
        "lineHeight": 12,
        "baseline": 9,
        "padding": 1,
        "antialias": True,
    }
    assert d["image"] == "test.png"
    assert d["pages"] == {"width": 256, "height": 256}
    assert list(d["glyphs"].keys()) == ["65", "66"]
    assert d["glyphs"]["65"]["kerning"] == {"66": -1.0}

    assert asset_from_json(asset_to_json(asset)) == asset


def test_asset_from_invalid_json():
    asset = make_asset([make_glyph(65)])
    d = asset.to_dict()

    with raises(ValueError):
        SpriteFontAsset.from_dict([])
    with raises(ValueError):
        SpriteFontAsset.from_dict(dict(d, type="bmfont"))

    d_no_info = dict(d)
    d_no_info.pop("info")
    with raises(ValueError):
        SpriteFontAsset.from_dict(d_no_info)

    d_bad_key = dict(d, glyphs={"66": d["glyphs"]["65"]})
    with raises(ValueError):
        SpriteFontAsset.from_dict(d_bad_key)

    # Wrong container types
    with raises(ValueError):
        SpriteFontAsset.from_dict(dict(d, glyphs=[]))
    with raises(ValueError):
        SpriteFontAsset.from_dict(dict(d, info="info"))


if __name__ == "__main__":
    test_glyph_metrics_readonly()
    test_glyph_metrics_to_dict()
    test_asset_glyph_order()
    test_asset_copy()
    test_asset_json_schema()
    test_asset_from_invalid_json()
