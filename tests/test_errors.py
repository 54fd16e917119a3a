from spritefont import (
    SpriteFontError,
    MissingFallbackGlyphError,
    GlyphTooLargeError,
    UnsupportedSurfaceError,
)


def test_error_hierarchy():
    for cls in (MissingFallbackGlyphError, GlyphTooLargeError, UnsupportedSurfaceError):
        assert issubclass(cls, SpriteFontError)
    assert issubclass(SpriteFontError, RuntimeError)


def test_missing_fallback_message():
    err = MissingFallbackGlyphError(0x3F)
    assert err.codepoint == 0x3F
    assert "U+003F" in str(err)
    assert "'?'" in str(err)

    err = MissingFallbackGlyphError(0x3F, 24)
    assert err.size == 24
    assert "24px" in str(err)


def test_glyph_too_large_message():
    err = GlyphTooLargeError(0x41, 300, 20, 256)
    assert (err.codepoint, err.width, err.height, err.page_size) == (0x41, 300, 20, 256)
    assert "U+0041" in str(err)
    assert "300x20" in str(err)
    assert "256x256" in str(err)


def test_unsupported_surface_message():
    err = UnsupportedSurfaceError(10, 0, "size must be positive")
    assert (err.width, err.height) == (10, 0)
    assert str(err).endswith("size must be positive")
    assert str(UnsupportedSurfaceError(1, 2)) == "Cannot allocate a 1x2 surface"


if __name__ == "__main__":
    test_error_hierarchy()
    test_missing_fallback_message()
    test_glyph_too_large_message()
    test_unsupported_surface_message()
