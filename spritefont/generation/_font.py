"""
Access to a font file, with Freetype and Harfbuzz.

Freetype provides the outlines, metrics, and the rendered glyph images.
Harfbuzz provides the pair kerning, because it understands both the GPOS
table of modern fonts and the legacy kern table (Freetype only does the latter).

Relevant links:
* https://freetype.org/freetype2/docs/glyphs/glyphs-3.html
* https://harfbuzz.github.io/
"""

import io
import os

import freetype
import uharfbuzz
import numpy as np


# Features that can merge or reorder glyphs. One codepoint must map to one glyph.
NO_SUBSTITUTION_FEATURES = {
    "liga": False,
    "clig": False,
    "dlig": False,
    "calt": False,
    "rlig": False,
}


class FontHandle:
    """A font that glyphs can be measured and rendered from.

    Parameters:
        filename (str): the font file (.ttf or .otf) to load.

    Use ``FontHandle.from_bytes()`` to load a font that is already in memory.
    All distances returned by this object are in font units, except for
    ``render()``, which works in pixels.
    """

    def __init__(self, filename=None, *, data=None):
        if (filename is None) == (data is None):
            raise TypeError("FontHandle() expects either a filename or data.")

        if filename is not None:
            if not isinstance(filename, str):
                raise TypeError("FontHandle() expects the filename as a str.")
            self._filename = filename
            self._ft_face = freetype.Face(filename)
            blob = uharfbuzz.Blob.from_file_path(filename)
        else:
            self._filename = None
            data = bytes(data)
            self._ft_face = freetype.Face(io.BytesIO(data))
            blob = uharfbuzz.Blob(data)

        # Harfbuzz in font units
        self._hb_blob = blob
        self._hb_face = uharfbuzz.Face(blob)
        self._hb_font = uharfbuzz.Font(self._hb_face)
        upem = self._ft_face.units_per_EM
        self._hb_font.scale = upem, upem

        self._glyph_cache = {}  # codepoint -> (advance, bbox)
        self._kerning_cache = {}  # (left, right) -> kerning

    @classmethod
    def from_bytes(cls, data):
        """Create a FontHandle from the raw bytes of a font file."""
        return cls(data=data)

    def __repr__(self):
        return f"<FontHandle {self.full_name} at {hex(id(self))}>"

    @property
    def filename(self):
        """The path of the font file, or None if loaded from bytes."""
        return self._filename

    @property
    def family(self):
        """The family name of this font, e.g. 'Noto Sans' or 'Arial'."""
        family = (self._ft_face.family_name or b"").decode(errors="replace")
        if not family and self._filename:
            name = os.path.basename(self._filename).split(".")[0]
            family, _, _ = name.partition("-")
        return family or "Unknown"

    @property
    def variant(self):
        """The variant name of this font, e.g. 'Regular' or 'Bold Italic'."""
        variant = (self._ft_face.style_name or b"").decode(errors="replace")
        return variant or "Regular"

    @property
    def full_name(self):
        """The family and variant, e.g. 'Noto Sans Regular'."""
        return f"{self.family} {self.variant}"

    @property
    def units_per_em(self):
        return self._ft_face.units_per_EM

    @property
    def ascender(self):
        """The typographic ascender, in font units (positive)."""
        return self._ft_face.ascender

    @property
    def descender(self):
        """The typographic descender, in font units (usually negative)."""
        return self._ft_face.descender

    def has_glyph(self, codepoint):
        """Whether the font maps the given codepoint to a glyph."""
        return self._ft_face.get_char_index(codepoint) != 0

    def _load_unscaled(self, codepoint):
        try:
            return self._glyph_cache[codepoint]
        except KeyError:
            pass
        face = self._ft_face
        face.load_glyph(face.get_char_index(codepoint), freetype.FT_LOAD_NO_SCALE)
        advance = face.glyph.metrics.horiAdvance
        if face.glyph.outline.n_points:
            bbox = face.glyph.outline.get_bbox()
            bbox = bbox.xMin, bbox.yMin, bbox.xMax, bbox.yMax
        else:
            bbox = 0, 0, 0, 0
        result = advance, bbox
        self._glyph_cache[codepoint] = result
        return result

    def get_advance(self, codepoint):
        """Get the horizontal advance of the glyph for the given codepoint."""
        return self._load_unscaled(codepoint)[0]

    def get_bbox(self, codepoint):
        """Get the bounding box (x_min, y_min, x_max, y_max) of the glyph outline.
        The y axis points up. Glyphs without an outline have an all-zero box.
        """
        return self._load_unscaled(codepoint)[1]

    def get_kerning(self, left, right):
        """Get the pair kerning between the glyphs of two codepoints.

        This shapes the pair with kerning enabled, and subtracts the
        nominal advances. Zero if the font does not kern the pair.
        """
        key = left, right
        try:
            return self._kerning_cache[key]
        except KeyError:
            pass

        buf = uharfbuzz.Buffer()
        buf.add_codepoints([left, right])
        buf.guess_segment_properties()
        buf.direction = "ltr"

        features = {"kern": True}
        features.update(NO_SUBSTITUTION_FEATURES)
        uharfbuzz.shape(self._hb_font, buf, features)

        glyph_infos = buf.glyph_infos
        glyph_positions = buf.glyph_positions
        kerning = 0
        if len(glyph_infos) == 2:
            for info, pos in zip(glyph_infos, glyph_positions):
                nominal = self._hb_font.get_glyph_h_advance(info.codepoint)
                kerning += pos.x_advance - nominal

        self._kerning_cache[key] = kerning
        return kerning

    def render(self, codepoint, size, *, slant=0.0):
        """Render the glyph for a codepoint at the given pixel size.

        Returns a tuple (alpha, left, top): an uint8 array of shape
        (rows, width), and the position of the bitmap's top-left corner
        relative to the glyph origin (with top measured upwards).
        A non-zero slant shears the outline to synthesize an italic.
        """
        face = self._ft_face
        face.set_char_size(int(round(size * 64)))

        matrix = freetype.FT_Matrix(0x10000, int(round(slant * 0x10000)), 0, 0x10000)
        face.set_transform(matrix, freetype.FT_Vector(0, 0))
        try:
            face.load_glyph(
                face.get_char_index(codepoint),
                freetype.FT_LOAD_NO_HINTING | freetype.FT_LOAD_NO_BITMAP,
            )
            face.glyph.render(freetype.FT_RENDER_MODE_NORMAL)
            bitmap = face.glyph.bitmap
            rows, width, pitch = bitmap.rows, bitmap.width, abs(bitmap.pitch)
            if rows and width:
                alpha = np.array(bitmap.buffer, np.uint8).reshape(rows, pitch)
                alpha = alpha[:, :width].copy()
            else:
                alpha = np.zeros((0, 0), np.uint8)
            left, top = face.glyph.bitmap_left, face.glyph.bitmap_top
        finally:
            identity = freetype.FT_Matrix(0x10000, 0, 0, 0x10000)
            face.set_transform(identity, freetype.FT_Vector(0, 0))

        return alpha, left, top
