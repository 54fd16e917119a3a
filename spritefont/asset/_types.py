"""
The exported form of a sprite font: per-glyph metrics plus an atlas descriptor.

This is the contract between the generator and the text layout. The
layout only ever sees these objects (usually reloaded from JSON), never
the font file. The field names of ``to_dict()`` are the on-disk schema.
"""

from ..utils import ReadOnlyDict


# The glyph shown for characters that a sprite font has no glyph for ("?")
FALLBACK_CODEPOINT = 0x3F


class _Frozen:
    """Mixin that makes slotted objects read-only after construction."""

    __slots__ = []

    def _init_fields(self, **fields):
        for key, value in fields.items():
            object.__setattr__(self, key, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot set '{name}': {type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete '{name}': {type(self).__name__} is read-only")


class GlyphBounds(_Frozen):
    """The bounding box of a glyph outline in pixels, with the y axis pointing up."""

    __slots__ = ["x_max", "x_min", "y_max", "y_min"]

    def __init__(self, x_min=0.0, x_max=0.0, y_min=0.0, y_max=0.0):
        self._init_fields(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)

    def __repr__(self):
        return f"<GlyphBounds({self.x_min:0.5g}, {self.x_max:0.5g}, {self.y_min:0.5g}, {self.y_max:0.5g})>"

    def __eq__(self, other):
        if not isinstance(other, GlyphBounds):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.x_min, self.x_max, self.y_min, self.y_max))

    def to_dict(self):
        return {"xMin": self.x_min, "xMax": self.x_max, "yMin": self.y_min, "yMax": self.y_max}

    @classmethod
    def from_dict(cls, d):
        return cls(d["xMin"], d["xMax"], d["yMin"], d["yMax"])


class GlyphMetrics(_Frozen):
    """The exported metrics and atlas placement of one glyph.

    Parameters:
        codepoint (int): the codepoint this glyph is keyed under.
        x_advance (float): how far the pen moves after this glyph.
        x_offset (int): horizontal offset from the pen to the glyph cell's left edge.
        y_offset (int): vertical offset from the baseline to the glyph cell's top edge.
        baseline (int): the baseline, in pixels from the top of a line.
        bounds (GlyphBounds): the outline's bounding box in pixels.
        kerning (dict): maps the codepoint of a following glyph to a pixel adjustment.
        page (int): the atlas page the glyph cell is on.
        x, y (int): the position of the glyph cell on its page.
        width, height (int): the size of the glyph cell.
    """

    __slots__ = [
        "baseline",
        "bounds",
        "codepoint",
        "height",
        "kerning",
        "page",
        "width",
        "x",
        "x_advance",
        "x_offset",
        "y",
        "y_offset",
    ]

    def __init__(
        self,
        codepoint,
        *,
        x_advance,
        x_offset,
        y_offset,
        baseline,
        bounds,
        kerning=None,
        page=0,
        x=0,
        y=0,
        width=0,
        height=0,
    ):
        kerning = ReadOnlyDict(sorted((kerning or {}).items()))
        self._init_fields(
            codepoint=int(codepoint),
            x_advance=x_advance,
            x_offset=x_offset,
            y_offset=y_offset,
            baseline=baseline,
            bounds=bounds,
            kerning=kerning,
            page=page,
            x=x,
            y=y,
            width=width,
            height=height,
        )

    def __repr__(self):
        return f"<GlyphMetrics {self.codepoint} page {self.page} at ({self.x}, {self.y}) {self.width}x{self.height}>"

    def __eq__(self, other):
        if not isinstance(other, GlyphMetrics):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.codepoint, self.page, self.x, self.y))

    def to_dict(self):
        return {
            "codepoint": self.codepoint,
            "xAdvance": self.x_advance,
            "xOffset": self.x_offset,
            "yOffset": self.y_offset,
            "baseline": self.baseline,
            "bounds": self.bounds.to_dict(),
            "kerning": {str(cp): adj for cp, adj in self.kerning.items()},
            "page": self.page,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(
            d["codepoint"],
            x_advance=d["xAdvance"],
            x_offset=d["xOffset"],
            y_offset=d["yOffset"],
            baseline=d["baseline"],
            bounds=GlyphBounds.from_dict(d["bounds"]),
            kerning={int(cp): adj for cp, adj in (d.get("kerning") or {}).items()},
            page=d["page"],
            x=d["x"],
            y=d["y"],
            width=d["width"],
            height=d["height"],
        )


class SpriteFontAsset(_Frozen):
    """The descriptor of a sprite font atlas.

    Parameters:
        face (str): the name of the font the atlas was generated from.
        size (float): the font size in pixels.
        style (str): 'normal' or 'italic'.
        weight (str): 'normal' or 'bold'.
        page_count (int): the number of pages stacked in the atlas image.
        line_height (int): the height of a line of text, in pixels.
        baseline (int): the baseline, in pixels from the top of a line.
        padding (int): the padding around each glyph cell.
        antialias (bool): whether the glyphs have smooth edges.
        image (str): the filename of the atlas image.
        glyphs (dict): maps codepoint strings to GlyphMetrics.
        page_width (int): the width (and height) of one page.
        page_height (int): the height of the stacked atlas image.
    """

    __slots__ = [
        "antialias",
        "baseline",
        "face",
        "glyphs",
        "image",
        "line_height",
        "padding",
        "page_count",
        "page_height",
        "page_width",
        "size",
        "style",
        "weight",
    ]

    def __init__(
        self,
        *,
        face,
        size,
        style,
        weight,
        page_count,
        line_height,
        baseline,
        padding,
        antialias,
        image,
        glyphs,
        page_width,
        page_height,
    ):
        # Glyphs are always ordered by codepoint, so that output is stable
        glyphs = ReadOnlyDict(
            (str(g.codepoint), g)
            for g in sorted(glyphs.values(), key=lambda g: g.codepoint)
        )
        self._init_fields(
            face=face,
            size=size,
            style=style,
            weight=weight,
            page_count=page_count,
            line_height=line_height,
            baseline=baseline,
            padding=padding,
            antialias=antialias,
            image=image,
            glyphs=glyphs,
            page_width=page_width,
            page_height=page_height,
        )

    def __repr__(self):
        return f"<SpriteFontAsset {self.face!r} {self.size}px, {len(self.glyphs)} glyphs on {self.page_count} pages>"

    def __eq__(self, other):
        if not isinstance(other, SpriteFontAsset):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def get_glyph(self, codepoint):
        """Get the GlyphMetrics for a codepoint, or None."""
        return self.glyphs.get(str(codepoint), None)

    def copy(self, **kwargs):
        """Make a copy of the asset, with given kwargs replaced, e.g. the image."""
        d = {key: getattr(self, key) for key in self.__slots__}
        d.update(kwargs)
        return self.__class__(**d)

    def to_dict(self):
        """Get the asset as a dict, using the on-disk field names."""
        return {
            "type": "spritefont",
            "info": {
                "face": self.face,
                "size": self.size,
                "style": self.style,
                "weight": self.weight,
                "pages": self.page_count,
                "lineHeight": self.line_height,
                "baseline": self.baseline,
                "padding": self.padding,
                "antialias": self.antialias,
            },
            "image": self.image,
            "glyphs": {key: g.to_dict() for key, g in self.glyphs.items()},
            "pages": {"width": self.page_width, "height": self.page_height},
        }

    @classmethod
    def from_dict(cls, d):
        """Create an asset from a dict as produced by ``to_dict()``."""
        if not isinstance(d, dict):
            raise ValueError("A sprite font asset must be a JSON object.")
        if d.get("type") != "spritefont":
            raise ValueError(f"Not a sprite font asset (type {d.get('type')!r}).")
        try:
            info = d["info"]
            glyphs = {}
            for key, gd in d["glyphs"].items():
                glyph = GlyphMetrics.from_dict(gd)
                if str(glyph.codepoint) != key:
                    raise ValueError(f"Glyph key {key!r} does not match its codepoint.")
                glyphs[key] = glyph
            return cls(
                face=info["face"],
                size=info["size"],
                style=info["style"],
                weight=info["weight"],
                page_count=info["pages"],
                line_height=info["lineHeight"],
                baseline=info["baseline"],
                padding=info["padding"],
                antialias=info["antialias"],
                image=d["image"],
                glyphs=glyphs,
                page_width=d["pages"]["width"],
                page_height=d["pages"]["height"],
            )
        except (KeyError, TypeError, AttributeError) as err:
            raise ValueError(f"Invalid sprite font asset: missing or bad field {err}") from None
