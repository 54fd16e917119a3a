from ..utils import assert_type
from ..asset import FALLBACK_CODEPOINT  # noqa: F401


PAGE_SIZE = 256  # The width and height of one atlas page
TAB_WIDTH = 4  # The advance of a tab, in spaces


style_dict = {
    "normal": "normal",
    "regular": "normal",
    "italic": "italic",
    "oblique": "italic",
}

weight_dict = {
    "normal": "normal",
    "regular": "normal",
    "bold": "bold",
}


class RasterConfig:
    """
    The parameters for one sprite font generation run.

    Parameters:
        size (int, float): The font size in pixels (the size of the em square).
        style (str): Either 'normal' or 'italic'. Italic is synthesized
            by slanting the glyph outlines.
        weight (str): Either 'normal' or 'bold'. Bold is synthesized by
            thickening the rendered glyphs.
        padding (int): The number of empty pixels around each glyph cell.
        antialias (bool): Whether to keep smooth edges. If False, the
            alpha of each pixel is thresholded at 50%, for pixel-art fonts.
        include_kerning (bool): Whether to store kerning pairs in the glyph metrics.
    """

    def __init__(
        self,
        size=32,
        *,
        style="normal",
        weight="normal",
        padding=1,
        antialias=True,
        include_kerning=True,
    ):
        # Check size
        assert_type("size", size, int, float)
        if isinstance(size, bool) or not size > 0:
            raise ValueError(f"Font size must be a positive number, not {size!r}")

        # Check style
        assert_type("style", style, str)
        try:
            style = style_dict[style.lower()]
        except KeyError:
            raise ValueError(f"Style string not known: '{style}'") from None

        # Check weight
        assert_type("weight", weight, str)
        try:
            weight = weight_dict[weight.lower()]
        except KeyError:
            raise ValueError(f"Weight string not known: '{weight}'") from None

        # Check padding
        assert_type("padding", padding, int)
        if padding < 0:
            raise ValueError(f"Padding must be zero or positive, not {padding}")

        self._kwargs = {
            "size": size,
            "style": style,
            "weight": weight,
            "padding": int(padding),
            "antialias": bool(antialias),
            "include_kerning": bool(include_kerning),
        }

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self._kwargs.items())
        return f"<RasterConfig {args}>"

    def __eq__(self, other):
        if not isinstance(other, RasterConfig):
            return NotImplemented
        return self._kwargs == other._kwargs

    def __hash__(self):
        return hash(tuple(self._kwargs.items()))

    def copy(self, **kwargs):
        """Make a copy of the config, with given kwargs replaced."""
        d = self._kwargs.copy()
        for k, v in kwargs.items():
            if v is not None:
                d[k] = v
        return self.__class__(**d)

    @property
    def size(self):
        """The font size in pixels."""
        return self._kwargs["size"]

    @property
    def style(self):
        """The style, either "normal" or "italic"."""
        return self._kwargs["style"]

    @property
    def weight(self):
        """The weight, either "normal" or "bold"."""
        return self._kwargs["weight"]

    @property
    def padding(self):
        """The padding around each glyph, in pixels."""
        return self._kwargs["padding"]

    @property
    def antialias(self):
        """Whether glyph edges are smooth (True) or thresholded (False)."""
        return self._kwargs["antialias"]

    @property
    def include_kerning(self):
        """Whether kerning pairs are looked up and stored."""
        return self._kwargs["include_kerning"]
