"""
Shelf packing of glyph cells into fixed-size square pages.

This is a greedy first-fit shelf algorithm. Glyphs are placed from
tallest to shortest. A shelf is a horizontal strip, as tall as the first
glyph placed on it, that is filled from left to right. When no shelf has
room, a new shelf is opened below the others, and when no page has room
for a new shelf, a new page is started.

The packing is not optimal, but it is deterministic: the same glyphs in
the same order always give the same layout. Pixel-exact atlases depend
on that, so the order of sorting and scanning must not change.
"""

from ..errors import GlyphTooLargeError
from ._config import PAGE_SIZE


class Shelf:
    """A horizontal strip on a page, that glyphs are appended to left-to-right."""

    __slots__ = ["height", "occupied_width", "y"]

    def __init__(self, y, height):
        self.y = y
        self.height = height
        self.occupied_width = 0

    def __repr__(self):
        return f"<Shelf y={self.y} height={self.height} occupied={self.occupied_width}>"


class Page:
    """One square region of the atlas, holding an ordered list of shelves."""

    __slots__ = ["index", "shelves", "used_height"]

    def __init__(self, index):
        self.index = index
        self.shelves = []
        self.used_height = 0

    def __repr__(self):
        return f"<Page {self.index} with {len(self.shelves)} shelves, {self.used_height}px used>"


class PackedGlyph:
    """A glyph bitmap with its place in the atlas: page index and (x, y) on that page."""

    __slots__ = ["bitmap", "page", "x", "y"]

    def __init__(self, bitmap, page, x, y):
        self.bitmap = bitmap
        self.page = page
        self.x = x
        self.y = y

    def __repr__(self):
        return f"<PackedGlyph {self.codepoint} page {self.page} at ({self.x}, {self.y})>"

    @property
    def codepoint(self):
        return self.bitmap.codepoint

    @property
    def metrics(self):
        return self.bitmap.metrics

    @property
    def width(self):
        return self.bitmap.width

    @property
    def height(self):
        return self.bitmap.height


class ShelfPacker:
    """Packs glyph bitmaps into pages of ``page_size`` x ``page_size`` pixels.

    Use ``pack()`` to place a batch. The pages and shelves stay available
    for inspection afterwards.
    """

    def __init__(self, page_size=PAGE_SIZE):
        page_size = int(page_size)
        if page_size <= 0:
            raise ValueError(f"Page size must be positive, not {page_size}")
        self._page_size = page_size
        self._pages = []

    @property
    def page_size(self):
        """The width and height of each page."""
        return self._page_size

    @property
    def pages(self):
        """The list of pages in use."""
        return self._pages

    @property
    def page_count(self):
        """The number of pages in use."""
        return len(self._pages)

    def pack(self, bitmaps):
        """Place the given bitmaps. Returns a list of PackedGlyph, in
        placement order (tallest first).
        """
        page_size = self._page_size

        # Fail before placing anything
        for bitmap in bitmaps:
            if bitmap.width > page_size or bitmap.height > page_size:
                raise GlyphTooLargeError(
                    bitmap.codepoint, bitmap.width, bitmap.height, page_size
                )

        # Tallest first. Python's sort is stable, so equal heights keep
        # their original order.
        ordered = sorted(bitmaps, key=lambda b: -b.height)

        return [self._place(bitmap) for bitmap in ordered]

    def _place(self, bitmap):
        page_size = self._page_size
        w, h = bitmap.width, bitmap.height

        # First fit on an existing shelf, in page order and then shelf order
        for page in self._pages:
            for shelf in page.shelves:
                if w <= page_size - shelf.occupied_width and h <= shelf.height:
                    x = shelf.occupied_width
                    shelf.occupied_width += w
                    return PackedGlyph(bitmap, page.index, x, shelf.y)

        # Open a new shelf on the first page that has room left at the bottom
        for page in self._pages:
            if page.used_height + h <= page_size:
                return self._place_on_new_shelf(page, bitmap)

        # Start a new page
        page = Page(len(self._pages))
        self._pages.append(page)
        return self._place_on_new_shelf(page, bitmap)

    def _place_on_new_shelf(self, page, bitmap):
        shelf = Shelf(page.used_height, bitmap.height)
        shelf.occupied_width = bitmap.width
        page.shelves.append(shelf)
        page.used_height += bitmap.height
        return PackedGlyph(bitmap, page.index, 0, shelf.y)


def pack(bitmaps, page_size=PAGE_SIZE):
    """Pack glyph bitmaps into pages. Returns a list of PackedGlyph.

    Raises GlyphTooLargeError if a bitmap is wider or taller than a page.
    """
    return ShelfPacker(page_size).pack(bitmaps)
