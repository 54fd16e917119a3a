"""
Utility functions for spritefont.

.. currentmodule:: spritefont.utils

.. autosummary::
    :toctree: utils/

    logger
    ReadOnlyDict
    assert_type
    format_codepoint
    blit

"""

import os
import types
import logging
import inspect

import numpy as np


logger = logging.getLogger("spritefont")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("SPRITEFONT_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid spritefont log level: {level}")


_set_log_level()


def format_codepoint(codepoint):
    """Format a codepoint the Unicode way, e.g. 'U+003F'."""
    return f"U+{codepoint:04X}"


def blit(dst, src, x, y):
    """Draw the 2D array src into dst with its top-left corner at (x, y).

    The parts of src outside of dst are clipped. Pixels are combined by
    taking the maximum, so drawing onto an empty region is a plain copy
    and overlapping glyph cells do not erase each other. Returns dst.
    """
    h, w = src.shape[:2]
    x1, y1 = max(x, 0), max(y, 0)
    x2, y2 = min(x + w, dst.shape[1]), min(y + h, dst.shape[0])
    if x2 > x1 and y2 > y1:
        region = dst[y1:y2, x1:x2]
        np.maximum(region, src[y1 - y : y2 - y, x1 - x : x2 - x], out=region)
    return dst


def assert_type(name, value, *classes):
    allow_none = False
    if classes[0] is None:
        if value is None:
            return
        allow_none = True
        classes = classes[1:]

    if not isinstance(value, classes):
        # Get traceback object to point of the frame of interest
        f = inspect.currentframe()
        f = f.f_back
        if name:
            # Step back to calling code
            f = f.f_back
            # If this is a constructor that has name as a (kw) argument, take another step back
            if f.f_code.co_name == "__init__" and name in f.f_code.co_varnames:
                f = f.f_back
        tb = types.TracebackType(None, f, f.f_lasti, f.f_lineno)

        # Build error message
        msg = "Expected"
        if name:
            msg += f" '{name}' to be"
        class_strings = [cls.__name__ for cls in classes]
        msg += f" an instance of {' | '.join(class_strings)}"
        if allow_none:
            msg += " or None"
        valuestr = value.__class__.__name__
        msg += f", but got {valuestr} object."

        # Raise message with alt traceback
        raise TypeError(msg).with_traceback(tb) from None


class ReadOnlyDict(dict):
    """A read-only dict, for exported data that must not change after the fact."""

    __slots__ = ["_hash"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Calculate hash in a way that requires any value to also be hashable
        parts = []
        for k in sorted(self.keys()):
            v = self[k]
            parts.append(str(hash(k)))
            parts.append(str(hash(v)))
        self._hash = hash(" ".join(parts))

    def __setitem__(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def __delitem__(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def clear(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def pop(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def popitem(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def setdefault(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def update(self, *args, **kwargs):
        raise TypeError("Cannot modify ReadOnlyDict")

    def __hash__(self):
        return self._hash
