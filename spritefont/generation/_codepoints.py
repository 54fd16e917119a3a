"""
Codepoint sets: named presets and custom ranges, resolved into the sorted
list of codepoints that a sprite font is generated for.
"""

import re

from ..utils import logger
from ._config import FALLBACK_CODEPOINT


def _crange(start, end):
    """Inclusive range of codepoints."""
    return list(range(start, end + 1))


presets = {
    "digits": ("Digits 0-9", _crange(0x30, 0x39)),
    "upper": ("Uppercase A-Z", _crange(0x41, 0x5A)),
    "lower": ("Lowercase a-z", _crange(0x61, 0x7A)),
    "whitespace": ("Whitespace (space, tab, NBSP)", [0x20, 0x09, 0xA0]),
    "ascii": ("ASCII Printable", _crange(0x20, 0x7E)),
    "latin1": ("Latin-1 Supplement", _crange(0xA0, 0xFF)),
    "punctuation": (
        "Punctuation",
        _crange(0x21, 0x2F) + _crange(0x3A, 0x40) + _crange(0x5B, 0x60) + _crange(0x7B, 0x7E),
    ),
}

REQUIRED_PRESETS = ("digits", "upper", "lower", "whitespace")
OPTIONAL_PRESETS = ("ascii", "latin1", "punctuation")
DEFAULT_PRESETS = ("ascii",)

MAX_CODEPOINT = 0x10FFFF

_split_prog = re.compile(r"[;,]+")


def unique_sorted(codepoints):
    """Get a sorted list of the unique codepoints."""
    return sorted(set(codepoints))


def _parse_value(s):
    s = s.strip()
    if s.lower().startswith("0x"):
        return int(s[2:], 16)
    return int(s, 10)


def parse_custom_ranges(text):
    """Parse user-entered codepoints, e.g. "65-70, 0x100; 0x2000-0x200A".

    Parts are separated by commas or semicolons. Each part is a single
    value or a range "start-end" (inclusive, in either order). Values are
    decimal, or hexadecimal with a "0x" prefix. Parts that cannot be
    parsed are skipped. Returns a sorted list of unique codepoints.
    """
    codepoints = []
    for part in _split_prog.split(text or ""):
        part = part.strip()
        if not part:
            continue
        start_str, _, end_str = part.partition("-")
        try:
            if not end_str.strip():
                codepoints.append(_parse_value(start_str))
            else:
                start, end = _parse_value(start_str), _parse_value(end_str)
                start, end = min(start, end), max(start, end)
                if start > MAX_CODEPOINT:
                    continue
                codepoints.extend(_crange(start, min(end, MAX_CODEPOINT)))
        except ValueError:
            logger.warning(f"Ignoring invalid codepoint range: '{part}'")
    return unique_sorted(cp for cp in codepoints if 0 <= cp <= MAX_CODEPOINT)


def resolve_codepoints(
    selected_presets=DEFAULT_PRESETS, custom="", fallback_codepoint=FALLBACK_CODEPOINT
):
    """Resolve the codepoints to generate glyphs for.

    Parameters:
        selected_presets (iterable): names of optional presets to include.
            The required presets are always included.
        custom (str): custom ranges, see ``parse_custom_ranges()``.
        fallback_codepoint (int): always included.

    Returns a sorted list of unique codepoints.
    """
    codepoints = []
    for name in tuple(REQUIRED_PRESETS) + tuple(selected_presets or ()):
        try:
            _, codes = presets[name]
        except KeyError:
            raise ValueError(f"Codepoint preset not known: '{name}'") from None
        codepoints.extend(codes)
    codepoints.extend(parse_custom_ranges(custom))
    codepoints.append(fallback_codepoint)
    return unique_sorted(codepoints)
