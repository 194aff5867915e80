"""Recover the coordinate bounds an icon was authored in.

A well-formed viewBox wins. Only when it is missing or malformed are the
root width and height consulted, with an implied origin of (0, 0).
"""

import math
import re
from dataclasses import dataclass

from .document import parse_document

_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')
_LENGTH_RE = re.compile(r'\s*(?P<number>' + _NUMBER_RE.pattern + r')\s*(?:px)?\s*', re.I)
_LIST_SEPARATOR_RE = re.compile(r'[\s,]+')


@dataclass(frozen=True)
class CoordinateBounds:
    origin_x: float
    origin_y: float
    width: float
    height: float

    @property
    def usable(self):
        return self.width > 0 and self.height > 0

    def __str__(self):
        return '({:g}, {:g}, {:g}, {:g})'.format(self.origin_x, self.origin_y, self.width, self.height)


def _finite(text):
    value = float(text)
    return value if math.isfinite(value) else None


def parse_view_box(value):
    """Four finite numbers separated by whitespace and/or commas, else None."""
    parts = [part for part in _LIST_SEPARATOR_RE.split(value.strip()) if part]
    if len(parts) != 4 or not all(_NUMBER_RE.fullmatch(part) for part in parts):
        return None
    numbers = [_finite(part) for part in parts]
    if None in numbers:
        return None
    return CoordinateBounds(*numbers)


def parse_length(value):
    """A plain or px-suffixed number as float; anything else is None.

    No unit conversion happens: values are taken as user-space units.
    """
    match = _LENGTH_RE.fullmatch(value)
    if match is None:
        return None
    return _finite(match.group('number'))


def bounds_from_attributes(root):
    """Bounds declared on the root start tag, or None if there are none usable."""
    view_box = root.find('viewBox', ignore_case=True)
    if view_box is not None:
        bounds = parse_view_box(view_box.value)
        if bounds is not None:
            return bounds if bounds.usable else None

    width = root.find('width', ignore_case=True)
    height = root.find('height', ignore_case=True)
    if width is None or height is None:
        return None
    width, height = parse_length(width.value), parse_length(height.value)
    if width is None or height is None:
        return None
    bounds = CoordinateBounds(0.0, 0.0, width, height)
    return bounds if bounds.usable else None


def detect_bounds(text):
    root = parse_document(text).root
    if root is None:
        return None
    return bounds_from_attributes(root)
