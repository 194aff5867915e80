"""Affine map from an icon's declared bounds onto the target square."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class AffineTransform:
    """Translate by (translate_x, translate_y), then scale by (scale_x, scale_y)."""

    translate_x: float = 0.0
    translate_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def has_translation(self):
        return self.translate_x != 0 or self.translate_y != 0

    @property
    def is_identity(self):
        return not self.has_translation and self.scale_x == 1 and self.scale_y == 1

    @property
    def finite(self):
        return all(math.isfinite(value) for value in (
            self.translate_x, self.translate_y, self.scale_x, self.scale_y))

    @property
    def determinant(self):
        return self.scale_x * self.scale_y

    def point(self, x, y):
        """Map an absolute point."""
        return ((x + self.translate_x) * self.scale_x,
                (y + self.translate_y) * self.scale_y)

    def delta(self, dx, dy):
        """Map a relative offset; the translation cancels out."""
        return (dx * self.scale_x, dy * self.scale_y)


def check_target_size(target_size):
    if isinstance(target_size, bool) or not isinstance(target_size, (int, float)):
        raise ValueError('target size must be a number, got {!r}'.format(target_size))
    if not math.isfinite(target_size) or target_size <= 0:
        raise ValueError('target size must be positive and finite, got {!r}'.format(target_size))
    return target_size


def derive_transform(bounds, target_size):
    check_target_size(target_size)
    translate_x = -bounds.origin_x if bounds.origin_x else 0.0
    translate_y = -bounds.origin_y if bounds.origin_y else 0.0
    return AffineTransform(
        translate_x=translate_x,
        translate_y=translate_y,
        scale_x=target_size / bounds.width,
        scale_y=target_size / bounds.height)
