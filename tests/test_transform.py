import math

import pytest

from svg_normalize.bounds import CoordinateBounds
from svg_normalize.transform import AffineTransform, check_target_size, derive_transform


def test_scale_is_target_over_each_side() -> None:
    transform = derive_transform(CoordinateBounds(0, 0, 100, 50), 24)
    assert transform.scale_x == pytest.approx(0.24)
    assert transform.scale_y == pytest.approx(0.48)
    assert not transform.has_translation


def test_origin_becomes_negative_translation() -> None:
    transform = derive_transform(CoordinateBounds(10, -5, 20, 20), 24)
    assert transform.translate_x == -10
    assert transform.translate_y == 5
    assert transform.scale_x == pytest.approx(1.2)


def test_zero_origin_has_no_negative_zero() -> None:
    transform = derive_transform(CoordinateBounds(0.0, 0.0, 10, 10), 10)
    assert math.copysign(1, transform.translate_x) == 1
    assert math.copysign(1, transform.translate_y) == 1
    assert transform.is_identity


def test_translate_then_scale() -> None:
    transform = derive_transform(CoordinateBounds(10, 10, 20, 20), 24)
    assert transform.point(20, 20) == pytest.approx((12, 12))


def test_deltas_ignore_translation() -> None:
    transform = AffineTransform(translate_x=-10, translate_y=-10, scale_x=2, scale_y=3)
    assert transform.delta(1, 1) == (2, 3)


@pytest.mark.parametrize('size', [0, -1, float('nan'), float('inf'), True, '24', None])
def test_rejects_bad_target_size(size) -> None:
    with pytest.raises(ValueError):
        check_target_size(size)


def test_finite() -> None:
    assert derive_transform(CoordinateBounds(0, 0, 100, 50), 24).finite
    assert not derive_transform(CoordinateBounds(0, 0, 1e-320, 1e-320), 24).finite
