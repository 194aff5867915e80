import pytest

from helpers import make_icon
from svg_normalize.bounds import CoordinateBounds, detect_bounds, parse_length, parse_view_box


def test_view_box_is_used() -> None:
    text = make_icon('M0 0', view_box=(0, 0, 100, 50))
    assert detect_bounds(text) == CoordinateBounds(0, 0, 100, 50)


def test_view_box_wins_over_width_and_height() -> None:
    text = make_icon('M0 0', view_box=(-2, 4, 10, 10), size=(100, 300))
    assert detect_bounds(text) == CoordinateBounds(-2, 4, 10, 10)


def test_width_and_height_fallback() -> None:
    assert detect_bounds(make_icon('M0 0', size=(48, 48))) == CoordinateBounds(0, 0, 48, 48)
    assert detect_bounds(make_icon('M0 0', size=('32px', '16px'))) == CoordinateBounds(0, 0, 32, 16)


def test_fallback_when_view_box_is_malformed() -> None:
    text = '<svg width="48" height="24" viewBox="0 0 10"><path d="M0 0"/></svg>'
    assert detect_bounds(text) == CoordinateBounds(0, 0, 48, 24)
    text = '<svg width="48" height="24" viewBox="0 0 ten 10"/>'
    assert detect_bounds(text) == CoordinateBounds(0, 0, 48, 24)


def test_empty_view_box_falls_back() -> None:
    assert detect_bounds('<svg viewBox="" width="8" height="8"/>') == CoordinateBounds(0, 0, 8, 8)


def test_degenerate_view_box_is_not_detectable() -> None:
    assert detect_bounds('<svg width="48" height="48" viewBox="0 0 0 10"/>') is None
    assert detect_bounds('<svg viewBox="0 0 10 -10"/>') is None


@pytest.mark.parametrize('text', [
    '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"/></svg>',
    '<svg width="48"/>',
    '<svg width="100%" height="100%"/>',
    '<svg width="2in" height="2in"/>',
    '<svg width="-5" height="5"/>',
    '<svg width="0" height="5"/>',
    '<html><body>no icon here</body></html>',
    '',
])
def test_not_detectable(text) -> None:
    assert detect_bounds(text) is None


def test_only_root_attributes_count() -> None:
    text = '<svg><rect width="10" height="10"/><svg viewBox="0 0 5 5"/></svg>'
    assert detect_bounds(text) is None


def test_namespaced_attributes_do_not_count() -> None:
    assert detect_bounds('<svg xlink:width="10" xlink:height="10"/>') is None


def test_declarations_in_comments_do_not_count() -> None:
    text = '<!-- <svg viewBox="0 0 1 1"> --><svg viewBox="0 0 2 3"/>'
    assert detect_bounds(text) == CoordinateBounds(0, 0, 2, 3)


def test_first_view_box_wins() -> None:
    assert detect_bounds('<svg viewBox="0 0 4 4" viewBox="0 0 8 8"/>') == CoordinateBounds(0, 0, 4, 4)


@pytest.mark.parametrize('value, expected', [
    ('0 0 24 24', CoordinateBounds(0, 0, 24, 24)),
    ('0,0,24,24', CoordinateBounds(0, 0, 24, 24)),
    (' -1.5, 2e1  .5 7 ', CoordinateBounds(-1.5, 20, 0.5, 7)),
    ('0 0 24', None),
    ('0 0 24 24 24', None),
    ('0 0 inf 24', None),
    ('0 0 nan 24', None),
    ('0 0 1e999 24', None),
])
def test_parse_view_box(value, expected) -> None:
    assert parse_view_box(value) == expected


@pytest.mark.parametrize('value, expected', [
    ('48', 48.0),
    ('48px', 48.0),
    ('48PX', 48.0),
    (' 12.5 px ', 12.5),
    ('1e1', 10.0),
    ('48pt', None),
    ('50%', None),
    ('', None),
    ('auto', None),
])
def test_parse_length(value, expected) -> None:
    assert parse_length(value) == expected
