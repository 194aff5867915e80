import svgpathtools
import svgwrite


def make_icon(*paths, view_box=None, size=None):
    """An svgwrite-built icon document with the given path data."""
    drawing = svgwrite.Drawing(size=size)
    if view_box is not None:
        drawing.viewbox(*view_box)
    for d in paths:
        drawing.add(drawing.path(d=d))
    return drawing.tostring()


def assert_same_geometry(original, rewritten, transform, tolerance=1e-3):
    """Every segment of rewritten is the matching segment of original, mapped."""
    source = svgpathtools.parse_path(original)
    target = svgpathtools.parse_path(rewritten)
    assert len(source) == len(target)
    for before, after in zip(source, target):
        assert type(before) is type(after)
        for t in (0.0, 0.2, 0.4, 0.5, 0.6, 0.8, 1.0):
            point = before.point(t)
            x, y = transform.point(point.real, point.imag)
            mapped = after.point(t)
            assert abs(mapped.real - x) < tolerance
            assert abs(mapped.imag - y) < tolerance
