"""Path data parsing, remapping and serialization.

Commands keep their letter, their absolute/relative mode and their operand
grouping. Only operand values change, plus the ellipse parameters of arcs.
"""

import math
import re
from dataclasses import dataclass, field

import numpy
import svgpathtools

DEFAULT_PRECISION = 6
UNDERSIZED_RADIUS_FACTOR = 0.999

# operand layout per command: n = number, f = arc flag
OPERANDS = {
    'M': 'nn',
    'L': 'nn',
    'T': 'nn',
    'H': 'n',
    'V': 'n',
    'C': 'nnnnnn',
    'S': 'nnnn',
    'Q': 'nnnn',
    'A': 'nnnffnn',
    'Z': '',
}

_COMMAND_RE = re.compile(r'[MmLlHhVvCcSsQqTtAaZz]')
_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')
_SEPARATOR_RE = re.compile(r'[\s,]*')


class PathSyntaxError(ValueError):
    def __init__(self, message, offset):
        super().__init__('{} at offset {}'.format(message, offset))
        self.offset = offset


@dataclass
class PathCommand:
    letter: str
    operands: list = field(default_factory=list)

    @property
    def kind(self):
        return self.letter.upper()

    @property
    def relative(self):
        return self.letter.islower()


def _skip(d, pos):
    return _SEPARATOR_RE.match(d, pos).end()


def parse_path_data(d):
    """Tokenize path data into a list of PathCommand.

    Raises PathSyntaxError when the data does not open with a move, stops in
    the middle of an operand group, or holds anything that is not a command,
    a number, an arc flag or a separator.
    """
    commands = []
    length = len(d)
    pos = _skip(d, 0)
    while pos < length:
        match = _COMMAND_RE.match(d, pos)
        if match is None:
            raise PathSyntaxError('expected a command, found {!r}'.format(d[pos]), pos)
        letter = match.group()
        if not commands and letter not in 'Mm':
            raise PathSyntaxError('path data must begin with a move, found {!r}'.format(letter), pos)
        layout = OPERANDS[letter.upper()]
        operands = []
        pos = _skip(d, match.end())
        while layout and pos < length and _COMMAND_RE.match(d, pos) is None:
            for kind in layout:
                if pos >= length:
                    raise PathSyntaxError('incomplete operands for {!r}'.format(letter), pos)
                if kind == 'f':
                    if d[pos] not in '01':
                        raise PathSyntaxError('expected an arc flag, found {!r}'.format(d[pos]), pos)
                    operands.append(int(d[pos]))
                    pos += 1
                else:
                    number = _NUMBER_RE.match(d, pos)
                    if number is None:
                        raise PathSyntaxError('expected a number, found {!r}'.format(d[pos]), pos)
                    value = float(number.group())
                    if not math.isfinite(value):
                        raise PathSyntaxError('number out of range: {!r}'.format(number.group()), pos)
                    operands.append(value)
                    pos = number.end()
                pos = _skip(d, pos)
        if layout and not operands:
            raise PathSyntaxError('missing operands for {!r}'.format(letter), pos)
        commands.append(PathCommand(letter, operands))
    return commands


def transform_ellipse_axes(rx, ry, rotation, transform):
    """Radii and rotation of the ellipse (rx, ry, rotation) after the scale.

    The semi-axes are pushed through the map and re-extracted as singular
    values. The new x radius is the one the old x radius mostly turns into,
    and the rotation is reported as the equivalent angle closest to the old one.
    """
    sx, sy = transform.scale_x, transform.scale_y
    if rotation % 180 == 0:
        return abs(sx * rx), abs(sy * ry), rotation
    if rotation % 180 == 90:
        return abs(sy * rx), abs(sx * ry), rotation

    phi = math.radians(rotation)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    axes = numpy.array([
        [sx * rx * cos_phi, -sx * ry * sin_phi],
        [sy * rx * sin_phi, sy * ry * cos_phi],
    ])
    directions, radii, preimage = numpy.linalg.svd(axes)
    major, minor = float(radii[0]), float(radii[1])
    if math.isclose(major, minor, rel_tol=1e-12):
        return major, minor, rotation

    if abs(preimage[1, 0]) > abs(preimage[0, 0]):
        new_rx, new_ry, axis = minor, major, directions[:, 1]
    else:
        new_rx, new_ry, axis = major, minor, directions[:, 0]
    angle = math.degrees(math.atan2(axis[1], axis[0]))
    angle += 180 * round((rotation - angle) / 180)
    return new_rx, new_ry, angle


def transform_arc(start_x, start_y, rx, ry, rotation, large_arc, sweep, end_x, end_y, transform):
    """Return (rx, ry, rotation, large_arc, sweep) of the arc after the map.

    Start and end are absolute source coordinates; the endpoint itself is
    mapped by the caller.
    """
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0 or (start_x, start_y) == (end_x, end_y):
        # rendered as a straight line or not at all
        if transform.determinant < 0:
            sweep = 1 - sweep
        return abs(rx * transform.scale_x), abs(ry * transform.scale_y), rotation, large_arc, sweep

    arc = svgpathtools.Arc(complex(start_x, start_y), complex(rx, ry), rotation,
                           bool(large_arc), bool(sweep), complex(end_x, end_y))
    new_rx, new_ry, new_rotation = transform_ellipse_axes(
        arc.radius.real, arc.radius.imag, arc.rotation, transform)

    if arc.radius.real > rx:
        # radii were enlarged to reach the endpoint; write them short of the
        # minimum so the renderer enlarges them again to the same half ellipse
        shrink = min(rx / arc.radius.real, UNDERSIZED_RADIUS_FACTOR)
        new_rx, new_ry = new_rx * shrink, new_ry * shrink

    extent = arc.delta if transform.determinant > 0 else -arc.delta
    if not math.isclose(abs(extent), 180):
        large_arc = int(abs(extent) > 180)
    return new_rx, new_ry, new_rotation, large_arc, int(extent > 0)


def transform_commands(commands, transform):
    """Map parsed commands through transform, returning new PathCommand objects."""
    result = []
    x = y = 0.0
    start_x = start_y = 0.0
    for index, command in enumerate(commands):
        kind = command.kind
        relative = command.relative
        operands = command.operands
        out = []

        if kind == 'Z':
            x, y = start_x, start_y

        elif kind == 'H':
            for value in operands:
                if relative:
                    out.append(value * transform.scale_x)
                    x += value
                else:
                    out.append((value + transform.translate_x) * transform.scale_x)
                    x = value

        elif kind == 'V':
            for value in operands:
                if relative:
                    out.append(value * transform.scale_y)
                    y += value
                else:
                    out.append((value + transform.translate_y) * transform.scale_y)
                    y = value

        elif kind == 'A':
            for i in range(0, len(operands), 7):
                rx, ry, rotation, large_arc, sweep, end_x, end_y = operands[i:i + 7]
                if relative:
                    end = transform.delta(end_x, end_y)
                    end_x, end_y = x + end_x, y + end_y
                else:
                    end = transform.point(end_x, end_y)
                out.extend(transform_arc(x, y, rx, ry, rotation, large_arc, sweep,
                                         end_x, end_y, transform))
                out.extend(end)
                x, y = end_x, end_y

        else:
            size = len(OPERANDS[kind])
            for i in range(0, len(operands), size):
                group = operands[i:i + size]
                # a path opening with m has an absolute first point
                absolute = not relative or (kind == 'M' and index == 0 and i == 0)
                for j in range(0, size, 2):
                    if absolute:
                        out.extend(transform.point(group[j], group[j + 1]))
                    else:
                        out.extend(transform.delta(group[j], group[j + 1]))
                if absolute:
                    x, y = group[-2], group[-1]
                else:
                    x, y = x + group[-2], y + group[-1]
                if kind == 'M' and i == 0:
                    start_x, start_y = x, y

        result.append(PathCommand(command.letter, out))
    return result


def format_float(value, precision=DEFAULT_PRECISION):
    text = '{:.{}f}'.format(value, precision)
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def _format_operand(value, precision):
    # arc flags are kept as ints
    if isinstance(value, int):
        return str(value)
    return format_float(value, precision)


def serialize_path(commands, precision=DEFAULT_PRECISION):
    return ''.join(
        command.letter + ' '.join(_format_operand(value, precision) for value in command.operands)
        for command in commands)


def transform_path_data(d, transform, precision=DEFAULT_PRECISION):
    """Rewrite path data d through transform.

    Empty data comes back unchanged; malformed data raises PathSyntaxError,
    and data whose mapped values overflow raises ValueError.
    """
    if not d or not d.strip():
        return d
    commands = transform_commands(parse_path_data(d), transform)
    for command in commands:
        if not all(math.isfinite(value) for value in command.operands):
            raise ValueError('path data overflows under the transform')
    return serialize_path(commands, precision)
