"""Normalize one icon document onto a square frame of side target_size."""

import logging
from dataclasses import dataclass

from .bounds import CoordinateBounds, bounds_from_attributes
from .document import apply_edits, parse_document
from .pathdata import DEFAULT_PRECISION, transform_path_data
from .transform import AffineTransform, check_target_size, derive_transform

log = logging.getLogger(__name__)

DEFAULT_SIZE = 24
BOUNDS_UNDETECTABLE = 'bounds undetectable'

_SIZE_ATTRIBUTES = ('width', 'height', 'viewbox')


@dataclass(frozen=True)
class PathWarning:
    """A path whose data could not be rewritten and was left as it was."""

    index: int
    message: str

    def __str__(self):
        return 'path #{} left unchanged: {}'.format(self.index, self.message)


@dataclass(frozen=True)
class Rewritten:
    text: str
    bounds: CoordinateBounds
    transform: AffineTransform
    warnings: tuple = ()

    skipped = False


@dataclass(frozen=True)
class Skip:
    reason: str
    name: str = None

    skipped = True


def check_precision(precision):
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError('precision must be a non-negative integer, got {!r}'.format(precision))
    return precision


def format_size(target_size):
    """Shortest text that reads back as exactly target_size."""
    text = repr(float(target_size))
    return text[:-2] if text.endswith('.0') else text


def size_declaration(target_size):
    size = format_size(target_size)
    return ' width="{0}" height="{0}" viewBox="0 0 {0} {0}"'.format(size)


def normalize_document(text, target_size=DEFAULT_SIZE, precision=DEFAULT_PRECISION):
    """Return Rewritten with the document mapped onto (0, 0, S, S), or Skip.

    Document problems never raise: missing bounds give a Skip, and path data
    that cannot be rewritten stays untouched with a PathWarning. Only an
    invalid target_size or precision raises ValueError.
    """
    check_target_size(target_size)
    check_precision(precision)

    document = parse_document(text)
    if document.root is None:
        return Skip(BOUNDS_UNDETECTABLE)
    bounds = bounds_from_attributes(document.root)
    if bounds is None:
        return Skip(BOUNDS_UNDETECTABLE)
    transform = derive_transform(bounds, target_size)
    if not transform.finite or transform.scale_x == 0 or transform.scale_y == 0:
        # bounds too small or too large to map onto the target
        return Skip(BOUNDS_UNDETECTABLE)

    edits = []
    warnings = []
    for index, tag in enumerate(document.paths):
        d = tag.find('d')
        try:
            new_d = transform_path_data(d.value, transform, precision)
        except (ValueError, ArithmeticError) as error:
            log.debug('path #%d: %s', index, error)
            warnings.append(PathWarning(index, str(error)))
            continue
        if new_d != d.value:
            edits.append((d.value_start, d.value_end, new_d))

    root = document.root
    for attribute in root.attributes:
        if attribute.name.lower() in _SIZE_ATTRIBUTES:
            edits.append((attribute.start, attribute.end, ''))
    edits.append((root.attributes_end, root.attributes_end, size_declaration(target_size)))

    return Rewritten(apply_edits(text, edits), bounds, transform, tuple(warnings))
