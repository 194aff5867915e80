"""Normalize SVG icons authored in arbitrary coordinate spaces onto one square frame."""

from .batch import BatchReport, DirectoryStore, Failure, MemoryStore, normalize_collection
from .bounds import CoordinateBounds, detect_bounds
from .normalizer import DEFAULT_SIZE, BOUNDS_UNDETECTABLE, PathWarning, Rewritten, Skip, normalize_document
from .pathdata import DEFAULT_PRECISION, PathSyntaxError, transform_path_data
from .transform import AffineTransform, derive_transform

__version__ = '1.0.0'
