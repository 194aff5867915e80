import argparse
import logging
import math
import sys
from pathlib import Path

from .batch import DirectoryStore, is_icon_name, normalize_collection
from .normalizer import DEFAULT_SIZE
from .pathdata import DEFAULT_PRECISION


def positive_float(text):
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError('not a number: {!r}'.format(text))
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError('must be a positive number: {!r}'.format(text))
    return value


def non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError('not an integer: {!r}'.format(text))
    if value < 0:
        raise argparse.ArgumentTypeError('must not be negative: {!r}'.format(text))
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='svg-normalize',
        description='normalize svg icons onto a square viewBox')
    parser.add_argument('inPath',
        help='input svg, or a directory of svg icons')
    parser.add_argument('-o', '--out', dest='outPath',
        action='store',
        help='output svg or directory. default same as input')
    parser.add_argument('-s', '--size', dest='size',
        type=positive_float, default=DEFAULT_SIZE,
        help='side of the target square (default %(default)s)')
    parser.add_argument('-p', '--precision', dest='precision',
        type=non_negative_int, default=DEFAULT_PRECISION,
        help='decimal places kept in path data (default %(default)s)')
    parser.add_argument('-q', '--quiet', dest='quiet',
        action='store_true',
        help='only report warnings and errors')
    parser.add_argument('--verbose', dest='verbose',
        action='store_true',
        help='report every path that could not be rewritten')
    args = parser.parse_args(argv)

    in_path = Path(args.inPath)
    if not in_path.exists():
        parser.error('no such file or directory: {}'.format(args.inPath))
    if in_path.is_file() and not is_icon_name(in_path.name):
        parser.error('not an .svg file: {}'.format(args.inPath))
    if args.outPath is None:
        args.outPath = args.inPath
    return args


class FileOutput:
    """Write a single document to a file, or into a directory under its own name."""

    def __init__(self, path):
        self.path = Path(path)

    def write(self, name, text):
        target = self.path / name if self.path.is_dir() else self.path
        target.write_bytes(text.encode('utf-8'))


def main(args):
    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(message)s')

    in_path = Path(args.inPath)
    if in_path.is_dir():
        documents = DirectoryStore(in_path)
        output = DirectoryStore(args.outPath)
    else:
        documents = [(in_path.name, in_path.read_bytes())]
        output = FileOutput(args.outPath)

    report = normalize_collection(documents, output, args.size, args.precision)

    print(report.summary())
    for skip in report.skipped:
        print('skipped {}: {}'.format(skip.name, skip.reason))
    for failure in report.failed:
        print('failed {}: {}'.format(failure.name, failure.reason))
    return 0 if report.ok else 1


def run():
    sys.exit(main(parse_args()))
