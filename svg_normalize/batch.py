"""Apply normalize_document across a collection of icon files.

A collection is anything yielding (name, content) pairs; the output is
anything with write(name, text). Every document is handled on its own, so
one bad file never stops the run.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from .normalizer import DEFAULT_SIZE, check_precision, format_size, normalize_document
from .pathdata import DEFAULT_PRECISION
from .transform import check_target_size

log = logging.getLogger(__name__)

SVG_SUFFIX = '.svg'


def is_icon_name(name):
    return name.lower().endswith(SVG_SUFFIX)


@dataclass(frozen=True)
class Failure:
    name: str
    reason: str


@dataclass
class BatchReport:
    written: list = field(default_factory=list)
    skipped: list = field(default_factory=list)
    failed: list = field(default_factory=list)
    warnings: dict = field(default_factory=dict)

    @property
    def ok(self):
        return not self.skipped and not self.failed

    def summary(self):
        return 'written {}, skipped {}, failed {}'.format(
            len(self.written), len(self.skipped), len(self.failed))


class DirectoryStore:
    """The *.svg files directly inside a directory, read as bytes in name order."""

    def __init__(self, path):
        self.path = Path(path)

    def __iter__(self):
        for entry in sorted(self.path.iterdir()):
            if entry.is_file() and is_icon_name(entry.name):
                yield entry.name, entry.read_bytes()

    def write(self, name, text):
        self.path.mkdir(parents=True, exist_ok=True)
        (self.path / name).write_bytes(text.encode('utf-8'))


class MemoryStore:
    def __init__(self, documents=None):
        self.documents = dict(documents or {})

    def __iter__(self):
        return iter(list(self.documents.items()))

    def __len__(self):
        return len(self.documents)

    def __contains__(self, name):
        return name in self.documents

    def __getitem__(self, name):
        return self.documents[name]

    def write(self, name, text):
        self.documents[name] = text


def normalize_collection(documents, output, target_size=DEFAULT_SIZE, precision=DEFAULT_PRECISION):
    """Normalize every .svg entry of documents into output and report the outcome.

    Entries whose names do not end in .svg are ignored. Bytes content is
    decoded as UTF-8; undecodable content and write errors become failures.
    """
    check_target_size(target_size)
    check_precision(precision)
    size = format_size(target_size)

    report = BatchReport()
    for name, content in documents:
        if not is_icon_name(name):
            continue
        if isinstance(content, bytes):
            try:
                content = content.decode('utf-8')
            except UnicodeDecodeError as error:
                log.error('Failed to read %s: %s', name, error)
                report.failed.append(Failure(name, 'not UTF-8 text: {}'.format(error)))
                continue

        result = normalize_document(content, target_size, precision)
        if result.skipped:
            log.warning('Skipping %s: %s', name, result.reason)
            report.skipped.append(replace(result, name=name))
            continue
        for warning in result.warnings:
            log.warning('%s: %s', name, warning)

        try:
            output.write(name, result.text)
        except OSError as error:
            log.error('Failed to write %s: %s', name, error)
            report.failed.append(Failure(name, str(error)))
            continue

        if result.warnings:
            report.warnings[name] = list(result.warnings)
        report.written.append(name)
        log.info('Scaled to %s×%s: %s', size, size, name)
    log.info(report.summary())
    return report
