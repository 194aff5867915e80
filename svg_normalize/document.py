"""Minimal, byte-preserving view of an SVG document.

The markup is scanned rather than rebuilt, so that every byte outside the
edited attribute values survives a rewrite. The scan exposes just the root
<svg> start tag and the <path> start tags that carry path data.
"""

import re
from dataclasses import dataclass, field

_MARKUP_RE = re.compile(r'''
    <!--.*?-->
  | <!\[CDATA\[.*?\]\]>
  | <\?.*?\?>
  | <!DOCTYPE[^\[>]*(?:\[.*?\])?[^>]*>
  | <!(?:[^>"']|"[^"]*"|'[^']*')*>
  | <(?P<name>[A-Za-z_][\w.:-]*)(?P<attributes>(?:[^>"']|"[^"]*"|'[^']*')*?)/?>
''', re.S | re.X | re.I)

_ATTRIBUTE_RE = re.compile(r'''\s+(?P<name>[^\s=/>"']+)\s*=\s*(?P<quote>["'])(?P<value>.*?)(?P=quote)''', re.S)


@dataclass(frozen=True)
class Attribute:
    name: str
    value: str
    start: int
    end: int
    value_start: int
    value_end: int


@dataclass
class Tag:
    name: str
    start: int
    end: int
    attributes_end: int
    attributes: list = field(default_factory=list)

    @property
    def local_name(self):
        return self.name.rsplit(':', 1)[-1]

    def find(self, name, ignore_case=False):
        """First attribute called name, or None."""
        if ignore_case:
            name = name.lower()
        for attribute in self.attributes:
            if (attribute.name.lower() if ignore_case else attribute.name) == name:
                return attribute
        return None


@dataclass
class SvgDocument:
    text: str
    root: Tag = None
    paths: list = field(default_factory=list)


def _read_tag(match):
    base = match.start('attributes')
    attributes = []
    attributes_end = base
    for found in _ATTRIBUTE_RE.finditer(match.group('attributes')):
        attributes.append(Attribute(
            name=found.group('name'),
            value=found.group('value'),
            start=base + found.start(),
            end=base + found.end(),
            value_start=base + found.start('value'),
            value_end=base + found.end('value')))
        attributes_end = base + found.end()
    return Tag(match.group('name'), match.start(), match.end(), attributes_end, attributes)


def iter_tags(text):
    """Yield every start tag outside comments, CDATA and declarations."""
    for match in _MARKUP_RE.finditer(text):
        if match.group('name'):
            yield _read_tag(match)


def parse_document(text):
    document = SvgDocument(text)
    for tag in iter_tags(text):
        if document.root is None:
            if tag.local_name == 'svg':
                document.root = tag
        elif tag.local_name == 'path' and tag.find('d') is not None:
            document.paths.append(tag)
    return document


def apply_edits(text, edits):
    """Replace (start, end, replacement) spans; spans must not overlap."""
    for start, end, replacement in sorted(edits, key=lambda edit: (edit[0], edit[1]), reverse=True):
        text = text[:start] + replacement + text[end:]
    return text
