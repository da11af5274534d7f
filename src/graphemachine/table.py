"""
.. py:module:: graphemachine.table
   :synopsis: Character property lookup tables for grapheme cluster segmentation.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)

A classifier is any callable that maps a code point (an ``int``) to its
:class:`.CharProperties`. The default classifier, :func:`lookup`, uses the
Unicode property tables of the :mod:`regex` package. A :class:`RangeTable`
can be loaded from the Unicode Character Database files instead, and a
:class:`MappingTable` holds a small, hand-built set of characters.
"""
import logging
import os
from bisect import bisect_right
from functools import lru_cache

import regex

from graphemachine.properties import CharProperties, GCBProperty, InCBProperty

#################
# CONFIGURATION #
#################

UNICODE_VERSION = "16.0.0"
"""
The Unicode version the segmentation rules and tables are defined for.
"""

UCD_DIR_VARIABLE = "GRAPHEMACHINE_UCD_DIR"
"""
The environment variable naming a directory with the UCD files used by
:meth:`RangeTable.from_environment`.
"""

GRAPHEME_BREAK_FILE = "GraphemeBreakProperty.txt"
EMOJI_DATA_FILE = "emoji-data.txt"
DERIVED_CORE_FILE = "DerivedCoreProperties.txt"

CACHE_SIZE = 0x1000
"""
The number of code points the default classifier memoizes.
"""

MAX_CODE_POINT = 0x10FFFF

GCB_NAMES = {
    "Other": GCBProperty.Other,
    "CR": GCBProperty.CR,
    "LF": GCBProperty.LF,
    "Control": GCBProperty.Control,
    "Extend": GCBProperty.Extend,
    "ZWJ": GCBProperty.ZWJ,
    "Prepend": GCBProperty.Prepend,
    "SpacingMark": GCBProperty.SpacingMark,
    "L": GCBProperty.L,
    "V": GCBProperty.V,
    "T": GCBProperty.T,
    "LV": GCBProperty.LV,
    "LVT": GCBProperty.LVT,
    "Regional_Indicator": GCBProperty.RegionalIndicator,
}
"""
Mapping of UCD Grapheme_Cluster_Break value names to :class:`.GCBProperty`.
"""

INCB_NAMES = {
    "None": InCBProperty.Other,
    "Consonant": InCBProperty.Consonant,
    "Extend": InCBProperty.Extend,
    "Linker": InCBProperty.Linker,
}
"""
Mapping of UCD Indic_Conjunct_Break value names to :class:`.InCBProperty`.
"""

EXTENDED_PICTOGRAPHIC = "Extended_Pictographic"
INCB = "InCB"


def _alternation(classes):
    # one named group per property value; lastgroup names the match
    return regex.compile("|".join(
        r"(?P<%s>%s)" % (prop.name, pattern) for prop, pattern in classes
    ))


GCB_PATTERN = _alternation(
    [(prop, r"\p{Grapheme_Cluster_Break=%s}" % name)
     for name, prop in GCB_NAMES.items() if prop != GCBProperty.Other] +
    [(GCBProperty.ExtendedPictographic, r"\p{Extended_Pictographic}")]
)

INCB_PATTERN = _alternation(
    (prop, r"\p{Indic_Conjunct_Break=%s}" % name)
    for name, prop in INCB_NAMES.items() if prop != InCBProperty.Other
)


##################
# IMPLEMENTATION #
##################
def CheckCodePoint(code_point: int) -> int:
    """
    Return the *code_point* if it is in the Unicode code space.

    :raises ValueError: if the *code_point* is out of range
    """
    if not 0 <= code_point <= MAX_CODE_POINT:
        raise ValueError('code point %r out of range' % code_point)

    return code_point


def DecodeU8Char(data: bytes) -> int:
    """
    Return the code point of a single UTF-8 encoded character.

    :raises ValueError: if *data* is malformed or does not contain exactly
                        one character
    """
    try:
        text = bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise ValueError('malformed UTF-8 sequence %r' % data) from e

    if len(text) != 1:
        raise ValueError('not a single UTF-8 encoded character: %r' % data)

    return ord(text)


@lru_cache(maxsize=CACHE_SIZE)
def lookup(code_point: int) -> CharProperties:
    """
    Return the Unicode properties of a *code_point*.

    Unassigned code points map to ``CharProperties(Other, Other)``.

    :raises ValueError: if the *code_point* is out of range
    """
    char = chr(CheckCodePoint(code_point))
    gcb = GCB_PATTERN.match(char)
    incb = INCB_PATTERN.match(char)
    return CharProperties(
        GCBProperty[gcb.lastgroup] if gcb else GCBProperty.Other,
        InCBProperty[incb.lastgroup] if incb else InCBProperty.Other,
    )


def lookup_char(char: str) -> CharProperties:
    """Return the Unicode properties of a single character."""
    return lookup(ord(char))


def lookup_u8char(data: bytes) -> CharProperties:
    """Return the Unicode properties of a single UTF-8 encoded character."""
    return lookup(DecodeU8Char(data))


def ParseUCD(lines, source='<lines>') -> iter:
    """
    Yield ``(start, end, fields)`` tuples from lines in the semicolon-separated
    UCD file format, skipping comments and empty lines.

    *end* is inclusive and *fields* holds the values after the code point
    (range) column, e.g. ``['InCB', 'Linker']``.

    :param lines: an iterable over the lines of a UCD file
    :param source: the name of the file, used in error messages
    :raises ValueError: if a line is malformed
    """
    for number, line in enumerate(lines, 1):
        data = line.split('#', 1)[0].strip()

        if not data:
            continue

        fields = [f.strip() for f in data.split(';')]

        if len(fields) < 2 or not all(fields):
            raise ValueError('%s:%d: malformed line %r' % (source, number, line))

        first, sep, last = fields[0].partition('..')

        try:
            start = int(first, 16)
            end = int(last, 16) if sep else start
        except ValueError:
            raise ValueError('%s:%d: illegal code points %r' %
                             (source, number, fields[0])) from None

        if not 0 <= start <= end <= MAX_CODE_POINT:
            raise ValueError('%s:%d: illegal range %r' % (source, number, fields[0]))

        yield start, end, fields[1:]


class Ranges:
    """
    Sorted, non-overlapping, inclusive code point ranges mapped to values,
    searched by bisection.
    """

    def __init__(self, entries, source='<ranges>'):
        """
        :param entries: an iterable over (start, end, value) tuples
        :param source: the name of the data source, used in error messages
        :raises ValueError: if two ranges overlap
        """
        self.starts = []
        self.ends = []
        self.values = []

        for start, end, value in sorted(entries, key=lambda e: e[0]):
            if self.ends and start <= self.ends[-1]:
                raise ValueError('%s: range %04X..%04X overlaps %04X..%04X' % (
                    source, start, end, self.starts[-1], self.ends[-1]
                ))

            self.starts.append(start)
            self.ends.append(end)
            self.values.append(value)

    def __len__(self):
        return len(self.starts)

    def get(self, code_point: int, default=None):
        """Return the value of the range containing *code_point*, or *default*."""
        idx = bisect_right(self.starts, code_point) - 1

        if idx >= 0 and code_point <= self.ends[idx]:
            return self.values[idx]

        return default


class RangeTable:
    """
    A classifier built from the Unicode Character Database files
    ``GraphemeBreakProperty.txt``, ``emoji-data.txt``, and
    ``DerivedCoreProperties.txt``.

    Only the ``Extended_Pictographic`` entries of the emoji data and the
    ``InCB`` entries of the derived core properties are used. Where a
    character has both a GCB value and Extended_Pictographic, the GCB value
    wins.
    """

    L = logging.getLogger("RangeTable")

    def __init__(self, grapheme_break=(), emoji_data=(), derived_core=(),
                 source='<table>'):
        """
        :param grapheme_break: lines in ``GraphemeBreakProperty.txt`` format
        :param emoji_data: lines in ``emoji-data.txt`` format
        :param derived_core: lines in ``DerivedCoreProperties.txt`` format
        :param source: the name of the data source, used in messages
        :raises ValueError: if a line is malformed, names an unknown
                            property value, or ranges overlap
        """
        self.source = source
        self.gcb = Ranges(self._gcbEntries(grapheme_break), source)
        self.pictographic = Ranges([
            (start, end, GCBProperty.ExtendedPictographic)
            for start, end, fields in ParseUCD(emoji_data, source)
            if fields[0] == EXTENDED_PICTOGRAPHIC
        ], source)
        self.incb = Ranges(self._incbEntries(derived_core), source)
        self.L.info("loaded %d GCB, %d %s, and %d InCB ranges from %s",
                    len(self.gcb), len(self.pictographic),
                    EXTENDED_PICTOGRAPHIC, len(self.incb), source)

    def _gcbEntries(self, lines) -> iter:
        for start, end, fields in ParseUCD(lines, self.source):
            if fields[0] not in GCB_NAMES:
                raise ValueError('%s: unknown %s value %r' % (
                    self.source, 'Grapheme_Cluster_Break', fields[0]
                ))

            yield start, end, GCB_NAMES[fields[0]]

    def _incbEntries(self, lines) -> iter:
        for start, end, fields in ParseUCD(lines, self.source):
            if fields[0] != INCB:
                continue

            if len(fields) != 2 or fields[1] not in INCB_NAMES:
                raise ValueError('%s: unknown %s value %r' % (
                    self.source, 'Indic_Conjunct_Break', ';'.join(fields[1:])
                ))

            yield start, end, INCB_NAMES[fields[1]]

    @classmethod
    def from_directory(cls, path: str) -> 'RangeTable':
        """
        Load the three UCD files from the directory at *path*.

        :raises FileNotFoundError: if a file is missing
        """
        cls.L.debug("loading UCD files from '%s'", path)

        with open(os.path.join(path, GRAPHEME_BREAK_FILE), encoding='utf-8') as gb, \
                open(os.path.join(path, EMOJI_DATA_FILE), encoding='utf-8') as emoji, \
                open(os.path.join(path, DERIVED_CORE_FILE), encoding='utf-8') as core:
            return cls(gb, emoji, core, source=path)

    @classmethod
    def from_environment(cls) -> 'RangeTable':
        """
        Load the UCD files from the directory named by the
        ``GRAPHEMACHINE_UCD_DIR`` environment variable.

        :raises KeyError: if the variable is not set
        """
        return cls.from_directory(os.environ[UCD_DIR_VARIABLE])

    def __call__(self, code_point: int) -> CharProperties:
        CheckCodePoint(code_point)
        gcb = self.gcb.get(code_point, GCBProperty.Other)

        if gcb == GCBProperty.Other:
            gcb = self.pictographic.get(code_point, GCBProperty.Other)

        return CharProperties(gcb, self.incb.get(code_point, InCBProperty.Other))

    def __repr__(self):
        return 'RangeTable<source={}>'.format(self.source)


class MappingTable:
    """
    A hand-built classifier for a few characters; all other characters
    map to *default*.
    """

    def __init__(self, mapping, default=CharProperties.Other):
        """
        :param mapping: a dictionary of characters or code points to
                        :class:`.CharProperties`
        :param default: the properties of characters not in the mapping
        """
        self.mapping = {
            ord(key) if isinstance(key, str) else CheckCodePoint(key): value
            for key, value in mapping.items()
        }
        self.default = default

    def __call__(self, code_point: int) -> CharProperties:
        return self.mapping.get(CheckCodePoint(code_point), self.default)

    def __repr__(self):
        return 'MappingTable<{} characters>'.format(len(self.mapping))
