"""
.. py:module:: graphemachine.properties
   :synopsis: The two Unicode character properties used for grapheme cluster segmentation.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from enum import IntEnum
from operator import itemgetter


class GCBProperty(IntEnum):
    """
    **Grapheme_Cluster_Break** property values, from UAX #29 section 3.1.

    ``ExtendedPictographic`` is derived from the Emoji character tables, but
    UAX #29 treats it as mutually exclusive with the grapheme cluster break
    values, so it is included here. ``Other`` is the Unicode default value,
    meaning none of the other values apply.

    The values occupy the low nybble of a packed :class:`CharProperties`.
    """

    Other = 0x00
    CR = 0x01
    Control = 0x02
    Extend = 0x03
    ExtendedPictographic = 0x04
    L = 0x05
    LF = 0x06
    LV = 0x07
    LVT = 0x08
    Prepend = 0x09
    RegionalIndicator = 0x0a
    SpacingMark = 0x0b
    T = 0x0c
    V = 0x0d
    ZWJ = 0x0e


class InCBProperty(IntEnum):
    """
    **Indic_Conjunct_Break** property values, as derived in
    DerivedCoreProperties.txt and used by rule GB9c.

    ``Other`` stands for the Unicode value "None". The values occupy bits
    four and five of a packed :class:`CharProperties`.
    """

    Other = 0x00
    Consonant = 0x10
    Extend = 0x20
    Linker = 0x30


CONTROLS = frozenset({GCBProperty.CR, GCBProperty.LF, GCBProperty.Control})
"""
The GCB values that activate rules GB4 and GB5.
"""

GCB_MASK = 0x0f
INCB_MASK = 0x30


class CharProperties(tuple):
    """
    An immutable (GCB, InCB) tuple describing one character.

    Both axes are independent: a character can be, e.g., GCB ``Extend``
    and InCB ``Linker`` at the same time. The tuple can be packed into a
    single byte (:attr:`raw`) and restored with :meth:`from_raw`.
    """

    __slots__ = ()

    def __new__(cls, gcb=GCBProperty.Other, incb=InCBProperty.Other):
        return tuple.__new__(cls, (GCBProperty(gcb), InCBProperty(incb)))

    @classmethod
    def from_raw(cls, raw: int) -> 'CharProperties':
        """
        Unpack a byte created by :attr:`raw`.

        :param raw: the packed byte
        :return: the property tuple
        :raises ValueError: if *raw* does not encode a valid pair
        """
        if raw & ~(GCB_MASK | INCB_MASK):
            raise ValueError('illegal raw properties 0x%02x' % raw)

        return cls(raw & GCB_MASK, raw & INCB_MASK)

    @classmethod
    def for_code_point(cls, code_point: int) -> 'CharProperties':
        """Look up the properties of a code point in the default table."""
        from graphemachine.table import lookup
        return lookup(code_point)

    @classmethod
    def for_char(cls, char: str) -> 'CharProperties':
        """Look up the properties of a single character in the default table."""
        from graphemachine.table import lookup_char
        return lookup_char(char)

    @classmethod
    def for_u8char(cls, data: bytes) -> 'CharProperties':
        """
        Look up the properties of a single UTF-8 encoded character in the
        default table.

        :raises ValueError: if *data* is not exactly one well-formed UTF-8
                            encoded character
        """
        from graphemachine.table import lookup_u8char
        return lookup_u8char(data)

    _gcb = property(itemgetter(0))
    _incb = property(itemgetter(1))

    def gcb(self) -> GCBProperty:
        """Return the :class:`GCBProperty` of this tuple."""
        return self._gcb

    def incb(self) -> InCBProperty:
        """Return the :class:`InCBProperty` of this tuple."""
        return self._incb

    def is_any_control(self) -> bool:
        """
        ``True`` if the GCB value is ``CR``, ``LF``, or ``Control``, the
        characters rules GB4 and GB5 break around.
        """
        return self._gcb in CONTROLS

    @property
    def raw(self) -> int:
        """The tuple packed into a single byte."""
        return self._gcb | self._incb

    def __repr__(self) -> str:
        if self._incb == InCBProperty.Other:
            return 'CharProperties(%s)' % self._gcb.name

        return 'CharProperties(%s, %s)' % (self._gcb.name, self._incb.name)


# GCB-only shorthands, mostly to build category sequences by hand
CharProperties.Other = CharProperties(GCBProperty.Other)
CharProperties.CR = CharProperties(GCBProperty.CR)
CharProperties.Control = CharProperties(GCBProperty.Control)
CharProperties.Extend = CharProperties(GCBProperty.Extend)
CharProperties.ExtendedPictographic = CharProperties(GCBProperty.ExtendedPictographic)
CharProperties.L = CharProperties(GCBProperty.L)
CharProperties.LF = CharProperties(GCBProperty.LF)
CharProperties.LV = CharProperties(GCBProperty.LV)
CharProperties.LVT = CharProperties(GCBProperty.LVT)
CharProperties.Prepend = CharProperties(GCBProperty.Prepend)
CharProperties.RegionalIndicator = CharProperties(GCBProperty.RegionalIndicator)
CharProperties.SpacingMark = CharProperties(GCBProperty.SpacingMark)
CharProperties.T = CharProperties(GCBProperty.T)
CharProperties.V = CharProperties(GCBProperty.V)
CharProperties.ZWJ = CharProperties(GCBProperty.ZWJ)
