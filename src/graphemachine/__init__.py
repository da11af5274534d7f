"""
.. py:module:: graphemachine
   :synopsis: Streaming Unicode grapheme cluster segmentation (UAX #29).

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from graphemachine.properties import CharProperties, GCBProperty, InCBProperty
from graphemachine.state import State
from graphemachine.machine import ClusterAction, GraphemeMachine, GraphemeTokenizer, \
    graphemes, graphemes_u8, iter_offsets
from graphemachine.table import MappingTable, RangeTable, UNICODE_VERSION, lookup

__version__ = '1.0.0'

__all__ = [
    'CharProperties', 'GCBProperty', 'InCBProperty', 'State',
    'ClusterAction', 'GraphemeMachine', 'GraphemeTokenizer',
    'graphemes', 'graphemes_u8', 'iter_offsets',
    'MappingTable', 'RangeTable', 'UNICODE_VERSION', 'lookup',
]
