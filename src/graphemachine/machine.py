"""
.. py:module:: graphemachine.machine
   :synopsis: A streaming grapheme cluster segmenter and text helpers built on it.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
from enum import Enum

from graphemachine.properties import CharProperties
from graphemachine.state import State
from graphemachine.table import DecodeU8Char, lookup


class ClusterAction(Enum):
    """
    What to do with a new character after presenting it to a
    :class:`GraphemeMachine`.
    """

    Continue = 0
    "Treat the new character as an extension of the current cluster."
    Split = 1
    """Treat the current cluster as complete and begin a new one that
    initially consists only of the new character."""


class GraphemeMachine:
    """
    A finite state machine for detecting grapheme cluster boundaries in a
    stream of characters.

    The machine holds no text at all: only the properties of the most
    recently presented character and the current :class:`.State`. Feed it
    characters one at a time, and for each it tells whether that character
    begins a new grapheme cluster or extends the current one. Any buffering
    of cluster contents is left to the caller.

    Instances are independent of each other; use one per stream.
    """

    L = logging.getLogger("GraphemeMachine")

    def __init__(self, classifier=lookup):
        """
        :param classifier: a callable that returns the
                           :class:`.CharProperties` of a code point;
                           defaults to the Unicode tables
        """
        self.classifier = classifier
        self.start()

    @property
    def state(self) -> State:
        """The current :class:`.State`."""
        return self._state

    @property
    def prev(self) -> CharProperties:
        """The properties of the last character, or ``None`` at the start."""
        return self._prev

    def start(self):
        """Put the machine into the "start of input" state."""
        self._state = State.Base
        self._prev = None

    def next_char_properties(self, next: CharProperties) -> ClusterAction:
        """
        Advance the machine with the properties of the next character.

        At the start of input the result is always
        :attr:`ClusterAction.Split`, because there is no current cluster to
        extend.

        :param next: the properties of the new character
        :return: the action to take at the boundary before that character
        """
        self.L.debug("from %r to %r in %s", self._prev, next, self._state)
        boundary, self._state = self._state.transition(self._prev, next)
        self._prev = next
        return ClusterAction.Split if boundary else ClusterAction.Continue

    def next_code_point(self, code_point: int) -> ClusterAction:
        """Classify the *code_point* and advance the machine with it."""
        return self.next_char_properties(self.classifier(code_point))

    def next_char(self, char: str) -> ClusterAction:
        """
        Classify a single character and advance the machine with it.

        :raises TypeError: if *char* is not exactly one character
        """
        return self.next_code_point(ord(char))

    def next_u8char(self, data: bytes) -> ClusterAction:
        """
        Classify a single UTF-8 encoded character and advance the machine
        with it.

        :raises ValueError: if *data* is not exactly one well-formed UTF-8
                            encoded character
        """
        return self.next_code_point(DecodeU8Char(data))

    def step(self, item) -> ClusterAction:
        """
        Advance the machine with *item*, which may be
        :class:`.CharProperties`, a code point, a single character, or a
        single UTF-8 encoded character.

        :raises TypeError: for any other kind of *item*
        """
        if isinstance(item, CharProperties):
            return self.next_char_properties(item)
        elif isinstance(item, str):
            return self.next_char(item)
        elif isinstance(item, (bytes, bytearray, memoryview)):
            return self.next_u8char(item)
        elif isinstance(item, int) and not isinstance(item, bool):
            return self.next_code_point(item)
        else:
            raise TypeError('cannot segment %s %r' % (type(item).__name__, item))

    def end_of_input(self) -> ClusterAction:
        """
        Tell the machine that the input has ended.

        This resets the machine to the "start of input" state, so no
        character submitted afterwards can continue the current cluster.
        It can also be used wherever the caller knows of a non-text
        boundary in the stream, like a markup tag between two runs of
        literal text.

        :return: always :attr:`ClusterAction.Split`, marking the end of the
                 final cluster
        """
        self.start()
        return ClusterAction.Split

    def __repr__(self):
        return 'GraphemeMachine<state={}, prev={!r}>'.format(self._state.name, self._prev)


def CodePointIter(string: str) -> iter:
    """
    Yield (offset, code point) tuples for a *string*, one per (real - wrt.
    Surrogate Pairs) character in the *string*.

    :raises UnicodeError: if a high surrogate is not followed by a low one
    """
    char_iter = enumerate(string)

    for offset, c in char_iter:
        if '\ud800' <= c < '\udc00':
            # convert the surrogate pair to one single wide character
            _, l = next(char_iter, (None, ''))

            if not '\udc00' <= l < '\ue000':
                raise UnicodeError('low surrogate character missing at %d' % (offset + 1))

            yield offset, 0x10000 + (ord(c) - 0xD800) * 0x400 + (ord(l) - 0xDC00)
        else:
            yield offset, ord(c)


def iter_offsets(text: str, classifier=lookup) -> iter:
    """
    Yield the (start, end) offsets of the grapheme clusters in *text*.

    :param text: the string to segment
    :param classifier: the character property classifier to use
    """
    machine = GraphemeMachine(classifier)
    start = 0

    for end, code_point in CodePointIter(text):
        if machine.next_code_point(code_point) is ClusterAction.Split and end:
            yield start, end
            start = end

    if text:
        yield start, len(text)


def graphemes(text: str, classifier=lookup) -> iter:
    """Yield the grapheme clusters of *text* as strings."""
    for start, end in iter_offsets(text, classifier):
        yield text[start:end]


def graphemes_u8(data: bytes, classifier=lookup) -> iter:
    """
    Yield the grapheme clusters of a UTF-8 encoded buffer as bytes.

    :raises UnicodeDecodeError: if *data* is not well-formed UTF-8
    """
    machine = GraphemeMachine(classifier)
    cluster = bytearray()

    for char in bytes(data).decode('utf-8'):
        if machine.next_char(char) is ClusterAction.Split and cluster:
            yield bytes(cluster)
            cluster.clear()

        cluster.extend(char.encode('utf-8'))

    if cluster:
        yield bytes(cluster)


class GraphemeTokenizer:
    """
    A tokenizer that produces one token per grapheme cluster.

    Tokens are (start, end, tag, morphology) tuples: the tag is the GCB
    property name of the first character in the cluster and the morphology
    holds one hex digit per code point, its GCB property value.
    """

    def __init__(self, classifier=lookup):
        self.classifier = classifier

    def tag(self, text: str) -> iter:
        """
        Tokenize the given *text* by yielding offset tags.

        :param text: The string to tokenize.
        :return: An iterator over (start, end, tag, morphology) tag tuples.
        """
        for start, end in iter_offsets(text, self.classifier):
            gcbs = [self.classifier(cp).gcb() for _, cp in CodePointIter(text[start:end])]
            yield start, end, gcbs[0].name, ''.join('%x' % gcb for gcb in gcbs)

    def split(self, text: str) -> list:
        """Return the grapheme clusters of *text* as a list of strings."""
        return list(graphemes(text, self.classifier))
