"""
.. py:module:: graphemachine.state
   :synopsis: The finite state machine deciding grapheme cluster boundaries.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from enum import Enum

from graphemachine.properties import GCBProperty, InCBProperty

CR = GCBProperty.CR
LF = GCBProperty.LF
L = GCBProperty.L
V = GCBProperty.V
T = GCBProperty.T
LV = GCBProperty.LV
LVT = GCBProperty.LVT
ZWJ = GCBProperty.ZWJ

# GB6 - GB8
AFTER_L = frozenset({L, V, LV, LVT})
BEFORE_V_OR_T = frozenset({LV, V})
AFTER_LV_OR_V = frozenset({V, T})
BEFORE_T = frozenset({LVT, T})

# GB9
EXTENDING = frozenset({GCBProperty.Extend, ZWJ})

# GB9c
INCB_JOINING = frozenset({InCBProperty.Linker, InCBProperty.Extend})


class State(Enum):
    """
    The states the machine transitions through while detecting grapheme
    cluster boundaries.

    A state summarizes the unbounded sequence of characters before the
    current one, as far as the multi-character rules (GB9c, GB11, GB12,
    and GB13) need to know about it, so that arbitrarily long clusters can
    be detected with a fixed amount of memory.
    """

    Base = 0
    """
    At the beginning of the text, or where the following should be treated
    as if it were.
    """

    AwaitEmojiFlag = 1
    """
    The previous character was a RegionalIndicator but its predecessor was
    not; another RegionalIndicator completes an emoji flag (GB12, GB13).
    """

    GB11BeforeZWJ = 2
    """
    The characters so far matched ``\\p{Extended_Pictographic} Extend*``.
    """

    GB11AfterZWJ = 3
    """
    The previous character was a ZWJ that arrived in
    :attr:`GB11BeforeZWJ`, so GB11 is active.
    """

    GB9cConsonant = 4
    """
    The characters so far matched ``\\p{InCB=Consonant} \\p{InCB=Extend}*``
    without any Linker.
    """

    GB9cLinker = 5
    """
    As :attr:`GB9cConsonant`, but with at least one ``\\p{InCB=Linker}``
    among the Extend characters, in any order.
    """

    def transition(self, prev, next) -> tuple:
        """
        Return whether there is a grapheme cluster boundary between two
        characters with the *prev* and *next* properties in this state,
        together with the state to use for the next transition.

        The rules are evaluated in UAX #29 order and the first matching
        rule decides. Correct use requires that the *prev* of one call is
        the *next* of the call that produced this state; otherwise the
        results are unspecified.

        :param prev: the :class:`.CharProperties` of the previous character,
                     or ``None`` at the start of the input
        :param next: the :class:`.CharProperties` of the new character
        :return: a (boundary, next state) tuple
        """
        next_state = self.next_state(next)

        # GB1: break at the start of the text
        if prev is None:
            return True, next_state

        before = prev.gcb()
        after = next.gcb()

        # GB3: do not break between a CR and LF...
        if before == CR and after == LF:
            return False, next_state
        # GB4 and GB5: ...otherwise, break before and after controls
        if prev.is_any_control() or next.is_any_control():
            return True, next_state
        # GB6 - GB8: do not break Hangul syllable sequences
        if before == L and after in AFTER_L:
            return False, next_state
        if before in BEFORE_V_OR_T and after in AFTER_LV_OR_V:
            return False, next_state
        if before in BEFORE_T and after == T:
            return False, next_state
        # GB9: do not break before extending characters or ZWJ
        if after in EXTENDING:
            return False, next_state
        # GB9a: do not break before SpacingMarks...
        if after == GCBProperty.SpacingMark:
            return False, next_state
        # GB9b: ...or after Prepend characters
        if before == GCBProperty.Prepend:
            return False, next_state
        # GB9c: do not break within Indic conjuncts linked by InCB=Linker
        if self is State.GB9cLinker and prev.incb() in INCB_JOINING and \
           next.incb() == InCBProperty.Consonant:
            return False, next_state
        # GB11: do not break within emoji ZWJ sequences
        if self is State.GB11AfterZWJ and before == ZWJ and \
           after == GCBProperty.ExtendedPictographic:
            return False, next_state
        # GB12 and GB13: do not break within emoji flag sequences
        if self is State.AwaitEmojiFlag and \
           before == GCBProperty.RegionalIndicator and \
           after == GCBProperty.RegionalIndicator:
            return False, next_state

        # GB999: otherwise, break everywhere
        return True, next_state

    def next_state(self, next) -> 'State':
        """
        Return the state the machine moves to when the character with the
        *next* properties arrives.
        """
        gcb = next.gcb()
        incb = next.incb()

        # these two patterns start regardless of what precedes them,
        # abandoning any pattern in progress
        if gcb == GCBProperty.ExtendedPictographic:
            return State.GB11BeforeZWJ
        if incb == InCBProperty.Consonant:
            return State.GB9cConsonant

        if self is State.Base:
            if gcb == GCBProperty.RegionalIndicator:
                return State.AwaitEmojiFlag
        elif self is State.GB11BeforeZWJ:
            if gcb == ZWJ:
                return State.GB11AfterZWJ
            elif gcb == GCBProperty.Extend:
                return State.GB11BeforeZWJ
        elif self is State.GB9cConsonant:
            if incb == InCBProperty.Linker:
                return State.GB9cLinker
            elif incb == InCBProperty.Extend:
                return State.GB9cConsonant
        elif self is State.GB9cLinker:
            if incb in INCB_JOINING:
                return State.GB9cLinker

        # AwaitEmojiFlag and GB11AfterZWJ always resolve after one character
        return State.Base


transition = State.transition
"""
``transition(state, prev, next)``: the boundary decision as a plain function.
"""
