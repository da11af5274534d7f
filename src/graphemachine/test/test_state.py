from unittest import main, TestCase

from graphemachine.properties import CharProperties, GCBProperty, InCBProperty
from graphemachine.state import State, transition

P = CharProperties
Consonant = P(GCBProperty.Other, InCBProperty.Consonant)
Linker = P(GCBProperty.Extend, InCBProperty.Linker)
InCBExtend = P(GCBProperty.Extend, InCBProperty.Extend)


def transitions(props):
    """Run the state machine over *props* from the start of the input."""
    state = State.Base
    prev = None
    result = []

    for next in props:
        boundary, state = state.transition(prev, next)
        result.append((boundary, next, state))
        prev = next

    return result


def boundaries(props):
    return [boundary for boundary, _, _ in transitions(props)]


class TransitionTests(TestCase):

    def testStartOfInput(self):
        for gcb in GCBProperty:
            boundary, _ = State.Base.transition(None, P(gcb))
            self.assertTrue(boundary, gcb)

    def testTransitionFunction(self):
        self.assertEqual(transition(State.Base, P.CR, P.LF), (False, State.Base))
        self.assertEqual(transition(State.Base, None, P.RegionalIndicator),
                         (True, State.AwaitEmojiFlag))

    def testUnclassifiedBreaks(self):
        self.assertEqual(State.Base.transition(P.Other, P.Other), (True, State.Base))

    def testCRLF(self):
        self.assertEqual(transitions([P.Other, P.CR, P.LF, P.Other]), [
            (True, P.Other, State.Base),
            (True, P.CR, State.Base),
            (False, P.LF, State.Base),
            (True, P.Other, State.Base),
        ])

    def testCRFillerLF(self):
        self.assertEqual(boundaries([P.CR, P.Other, P.LF]), [True, True, True])
        self.assertEqual(boundaries([P.LF, P.CR]), [True, True])

    def testControlsBeatExtending(self):
        self.assertEqual(boundaries([P.CR, P.Extend]), [True, True])
        self.assertEqual(boundaries([P.Control, P.ZWJ]), [True, True])
        self.assertEqual(boundaries([P.Prepend, P.LF]), [True, True])
        self.assertEqual(boundaries([P.Prepend, P.Control]), [True, True])

    def testHangul(self):
        self.assertEqual(boundaries([P.L, P.L, P.V, P.T, P.T]),
                         [True, False, False, False, False])
        self.assertEqual(boundaries([P.L, P.LV, P.T]), [True, False, False])
        self.assertEqual(boundaries([P.L, P.LVT, P.T]), [True, False, False])
        self.assertEqual(boundaries([P.LV, P.V]), [True, False])
        self.assertEqual(boundaries([P.T, P.L]), [True, True])
        self.assertEqual(boundaries([P.V, P.L]), [True, True])
        self.assertEqual(boundaries([P.LVT, P.V]), [True, True])

    def testExtending(self):
        self.assertEqual(boundaries([P.Other, P.Extend, P.ZWJ, P.SpacingMark]),
                         [True, False, False, False])

    def testPrepend(self):
        self.assertEqual(boundaries([P.Prepend, P.Other]), [True, False])
        self.assertEqual(boundaries([P.Other, P.Prepend]), [True, True])

    def testEmojiFlags(self):
        RI = P.RegionalIndicator
        self.assertEqual(transitions([
            P.Other, RI, P.Other, RI, RI, P.Other, RI, RI, RI,
            P.Other, RI, RI, RI, RI, P.Other,
        ]), [
            (True, P.Other, State.Base),
            (True, RI, State.AwaitEmojiFlag),
            (True, P.Other, State.Base),
            (True, RI, State.AwaitEmojiFlag),
            (False, RI, State.Base),
            (True, P.Other, State.Base),
            (True, RI, State.AwaitEmojiFlag),
            (False, RI, State.Base),
            (True, RI, State.AwaitEmojiFlag),
            (True, P.Other, State.Base),
            (True, RI, State.AwaitEmojiFlag),
            (False, RI, State.Base),
            (True, RI, State.AwaitEmojiFlag),
            (False, RI, State.Base),
            (True, P.Other, State.Base),
        ])

    def testFlagPairsBindLeftToRight(self):
        RI = P.RegionalIndicator
        self.assertEqual(boundaries([RI, RI, RI, RI]), [True, False, True, False])

    def testEmojiExtend(self):
        EP = P.ExtendedPictographic
        self.assertEqual(transitions([
            P.Other,
            EP, P.Other,
            EP, EP, P.Other,
            EP, P.ZWJ, EP, P.Other,
            EP, P.Extend, EP, P.Other,
            EP, P.Extend, P.ZWJ, EP, P.Other,
            EP, P.Extend, P.Extend, P.ZWJ, EP, P.Other,
            EP, P.Extend, P.Extend, P.ZWJ, P.Extend, EP, P.Other,
        ]), [
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (True, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (False, P.ZWJ, State.GB11AfterZWJ),
            (False, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (False, P.Extend, State.GB11BeforeZWJ),
            (True, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (False, P.Extend, State.GB11BeforeZWJ),
            (False, P.ZWJ, State.GB11AfterZWJ),
            (False, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (False, P.Extend, State.GB11BeforeZWJ),
            (False, P.Extend, State.GB11BeforeZWJ),
            (False, P.ZWJ, State.GB11AfterZWJ),
            (False, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
            #
            (True, EP, State.GB11BeforeZWJ),
            (False, P.Extend, State.GB11BeforeZWJ),
            (False, P.Extend, State.GB11BeforeZWJ),
            (False, P.ZWJ, State.GB11AfterZWJ),
            (False, P.Extend, State.Base),
            (True, EP, State.GB11BeforeZWJ),
            (True, P.Other, State.Base),
        ])

    def testZWJSequenceContinues(self):
        EP = P.ExtendedPictographic
        self.assertEqual(boundaries([EP, P.Extend, P.Extend, P.Extend, P.ZWJ, EP]),
                         [True, False, False, False, False, False])
        self.assertEqual(boundaries([EP, P.ZWJ, EP, P.ZWJ, EP]),
                         [True, False, False, False, False])

    def testZWJWithoutPictographBreaks(self):
        EP = P.ExtendedPictographic
        self.assertEqual(boundaries([P.Other, P.ZWJ, EP]), [True, False, True])

    def testConjunctWithLinker(self):
        self.assertEqual(transitions([Consonant, Linker, Consonant]), [
            (True, Consonant, State.GB9cConsonant),
            (False, Linker, State.GB9cLinker),
            (False, Consonant, State.GB9cConsonant),
        ])

    def testConjunctWithoutLinker(self):
        self.assertEqual(boundaries([Consonant, InCBExtend, Consonant]), [True, False, True])

    def testConjunctLinkerAndExtendInAnyOrder(self):
        self.assertEqual(transitions([
            Consonant, InCBExtend, Linker, InCBExtend, Linker, Consonant,
        ]), [
            (True, Consonant, State.GB9cConsonant),
            (False, InCBExtend, State.GB9cConsonant),
            (False, Linker, State.GB9cLinker),
            (False, InCBExtend, State.GB9cLinker),
            (False, Linker, State.GB9cLinker),
            (False, Consonant, State.GB9cConsonant),
        ])

    def testConjunctChains(self):
        self.assertEqual(boundaries([Consonant, Linker, Consonant, Linker, Consonant]),
                         [True, False, False, False, False])

    def testConjunctInterrupted(self):
        self.assertEqual(transitions([Consonant, Linker, P.Other, Consonant]), [
            (True, Consonant, State.GB9cConsonant),
            (False, Linker, State.GB9cLinker),
            (True, P.Other, State.Base),
            (True, Consonant, State.GB9cConsonant),
        ])

    def testLinkerWithoutConsonant(self):
        self.assertEqual(boundaries([P.Other, Linker, Consonant]), [True, False, True])

    def testPictographAbandonsConjunct(self):
        EP = P.ExtendedPictographic
        self.assertEqual(transitions([Consonant, Linker, EP, P.ZWJ, EP]), [
            (True, Consonant, State.GB9cConsonant),
            (False, Linker, State.GB9cLinker),
            (True, EP, State.GB11BeforeZWJ),
            (False, P.ZWJ, State.GB11AfterZWJ),
            (False, EP, State.GB11BeforeZWJ),
        ])

    def testConsonantAbandonsPictograph(self):
        EP = P.ExtendedPictographic
        self.assertEqual(transitions([EP, P.ZWJ, Consonant]), [
            (True, EP, State.GB11BeforeZWJ),
            (False, P.ZWJ, State.GB11AfterZWJ),
            (True, Consonant, State.GB9cConsonant),
        ])

    def testZWJExtendsConjunct(self):
        zwj = P(GCBProperty.ZWJ, InCBProperty.Extend)
        self.assertEqual(transitions([Consonant, Linker, zwj, Consonant]), [
            (True, Consonant, State.GB9cConsonant),
            (False, Linker, State.GB9cLinker),
            (False, zwj, State.GB9cLinker),
            (False, Consonant, State.GB9cConsonant),
        ])


class NextStateTests(TestCase):

    def testOverrides(self):
        for state in State:
            self.assertEqual(state.next_state(P.ExtendedPictographic), State.GB11BeforeZWJ)
            self.assertEqual(state.next_state(Consonant), State.GB9cConsonant)

    def testSingleStepStatesResolve(self):
        for props in (P.Other, P.RegionalIndicator, P.ZWJ, P.Extend, Linker):
            self.assertEqual(State.AwaitEmojiFlag.next_state(props), State.Base)
            self.assertEqual(State.GB11AfterZWJ.next_state(props), State.Base)

    def testBase(self):
        self.assertEqual(State.Base.next_state(P.RegionalIndicator), State.AwaitEmojiFlag)
        self.assertEqual(State.Base.next_state(Linker), State.Base)
        self.assertEqual(State.Base.next_state(P.ZWJ), State.Base)

    def testGB11BeforeZWJ(self):
        self.assertEqual(State.GB11BeforeZWJ.next_state(P.ZWJ), State.GB11AfterZWJ)
        self.assertEqual(State.GB11BeforeZWJ.next_state(P.Extend), State.GB11BeforeZWJ)
        self.assertEqual(State.GB11BeforeZWJ.next_state(P.SpacingMark), State.Base)

    def testGB9c(self):
        self.assertEqual(State.GB9cConsonant.next_state(Linker), State.GB9cLinker)
        self.assertEqual(State.GB9cConsonant.next_state(InCBExtend), State.GB9cConsonant)
        self.assertEqual(State.GB9cConsonant.next_state(P.Extend), State.Base)
        self.assertEqual(State.GB9cLinker.next_state(Linker), State.GB9cLinker)
        self.assertEqual(State.GB9cLinker.next_state(InCBExtend), State.GB9cLinker)
        self.assertEqual(State.GB9cLinker.next_state(P.Other), State.Base)


if __name__ == '__main__':
    main()
