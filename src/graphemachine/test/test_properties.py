from unittest import main, TestCase

from graphemachine.properties import CharProperties, GCBProperty, InCBProperty


class CharPropertiesTests(TestCase):

    def testDefault(self):
        self.assertEqual(CharProperties(), CharProperties.Other)
        self.assertEqual(CharProperties().gcb(), GCBProperty.Other)
        self.assertEqual(CharProperties().incb(), InCBProperty.Other)

    def testAccessors(self):
        p = CharProperties(GCBProperty.Extend, InCBProperty.Linker)
        self.assertEqual(p.gcb(), GCBProperty.Extend)
        self.assertEqual(p.incb(), InCBProperty.Linker)

    def testShorthands(self):
        for gcb in GCBProperty:
            p = getattr(CharProperties, gcb.name)
            self.assertEqual(p.gcb(), gcb)
            self.assertEqual(p.incb(), InCBProperty.Other)

    def testIsAnyControl(self):
        controls = {GCBProperty.CR, GCBProperty.LF, GCBProperty.Control}

        for gcb in GCBProperty:
            self.assertEqual(CharProperties(gcb).is_any_control(), gcb in controls, gcb)

    def testAxesAreIndependent(self):
        p = CharProperties(GCBProperty.ZWJ, InCBProperty.Extend)
        self.assertNotEqual(p, CharProperties.ZWJ)
        self.assertEqual(p.gcb(), CharProperties.ZWJ.gcb())

    def testValueSemantics(self):
        a = CharProperties(GCBProperty.Other, InCBProperty.Consonant)
        b = CharProperties(0x00, 0x10)
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)
        self.assertRaises(AttributeError, setattr, a, 'gcb', GCBProperty.CR)

    def testRaw(self):
        p = CharProperties(GCBProperty.Extend, InCBProperty.Linker)
        self.assertEqual(p.raw, 0x33)
        self.assertEqual(CharProperties.CR.raw, 0x01)
        self.assertEqual(CharProperties(GCBProperty.Other, InCBProperty.Consonant).raw, 0x10)

    def testFromRaw(self):
        for gcb in GCBProperty:
            for incb in InCBProperty:
                p = CharProperties(gcb, incb)
                self.assertEqual(CharProperties.from_raw(p.raw), p)

    def testIllegalRaw(self):
        self.assertRaises(ValueError, CharProperties.from_raw, 0x0f)
        self.assertRaises(ValueError, CharProperties.from_raw, 0x40)
        self.assertRaises(ValueError, CharProperties.from_raw, 0x100)

    def testIllegalValues(self):
        self.assertRaises(ValueError, CharProperties, 0x0f)
        self.assertRaises(ValueError, CharProperties, GCBProperty.CR, 0x01)

    def testRepr(self):
        self.assertEqual(repr(CharProperties.LF), 'CharProperties(LF)')
        self.assertEqual(repr(CharProperties(GCBProperty.Extend, InCBProperty.Linker)),
                         'CharProperties(Extend, Linker)')


if __name__ == '__main__':
    main()
