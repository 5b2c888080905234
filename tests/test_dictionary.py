import unittest

from lineforth.arithmetic import BinOp
from lineforth.dictionary import DICTIONARY, Op, lookup


class TestDictionary(unittest.TestCase):

    def test_builtin_words(self):
        self.assertEqual(sorted(DICTIONARY), sorted([
            '+', '-', '*', '/', 'mod', 'and', 'or', '<<', '>>',
            '.', 'print', 'dup', 'drop', 'swap', '.s',
        ]))

    def test_binary_words_carry_their_tag(self):
        self.assertEqual(lookup('mod').op, Op.BINOP)
        self.assertIs(lookup('mod').tag, BinOp.MOD)
        self.assertIs(lookup('<<').tag, BinOp.LSHIFT)

    def test_print_aliases(self):
        self.assertEqual(lookup('.').op, lookup('print').op)

    def test_case_sensitive(self):
        self.assertIsNone(lookup('DUP'))
        self.assertIsNone(lookup('Mod'))

    def test_unknown(self):
        self.assertIsNone(lookup('42'))
        self.assertIsNone(lookup('\\'))

    def test_immutable(self):
        with self.assertRaises(TypeError):
            DICTIONARY['rot'] = DICTIONARY['swap']


if __name__ == '__main__':
    unittest.main()
