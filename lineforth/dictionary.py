"""
LineForth Dictionary - Static table of built-in words
"""

from collections import namedtuple
from enum import Enum
from types import MappingProxyType

from .arithmetic import BinOp


class Op(Enum):
    """The fixed set of built-in operations"""
    BINOP = 'binop'
    PRINT = 'print'
    DUP = 'dup'
    DROP = 'drop'
    SWAP = 'swap'
    SHOW = 'show'


Entry = namedtuple('Entry', ['word', 'op', 'tag'])


def _build(*entries):
    return MappingProxyType({e.word: e for e in entries})


DICTIONARY = _build(
    Entry('+', Op.BINOP, BinOp.ADD),
    Entry('-', Op.BINOP, BinOp.SUBTRACT),
    Entry('*', Op.BINOP, BinOp.MULTIPLY),
    Entry('/', Op.BINOP, BinOp.DIVIDE),
    Entry('mod', Op.BINOP, BinOp.MOD),
    Entry('and', Op.BINOP, BinOp.AND),
    Entry('or', Op.BINOP, BinOp.OR),
    Entry('<<', Op.BINOP, BinOp.LSHIFT),
    Entry('>>', Op.BINOP, BinOp.RSHIFT),
    Entry('.', Op.PRINT, None),
    Entry('print', Op.PRINT, None),
    Entry('dup', Op.DUP, None),
    Entry('drop', Op.DROP, None),
    Entry('swap', Op.SWAP, None),
    Entry('.s', Op.SHOW, None),
)


def lookup(word):
    """Return the Entry for word, or None. Matching is case-sensitive."""
    return DICTIONARY.get(word)
