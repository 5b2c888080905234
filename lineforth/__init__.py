"""
LineForth - Line-oriented interpreter for a minimal Forth
Modular package implementation

Usage:
    from lineforth import Forth
    forth = Forth()
    forth.execute("3 4 + .")

Compatible with any Python 3.x environment, no external dependencies.
"""

from .core import (ForthError, NotANumber, NumberTooLarge, StackUnderflow,
                   StackOverflow, DivisionByZero, WordTooLong, LineTooLong)
from .stack_ops import Stack
from .dictionary import DICTIONARY, lookup
from .io_words import LineReader
from .repl import EvalState, Forth

__all__ = [
    'Forth', 'EvalState', 'Stack', 'LineReader', 'DICTIONARY', 'lookup',
    'ForthError', 'NotANumber', 'NumberTooLarge', 'StackUnderflow',
    'StackOverflow', 'DivisionByZero', 'WordTooLong', 'LineTooLong',
]
__version__ = '1.0.0'
