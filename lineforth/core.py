"""
LineForth Core - Fundamental infrastructure
- Bounds and cell width
- Error classes
- Tokenizer (word boundary detection)
- Literal parser
"""

import re
from collections import namedtuple


MAX_WORD_SIZE = 32
MAX_LINE_SIZE = 256
MAX_STACK_SIZE = 1024

CELL_BITS = 64
CELL_MASK = (1 << CELL_BITS) - 1
CELL_MAX = (1 << (CELL_BITS - 1)) - 1
CELL_MIN = -(1 << (CELL_BITS - 1))
CELL_DIGITS = len(str(CELL_MAX))

COMMENT = '\\'
WHITESPACE = ' \t\n\v\f\r'


class ForthError(Exception):
    """Base class for errors signalled while evaluating a word"""
    label = 'Error'

    def __init__(self, token=None):
        self.token = token
        if token is None:
            super().__init__(self.label)
        else:
            super().__init__(f"{self.label}: '{token}'")


class NotANumber(ForthError):
    label = 'Not a number'


class NumberTooLarge(ForthError):
    label = 'Number too big'


class StackUnderflow(ForthError):
    label = 'Stack underflow'


class StackOverflow(ForthError):
    label = 'Stack overflow'


class DivisionByZero(ForthError):
    label = 'Division by zero'


class WordTooLong(ForthError):
    label = 'Word too long'


class LineTooLong(ForthError):
    """Raised by the line reader; ends evaluation of the whole stream"""
    label = 'Line too long'

    def __init__(self, lineno):
        super().__init__()
        self.lineno = lineno

    def __str__(self):
        return f"{self.label} (line {self.lineno})"


def wrap_cell(value):
    """Truncate an integer to a signed cell, two's complement"""
    value &= CELL_MASK
    if value > CELL_MAX:
        value -= 1 << CELL_BITS
    return value


Token = namedtuple('Token', ['text', 'column', 'consumed', 'overlong'],
                   defaults=[False])


def next_word(line, start=0):
    """Scan the next word of line beginning at index start.

    Leading whitespace is skipped and the word ends at the first
    whitespace character or at the end of the line. Only the ASCII
    characters in WHITESPACE separate words.

    Returns (word, consumed), where consumed counts the skipped
    whitespace plus the characters of the word, or None when nothing
    but whitespace is left.
    """
    i = start
    n = len(line)

    while i < n and line[i] in WHITESPACE:
        i += 1
    if i >= n:
        return None

    begin = i
    while i < n and line[i] not in WHITESPACE:
        i += 1
    return line[begin:i], i - start


def words(line, max_word=MAX_WORD_SIZE):
    """Yield a Token for every word of line, left to right.

    Columns are 1-based. Each call starts again from column 1.
    Words longer than max_word characters are yielded whole with
    overlong set.
    """
    pos = 0
    while True:
        found = next_word(line, pos)
        if found is None:
            return
        text, consumed = found
        pos += consumed
        yield Token(text, pos - len(text) + 1, consumed, len(text) > max_word)


_DECIMAL = re.compile(r'[+-]?[0-9]+\Z')


def parse_number(token):
    """Parse a token as a base-10 signed cell"""
    if not _DECIMAL.match(token):
        raise NotANumber(token)
    digits = token.lstrip('+-').lstrip('0') or '0'
    if len(digits) > CELL_DIGITS:
        raise NumberTooLarge(token)
    value = int(digits)
    if token[0] == '-':
        value = -value
    if value < CELL_MIN or value > CELL_MAX:
        raise NumberTooLarge(token)
    return value
