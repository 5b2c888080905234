"""
LineForth Arithmetic - Binary arithmetic and bitwise operations
"""

from enum import Enum

from .core import CELL_BITS, DivisionByZero, wrap_cell


class BinOp(Enum):
    """Operand tag selecting what the shared binary operator computes"""
    AND = 'and'
    OR = 'or'
    LSHIFT = '<<'
    RSHIFT = '>>'
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    MOD = 'mod'


def _truncated_div(a, b):
    # Rounds toward zero, not toward negative infinity like //
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _shift_count(n):
    return n & (CELL_BITS - 1)


def compute(op, op2, op1):
    """Return op2 <op> op1 as a cell. op1 was on top of the stack."""
    if op is BinOp.ADD:
        result = op2 + op1
    elif op is BinOp.SUBTRACT:
        result = op2 - op1
    elif op is BinOp.MULTIPLY:
        result = op2 * op1
    elif op is BinOp.DIVIDE:
        if op1 == 0:
            raise DivisionByZero()
        result = _truncated_div(op2, op1)
    elif op is BinOp.MOD:
        if op1 == 0:
            raise DivisionByZero()
        result = op2 - op1 * _truncated_div(op2, op1)
    elif op is BinOp.AND:
        result = op2 & op1
    elif op is BinOp.OR:
        result = op2 | op1
    elif op is BinOp.LSHIFT:
        result = op2 << _shift_count(op1)
    elif op is BinOp.RSHIFT:
        result = op2 >> _shift_count(op1)
    else:
        raise ValueError(f"unknown binary operation: {op!r}")
    return wrap_cell(result)


def binop(stack, op):
    """( op2 op1 -- result )

    Nothing is consumed unless the operation succeeds.
    """
    stack.require(2)
    result = compute(op, stack.pick(1), stack.pick(0))
    stack.pop()
    stack.pop()
    stack.push(result)
