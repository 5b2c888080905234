"""
LineForth Stack Operations - Bounded data stack and stack manipulation words
"""

import sys

from .core import MAX_STACK_SIZE, StackOverflow, StackUnderflow


class Stack:
    """Fixed-capacity stack of integer cells"""

    def __init__(self, capacity=MAX_STACK_SIZE):
        if capacity < 1:
            raise ValueError(f"stack capacity must be positive, not {capacity}")
        self.capacity = capacity
        self._cells = []

    def __repr__(self):
        return f"<Stack {self.depth()}/{self.capacity} {self._cells}>"

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        """Iterate bottom to top"""
        return iter(self._cells)

    def depth(self):
        return len(self._cells)

    def require(self, n):
        """Check that at least n operands are present before consuming any"""
        if len(self._cells) < n:
            raise StackUnderflow()

    def room(self, n):
        """Check that n more cells fit"""
        if len(self._cells) + n > self.capacity:
            raise StackOverflow()

    def push(self, value):
        self.room(1)
        self._cells.append(value)

    def pop(self):
        self.require(1)
        return self._cells.pop()

    def peek(self):
        return self.pick(0)

    def pick(self, n):
        """Return the n-th cell below the top without removing it"""
        self.require(n + 1)
        return self._cells[-1 - n]

    def clear(self):
        self._cells.clear()


def dup_word(stack):
    stack.push(stack.peek())


def drop_word(stack):
    stack.pop()


def swap_word(stack):
    stack.require(2)
    a = stack.pop()
    b = stack.pop()
    stack.push(a)
    stack.push(b)


def print_word(stack):
    print(stack.pop())
    sys.stdout.flush()


def format_stack(stack):
    """Render the stack as '<depth> v1 v2 ...', bottom to top"""
    return ' '.join([f"<{stack.depth()}>"] + [str(v) for v in stack])


def show_stack(stack):
    print(format_stack(stack))
    sys.stdout.flush()
