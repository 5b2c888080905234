"""
LineForth REPL - Evaluator loop and interactive Read-Eval-Print Loop
"""

import io
import sys
from enum import Enum

from .core import (COMMENT, MAX_LINE_SIZE, MAX_STACK_SIZE, MAX_WORD_SIZE,
                   ForthError, LineTooLong, WordTooLong, parse_number, words)
from .arithmetic import binop
from .dictionary import Op, lookup
from .io_words import LineReader
from .stack_ops import (Stack, drop_word, dup_word, format_stack, print_word,
                        show_stack, swap_word)


class EvalState(Enum):
    RUNNING = 'running'
    LINE_DONE = 'line-done'
    COMMENT_SKIP = 'comment-skip'
    EOF = 'eof'


class Forth:
    """Line-oriented evaluator owning a single data stack.

    Each line is split into words; a word is either looked up in the
    dictionary and dispatched, or parsed as a literal and pushed.
    Errors in one word are reported with their position and evaluation
    carries on with the next word.
    """

    def __init__(self, capacity=MAX_STACK_SIZE, max_line=MAX_LINE_SIZE,
                 max_word=MAX_WORD_SIZE, verbose=False):
        self.stack = Stack(capacity)
        self.max_line = max_line
        self.max_word = max_word
        self.verbose = verbose
        self.state = EvalState.RUNNING
        self.errors = []

    def eval(self, stream):
        """Evaluate every line of a text stream, starting from an empty stack.

        LineTooLong propagates to the caller; every other error is
        reported and recorded in self.errors.
        """
        self.stack.clear()
        self.errors = []
        self.state = EvalState.RUNNING
        reader = LineReader(stream, self.max_line)

        while self.state is not EvalState.EOF:
            line = reader.read_line()
            if line is None:
                self.state = EvalState.EOF
            else:
                self.execute_line(line, reader.lineno)

        if self.verbose:
            print("Finished processing.")
            sys.stdout.flush()
        return self

    def execute(self, text):
        """Evaluate Forth source held in a string"""
        return self.eval(io.StringIO(text))

    def execute_line(self, line, lineno=1):
        """Evaluate one line against the current stack"""
        self.state = EvalState.RUNNING

        for token in words(line, self.max_word):
            if token.text == COMMENT:
                self.state = EvalState.COMMENT_SKIP
                self._trace(lineno, token, "rest of line skipped")
                break
            try:
                if token.overlong:
                    raise WordTooLong(token.text)
                self._execute_word(token.text)
            except ForthError as e:
                self._report(e, lineno, token)
            else:
                self._trace(lineno, token, format_stack(self.stack))

        self.state = EvalState.LINE_DONE
        return self

    def _execute_word(self, word):
        entry = lookup(word)
        if entry is not None:
            self._dispatch(entry)
        else:
            self.stack.push(parse_number(word))

    def _dispatch(self, entry):
        op = entry.op
        if op is Op.BINOP:
            binop(self.stack, entry.tag)
        elif op is Op.PRINT:
            print_word(self.stack)
        elif op is Op.DUP:
            dup_word(self.stack)
        elif op is Op.DROP:
            drop_word(self.stack)
        elif op is Op.SWAP:
            swap_word(self.stack)
        elif op is Op.SHOW:
            show_stack(self.stack)
        else:
            raise ValueError(f"no handler for {entry.word!r}")

    def _report(self, error, lineno, token):
        self.errors.append((error, lineno, token.column))
        print(f"{error.label}: '{token.text}' (line {lineno}, column {token.column})")
        sys.stdout.flush()

    def _trace(self, lineno, token, detail):
        if self.verbose:
            print(f"[{lineno}:{token.column}] {token.text}  {detail}")
            sys.stdout.flush()

    def _readline_input(self, prompt):
        """Alternative input using sys.stdin.readline for pipes and dumb terminals"""
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError()
        return line.rstrip('\n\r')

    def repl(self, readline_mode=False):
        """Start interactive REPL

        The stack is kept from one line to the next. 'bye' or end of
        input leaves the loop.

        Args:
            readline_mode: If True, use sys.stdin.readline instead of input().
        """
        print("LineForth - type 'bye' to leave")
        get_input = self._readline_input if readline_mode else input
        lineno = 0

        while True:
            try:
                try:
                    line = get_input("ok> ")
                except EOFError:
                    break
                lineno += 1

                if line.strip().lower() == 'bye':
                    break
                if len(line) > self.max_line:
                    raise LineTooLong(lineno)
                self.execute_line(line, lineno)

            except KeyboardInterrupt:
                print("\n(Ctrl+C) Type 'bye' to leave")
            except LineTooLong as e:
                print(e)

        self.state = EvalState.EOF
        return self
