"""
LineForth I/O - Line reader over a text input stream
"""

from .core import MAX_LINE_SIZE, LineTooLong


class LineReader:
    """Supply one line at a time from a text stream.

    Lines are returned without their line terminator. A line longer
    than max_line characters raises LineTooLong instead of being
    truncated, since cutting it would split a word in two.
    """

    def __init__(self, stream, max_line=MAX_LINE_SIZE):
        self.stream = stream
        self.max_line = max_line
        self.lineno = 0

    def __iter__(self):
        return self

    def __next__(self):
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line

    def read_line(self):
        """Return the next line, or None once the stream is exhausted"""
        raw = self.stream.readline(self.max_line + 2)
        if not raw:
            return None
        self.lineno += 1

        if raw.endswith('\n'):
            line = raw[:-1]
        else:
            line = raw
        if line.endswith('\r'):
            line = line[:-1]

        if len(line) > self.max_line:
            raise LineTooLong(self.lineno)
        return line

