"""
LineForth - Line-oriented Forth interpreter

Usage:
    lineforth [-v|--verbose] [FILE]    evaluate FILE, or standard input
    lineforth [-v|--verbose] repl      interactive prompt
    lineforth -h|--help                show this text

Also runnable as "python -m lineforth" or "python main.py".

Words: + - * / mod and or << >> . print dup drop swap .s
A lone \\ skips the rest of its line.
"""

import sys

from lineforth import Forth, LineTooLong


def usage(status):
    print(__doc__.strip())
    sys.exit(status)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    verbose = False
    source = None

    for arg in args:
        if arg in ('-h', '--help'):
            usage(0)
        elif arg in ('-v', '--verbose'):
            verbose = True
        elif arg.startswith('-') and arg != '-':
            print(f"Unrecognized option: {arg}", file=sys.stderr)
            usage(2)
        elif source is None:
            source = arg
        else:
            print(f"Unexpected argument: {arg}", file=sys.stderr)
            usage(2)

    f = Forth(verbose=verbose)

    if source == 'repl':
        f.repl(readline_mode=not sys.stdin.isatty())
        return 0

    try:
        if source is None or source == '-':
            f.eval(sys.stdin)
        else:
            try:
                file = open(source, 'r', encoding='utf-8')
            except OSError as e:
                print(f"Error: cannot open {source}: {e.strerror}", file=sys.stderr)
                return 1
            with file:
                f.eval(file)
    except LineTooLong as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: cannot decode input: {e.reason}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
