#!/usr/bin/env python3
"""
LineForth - Line-oriented Forth interpreter

Usage: python main.py [-v|--verbose] [FILE | repl]
"""

import sys

from lineforth.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
