"""Command-line front end: batch mode over files, or an interactive loop."""
from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Optional, TextIO

from qlisp import __version__
from qlisp.interpreter import Interpreter
from qlisp.printer import to_string
from qlisp.types.errors import QlispSyntaxError

PROMPT = ">> "
EXIT_COMMAND = ".exit"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="qlisp", description="A small Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to run in order; none starts the interactive mode")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the basic.lisp prelude")
    parser.add_argument("--max-call-depth", type=int, default=None, metavar="N",
                        help="maximum nested user-defined function calls (default 256)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def repl(itp: Interpreter, stdin: TextIO, stdout: TextIO) -> None:
    """Read a line, evaluate one expression from it, print the result."""
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.rstrip("\n")
        if line == EXIT_COMMAND:
            break
        result = itp.eval_line(line)
        stdout.write(to_string(result) + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        itp = Interpreter(
            prelude=None if args.no_prelude else 'auto',
            max_call_depth=args.max_call_depth,
        )
        if args.files:
            for path in args.files:
                itp.load_file(path)
        else:
            repl(itp, sys.stdin, sys.stdout)
    except QlispSyntaxError as err:
        # The reader cannot resume: terminate
        sys.stdout.flush()
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
