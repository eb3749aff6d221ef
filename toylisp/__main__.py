"""Runs a toylisp source file and prints the value of each top-level form.

    python -m toylisp samples/closure.lisp
"""

import argparse
import logging
import sys

from toylisp.config import get_log_level
from toylisp.errors import ToyError
from toylisp.interpreter import Interpreter
from toylisp.printer import to_string


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="toylisp", description="Evaluate a toylisp program")
    parser.add_argument("file", help="source file to evaluate")
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation steps")
    parser.add_argument("--max-depth", type=positive_int, default=None, help="maximum evaluation depth")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter(max_depth=args.max_depth)
    try:
        results = interp.eval_file(args.file)
    except ToyError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 1

    for value in results:
        print(to_string(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
