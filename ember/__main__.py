"""Command-line driver: read a source file and evaluate it form by form."""

from __future__ import annotations

import argparse
import logging
import sys

from ember.config import get_log_level
from ember.interpreter import Interpreter
from ember.types.errors import EmberError
from ember.types.printer import to_source

logger = logging.getLogger("ember")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="ember", description="Run an Ember program.")
    parser.add_argument("-c", "--code", help="evaluate CODE instead of reading a file")
    parser.add_argument("file", nargs="?", help="source file, or '-' for stdin")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(name)s: %(levelname)s: %(message)s")

    if args.code is not None:
        text = args.code
        source = "<code>"
    elif args.file == "-":
        text = sys.stdin.read()
        source = "<stdin>"
    elif args.file:
        try:
            with open(args.file, encoding="utf-8") as fp:
                text = fp.read()
        except OSError as e:
            logger.error("cannot read %s: %s", args.file, e.strerror)
            return 1
        source = args.file
    else:
        parser.print_usage(sys.stderr)
        return 2

    interp = Interpreter(sys.stdout)
    try:
        interp.run(text)
    except EmberError as e:
        print(f"{source}: {type(e).__name__}: {e}", file=sys.stderr)
        if e.form is not None:
            print(f"  in {to_source(e.form)}", file=sys.stderr)
        logger.debug("evaluation failed", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
