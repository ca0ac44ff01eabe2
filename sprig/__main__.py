"""Command-line entry point: `python -m sprig` or the `sprig` console script."""

from __future__ import annotations

import argparse
import logging
import sys

from sprig import __version__
from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.log import setup_logging
from sprig.repl import repl
from sprig.repl_server import ReplServer
from sprig.runtime_context import set_tail_calls

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sprig", description="Sprig Scheme-like interpreter")
    parser.add_argument("files", nargs="*", help="source files to evaluate (REPL when omitted)")
    parser.add_argument("--prelude", help="startup file evaluated before anything else")
    parser.add_argument("--tail-calls", action="store_true", help="run tail calls in constant stack space")
    parser.add_argument("--log-level", help="logging level (default: SPRIG_LOG_LEVEL or WARNING)")
    parser.add_argument("--serve", action="store_true", help="run the JSON REPL server instead of the REPL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.tail_calls:
        set_tail_calls(True)

    try:
        interp = Interpreter(prelude=args.prelude)
        for path in args.files:
            interp.load(path)
    except (SprigError, RecursionError) as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print(f"cannot read source: {e}", file=sys.stderr)
        return 1

    if args.serve:
        ReplServer(interp=interp).serve_forever()
    elif not args.files:
        repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
