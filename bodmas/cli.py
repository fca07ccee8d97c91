"""Command line entry point: evaluate a file, piped input or an interactive session."""
import argparse
import logging
import sys

from .config import BANNER, EVALUATOR_CONFIG, LOGGING_CONFIG, PARSER_CONFIG, SOURCE_CONFIG, __version__
from .interpreter import Interpreter
from .report import Reporter
from .source import LineSource

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bodmas",
        description="Evaluate one integer arithmetic expression per line.")
    parser.add_argument("file", nargs="?", help="file to read (default: standard input)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-d", "--debug", action="store_true", help="log tokens, trees and results")
    parser.add_argument("--ast", action="store_true", help="print the syntax tree of each line")
    parser.add_argument("--no-color", action="store_true", help="never use terminal colors")
    parser.add_argument("--stack-size", type=int, default=EVALUATOR_CONFIG["stack_capacity"],
                        help="evaluation stack capacity (default: %(default)s)")
    parser.add_argument("--max-nesting", type=int, default=PARSER_CONFIG["max_nesting"],
                        help="deepest parenthesis nesting accepted (default: %(default)s)")
    parser.add_argument("--prompt", default=SOURCE_CONFIG["prompt"], help="interactive prompt")
    return parser


def run(args, stream, filename=None):
    source = LineSource(stream, prompt=args.prompt)
    reporter = Reporter(color=False if args.no_color else None, filename=filename)
    if source.interactive:
        print(BANNER.format(version=__version__), end="")
    interpreter = Interpreter(reporter, capacity=args.stack_size,
                              max_nesting=args.max_nesting, show_ast=args.ast)
    status = interpreter.run(source)
    if source.interactive:
        print()
    return status


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=LOGGING_CONFIG["format"]
    )

    try:
        if args.file is None:
            return run(args, sys.stdin)
        logger.debug("reading %s", args.file)
        try:
            f = open(args.file)
        except OSError as e:
            print(f"error: cannot open file '{args.file}': {e.strerror}", file=sys.stderr)
            return 1
        with f:
            return run(args, f, filename=args.file)
    except KeyboardInterrupt:
        print()
        return 130
