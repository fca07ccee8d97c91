import logging

from .config import EVALUATOR_CONFIG, PARSER_CONFIG
from .errors import CalcError
from .evaluator import Evaluator, evaluate
from .lexer import tokenize
from .parser import parse

logger = logging.getLogger(__name__)


# --- wrapper to parse-and-eval a single line ---
def calc(line):
    """ value of `line`, or None when it holds only the end of input """
    tree = parse(tokenize(line))
    if tree is None:
        return None
    return evaluate(tree)


class Interpreter:
    """Runs every line of a source through the pipeline and reports the outcome.

    A failing line is reported and skipped; `run` returns 1 if any line
    failed and 0 otherwise.
    """

    def __init__(self, reporter, capacity=EVALUATOR_CONFIG["stack_capacity"],
                 max_nesting=PARSER_CONFIG["max_nesting"], show_ast=False):
        self.reporter = reporter
        self.evaluator = Evaluator(capacity)
        self.max_nesting = max_nesting
        self.show_ast = show_ast
        self.failed = False

    def process_line(self, line, line_number=None):
        try:
            tree = parse(tokenize(line), self.max_nesting)
            if tree is None:
                return True
            if self.show_ast:
                self.reporter.ast(tree)
            value = self.evaluator.evaluate(tree)
        except CalcError as err:
            logger.debug("line %s failed: %r", line_number, err.kind)
            self.reporter.error(err, line, line_number)
            self.failed = True
            return False
        self.reporter.result(value)
        return True

    def run(self, source):
        while True:
            try:
                line = source.read_line()
            except CalcError as err:
                self.reporter.error(err, line_number=source.line_number)
                self.failed = True
                continue
            self.process_line(line, source.line_number if line else None)
            if not line:
                break
        return 1 if self.failed else 0
