import sys

from .config import LEXER_CONFIG
from .errors import snippet

RED = "\033[1;31m"
GREEN = "\033[1;32m"
RESET = "\033[0m"


def _isatty(stream):
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Reporter:
    """Writes results to `out` and diagnostics to `err`.

    Diagnostics are prefixed with `filename:line:` when a filename is given.
    With `color=None` escape codes are used only on terminals.
    """

    def __init__(self, out=None, err=None, color=None, filename=None,
                 context=LEXER_CONFIG["snippet_context"]):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.color = color
        self.filename = filename
        self.context = context

    def _paint(self, text, code, stream):
        color = self.color if self.color is not None else _isatty(stream)
        return f"{code}{text}{RESET}" if color else text

    def result(self, value):
        print(self._paint(str(value), GREEN, self.out), file=self.out)

    def ast(self, tree):
        print("\tAST:", tree, file=self.out)

    def error(self, exc, line=None, line_number=None):
        where = ""
        if self.filename and line_number is not None:
            where = f"{self.filename}:{line_number}: "
        print(where + self._paint(f"{exc.label}: {exc.message}", RED, self.err), file=self.err)
        if line and exc.column is not None:
            for row in self.render_snippet(line, exc.column):
                print("\t" + row, file=self.err)
        self.err.flush()

    def render_snippet(self, line, column):
        """ the context around `column` and a '~~^~~' marker line under it """
        before, char, after = snippet(line, column, self.context)
        marker = "~" * len(before) + "^" + "~" * len(after)
        text = before + (self._paint(char, RED, self.err) if char else "") + after
        return [text, marker]
