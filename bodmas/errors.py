from enum import Enum


class LexErrorKind(Enum):
    UNEXPECTED_CHARACTER = "unexpected character"


class ParseErrorKind(Enum):
    EXPECTED_END_OF_EXPRESSION = "expected end of expression"
    UNMATCHED_OPEN_PAREN = "unmatched parenthesis"
    EXPECTED_OPERAND_OR_PAREN = "expected an integer or '('"
    NESTING_TOO_DEEP = "parentheses nested too deeply"


class EvaluationErrorKind(Enum):
    DIVISION_BY_ZERO = "division by zero"
    STACK_OVERFLOW = "stack overflow"
    STACK_UNDERFLOW = "stack underflow"


class InputErrorKind(Enum):
    LINE_TOO_LONG = "line too long"


# --- errors ---
class CalcError(Exception):
    """Base for everything that can go wrong with a single line.

    `kind` classifies the failure, `column` (when known) is the 0-based index
    in the line that the diagnostic should point at.
    """

    label = "Error"

    def __init__(self, kind, message=None, column=None):
        self.kind = kind
        self.message = message or kind.value
        self.column = column
        super().__init__(self.message)


class LexError(CalcError):
    label = "LexError"

    def __init__(self, kind, line, column):
        self.line = line
        self.char = line[column]
        super().__init__(kind, f"{kind.value} {self.char!r}", column)

    def snippet(self, context=5):
        return snippet(self.line, self.column, context)


class ParseError(CalcError):
    label = "SyntaxError"

    def __init__(self, kind, token, message=None):
        self.token = token
        self.lexeme = token.display
        message = f"{message or kind.value} near {self.lexeme!r}"
        super().__init__(kind, message, token.column)


class EvaluationError(CalcError):
    label = "RuntimeError"


class InputError(CalcError):
    label = "InputError"


def snippet(line, column, context=5):
    """ split `line` around `column`: (before, char, after), clipped to the line """
    line = line.rstrip("\r\n")
    if column >= len(line):
        return line[max(0, column - context):], "", ""
    start = max(0, column - context)
    return line[start:column], line[column], line[column + 1:column + 1 + context]
