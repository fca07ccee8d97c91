"""A BODMAS integer calculator: lexer, recursive-descent parser and stack evaluator."""

from .config import __version__
from .errors import CalcError, EvaluationError, InputError, LexError, ParseError
from .evaluator import Evaluator, evaluate
from .interpreter import Interpreter, calc
from .lexer import Token, TokenKind, tokenize
from .nodes import Add, Div, Mul, Num, Sub
from .parser import Parser, parse

__all__ = [
    "__version__",
    "Add", "Div", "Mul", "Num", "Sub",
    "CalcError", "EvaluationError", "InputError", "LexError", "ParseError",
    "Evaluator", "Interpreter", "Parser", "Token", "TokenKind",
    "calc", "evaluate", "parse", "tokenize",
]
