"""Recursive-descent parser.

Grammar, lowest precedence first; every repetition is left-associative::

    expression := add (END_OF_EXPRESSION | END_OF_FILE)
    add        := sub ( '+' sub )*
    sub        := mul ( '-' mul )*
    mul        := div ( '*' div )*
    div        := unit ( '/' unit )*
    unit       := NUMBER | '(' add ')'

`div` sits inside `mul`, so a chain such as ``a*b/c*d`` is folded strictly
left to right.
"""

import logging
import sys

from .config import PARSER_CONFIG
from .errors import ParseError, ParseErrorKind
from .lexer import END_KINDS, Token, TokenKind
from .nodes import Add, Div, Mul, Num, Sub

logger = logging.getLogger(__name__)

# interpreter frames used by one level of parentheses: unit, add, sub, mul, div
FRAMES_PER_NESTING = 6


# --- parser (recursive-descent) ---
class Parser:
    def __init__(self, tokens, max_nesting=PARSER_CONFIG["max_nesting"]):
        self.tokens = list(tokens) or [Token(TokenKind.END_OF_FILE)]
        self.index = 0
        self.depth = 0
        self.max_nesting = max_nesting
        self.next()

    def next(self):
        # the cursor stays on the last token once the list is exhausted
        if self.index < len(self.tokens):
            self.tok = self.tokens[self.index]
            self.index += 1

    def error(self, kind, msg=None):
        raise ParseError(kind, self.tok, msg)

    def parse(self):
        """ top-level parse; None when the line is a bare end of input """
        if self.tok.kind is TokenKind.END_OF_FILE:
            return None
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(limit + FRAMES_PER_NESTING * self.max_nesting)
        try:
            return self.parse_expression()
        except RecursionError:
            self.error(ParseErrorKind.NESTING_TOO_DEEP)
        finally:
            sys.setrecursionlimit(limit)

    def parse_expression(self):
        e = self.parse_add()
        if self.tok.kind in END_KINDS:
            return e
        if self.tok.kind is TokenKind.RPAREN:
            self.error(ParseErrorKind.UNMATCHED_OPEN_PAREN, "unmatched ')'")
        self.error(ParseErrorKind.EXPECTED_END_OF_EXPRESSION)

    # Add
    def parse_add(self):
        e = self.parse_sub()
        while self.tok.kind is TokenKind.PLUS:
            self.next()
            e = Add(e, self.parse_sub())
        return e

    # Sub
    def parse_sub(self):
        e = self.parse_mul()
        while self.tok.kind is TokenKind.MINUS:
            self.next()
            e = Sub(e, self.parse_mul())
        return e

    # Mul
    def parse_mul(self):
        e = self.parse_div()
        while self.tok.kind is TokenKind.STAR:
            self.next()
            e = Mul(e, self.parse_div())
        return e

    # Div
    def parse_div(self):
        e = self.parse_unit()
        while self.tok.kind is TokenKind.SLASH:
            self.next()
            e = Div(e, self.parse_unit())
        return e

    # Unit
    def parse_unit(self):
        if self.tok.kind is TokenKind.NUMBER:
            val = int(self.tok.lexeme)
            self.next()
            return Num(val)
        elif self.tok.kind is TokenKind.LPAREN:
            if self.depth >= self.max_nesting:
                self.error(ParseErrorKind.NESTING_TOO_DEEP)
            self.depth += 1
            self.next()
            e = self.parse_add()
            if self.tok.kind is not TokenKind.RPAREN:
                self.error(ParseErrorKind.UNMATCHED_OPEN_PAREN, "expected ')'")
            self.depth -= 1
            self.next()
            return e
        else:
            self.error(ParseErrorKind.EXPECTED_OPERAND_OR_PAREN)


def parse(tokens, max_nesting=PARSER_CONFIG["max_nesting"]):
    tree = Parser(tokens, max_nesting).parse()
    logger.debug("tree: %s", tree)
    return tree
