import logging
import re
from dataclasses import dataclass
from enum import Enum

from .errors import LexError, LexErrorKind

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    END_OF_EXPRESSION = "\\n"
    END_OF_FILE = "EOF"


# tokens that may close an expression
END_KINDS = (TokenKind.END_OF_EXPRESSION, TokenKind.END_OF_FILE)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str = None  # digits, numbers only
    column: int = 0

    @property
    def display(self):
        if self.kind is TokenKind.NUMBER:
            return self.lexeme
        return self.kind.value

    def __str__(self):
        return self.display


# --- lexer (lexical analyzer) ---
class Lexer:
    ignore = re.compile(r'[^\S\n]+')  # whitespace, except the line break
    blank = re.compile(r'\s*')

    rules = [
        (re.compile(r'[0-9]+'), TokenKind.NUMBER),                          # unsigned integer literals
        (re.compile(r'\n'), TokenKind.END_OF_EXPRESSION),
        (re.compile(r'\+'), TokenKind.PLUS),
        (re.compile(r'-'), TokenKind.MINUS),
        (re.compile(r'\*'), TokenKind.STAR),
        (re.compile(r'/'), TokenKind.SLASH),
        (re.compile(r'\('), TokenKind.LPAREN),
        (re.compile(r'\)'), TokenKind.RPAREN),
    ]

    def __init__(self, input_string):
        self.s = input_string
        self.pos = 0

    def next(self):
        # skip over ignorable characters
        m = self.ignore.match(self.s, self.pos)
        if m:
            self.pos = m.end()

        if self.pos >= len(self.s):
            return Token(TokenKind.END_OF_FILE, column=self.pos)

        for r, kind in self.rules:
            m = r.match(self.s, self.pos)
            if m:
                column, self.pos = self.pos, m.end()
                lexeme = m.group() if kind is TokenKind.NUMBER else None
                return Token(kind, lexeme, column)

        raise LexError(LexErrorKind.UNEXPECTED_CHARACTER, self.s, self.pos)

    def __iter__(self):
        """ tokens up to and including the end-of-expression/end-of-file marker """
        while True:
            tok = self.next()
            yield tok
            if tok.kind in END_KINDS:
                return


def tokenize(line):
    """Turn one line into a list of tokens.

    A line ending in '\\n' closes with END_OF_EXPRESSION; running out of
    characters (the empty string is end of input) closes with END_OF_FILE.
    Raises LexError on the first character no rule accepts, and on anything
    but whitespace after the line break.
    """
    lexer = Lexer(line)
    tokens = list(lexer)
    rest = lexer.blank.match(line, lexer.pos).end()
    if rest < len(line):
        raise LexError(LexErrorKind.UNEXPECTED_CHARACTER, line, rest)
    logger.debug("tokens: %s", " ".join(tok.display for tok in tokens))
    return tokens
