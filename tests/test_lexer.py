import pytest

from bodmas.errors import LexError, LexErrorKind
from bodmas.lexer import Token, TokenKind, tokenize


def kinds(tokens):
    return [tok.kind for tok in tokens]


@pytest.mark.parametrize("digits", ["0", "8", "52", "007", "1234567890123"])
def test_digit_run_is_one_number(digits):
    tokens = tokenize(digits)
    assert kinds(tokens) == [TokenKind.NUMBER, TokenKind.END_OF_FILE]
    assert tokens[0].lexeme == digits


def test_operators_and_brackets():
    tokens = tokenize("(1+2)-3*4/5\n")
    assert kinds(tokens) == [
        TokenKind.LPAREN, TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER,
        TokenKind.RPAREN, TokenKind.MINUS, TokenKind.NUMBER, TokenKind.STAR,
        TokenKind.NUMBER, TokenKind.SLASH, TokenKind.NUMBER,
        TokenKind.END_OF_EXPRESSION,
    ]
    assert [tok.lexeme for tok in tokens if tok.kind is TokenKind.NUMBER] == ["1", "2", "3", "4", "5"]


def test_whitespace_is_skipped():
    tokens = tokenize(" 12 \t+\t 3 \r\n")
    assert kinds(tokens) == [TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER,
                             TokenKind.END_OF_EXPRESSION]
    assert tokens[0].column == 1
    assert tokens[2].column == 8


def test_numbers_are_unsigned():
    tokens = tokenize("-5\n")
    assert kinds(tokens) == [TokenKind.MINUS, TokenKind.NUMBER, TokenKind.END_OF_EXPRESSION]
    assert tokens[1].lexeme == "5"


def test_empty_string_is_end_of_file():
    assert tokenize("") == [Token(TokenKind.END_OF_FILE, column=0)]


def test_line_break_ends_the_sequence():
    assert kinds(tokenize("1\n")) == [TokenKind.NUMBER, TokenKind.END_OF_EXPRESSION]


def test_unexpected_character():
    with pytest.raises(LexError) as excinfo:
        tokenize("1+2=3\n")
    err = excinfo.value
    assert err.kind is LexErrorKind.UNEXPECTED_CHARACTER
    assert err.column == 3
    assert err.char == "="
    assert err.label == "LexError"


def test_unexpected_character_snippet_is_clipped():
    with pytest.raises(LexError) as excinfo:
        tokenize("123456789 x 123456789\n")
    assert excinfo.value.snippet() == ("6789 ", "x", " 1234")

    with pytest.raises(LexError) as excinfo:
        tokenize("a+1\n")
    assert excinfo.value.snippet() == ("", "a", "+1")


@pytest.mark.parametrize("char", ["x", ".", "%", "^", "١"])
def test_anything_else_is_rejected(char):
    with pytest.raises(LexError):
        tokenize(f"1{char}2\n")


def test_display_lexemes():
    tokens = tokenize("42*(\n")
    assert [tok.display for tok in tokens] == ["42", "*", "(", "\\n"]
    assert tokenize("")[0].display == "EOF"


def test_text_after_the_line_break_is_rejected():
    with pytest.raises(LexError) as excinfo:
        tokenize("1\n+2")
    assert excinfo.value.column == 2
    assert excinfo.value.char == "+"
    assert kinds(tokenize("1\n  \n")) == [TokenKind.NUMBER, TokenKind.END_OF_EXPRESSION]
