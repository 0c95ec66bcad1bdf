import logging
import re

from .errors import LexError
from .tokens import SYMBOLS, Token, TokenType

logger = logging.getLogger(__name__)

DIGITS = '0123456789'
LETTERS = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
NUMBER_RE = re.compile(r'(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def is_digit(ch):
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return ch is not None and ch in DIGITS


def is_letter(ch):
    return ch is not None and ch in LETTERS


class Tokenizer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current = text[0] if text else None

    def advance(self):
        self.pos += 1
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def skip_spaces(self):
        while self.current and self.current.isspace():
            self.advance()

    def digits(self):
        while is_digit(self.current):
            self.advance()

    def number(self):
        start = self.pos
        self.digits()
        if self.current == '.':
            self.advance()
            self.digits()
        if self.current in ('e', 'E'):
            self.advance()
            if self.current in ('+', '-'):
                self.advance()
            self.digits()

        lexeme = self.text[start:self.pos]
        if not NUMBER_RE.fullmatch(lexeme):
            raise LexError("malformed number", lexeme, start)
        return Token(TokenType.NUMBER, float(lexeme), start)

    def identifier(self):
        start = self.pos
        while self.current and (is_letter(self.current) or is_digit(self.current)):
            self.advance()
        return Token(TokenType.IDENTIFIER, self.text[start:self.pos], start)

    def generate_tokens(self):
        tokens = []
        while self.current:
            if self.current.isspace():
                self.skip_spaces()
                continue

            if is_digit(self.current) or self.current == '.':
                tokens.append(self.number())
                continue

            if is_letter(self.current):
                tokens.append(self.identifier())
                continue

            type_ = SYMBOLS.get(self.current)
            if type_ is None:
                raise LexError("unexpected character", self.current, self.pos)
            tokens.append(Token(type_, self.current, self.pos))
            self.advance()

        tokens.append(Token(TokenType.EOF, None, len(self.text)))
        logger.debug(f"Tokenized {self.text!r} into {len(tokens)} tokens")
        return tokens


def tokenize(expr):
    """Split `expr` into tokens, always terminated by an EOF token."""
    return Tokenizer(expr).generate_tokens()
