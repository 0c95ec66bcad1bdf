from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class TokenType(Enum):
    NUMBER = auto()
    IDENTIFIER = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    EOF = auto()


# Single-character operators and punctuation.
SYMBOLS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MUL,
    '/': TokenType.DIV,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    ',': TokenType.COMMA,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[Union[float, str]] = None
    pos: int = 0

    def describe(self):
        """Human readable form used in parse errors."""
        if self.type == TokenType.EOF:
            return "end of input"
        if self.type == TokenType.NUMBER:
            return f"number {self.value!r}"
        return repr(self.value)

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, pos={self.pos})"
