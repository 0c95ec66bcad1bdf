"""
Errors raised while tokenizing, parsing or evaluating an expression.

Every error is a CalculatorError and also subclasses the closest built-in
exception, so `except ZeroDivisionError` keeps working for callers that
don't know about this package.
"""


class CalculatorError(Exception):
    """Base class for every calculator failure."""


class LexError(CalculatorError, ValueError):
    """Unrecognized character or malformed numeric literal."""

    def __init__(self, message, text, pos):
        super().__init__(f"{message} {text!r} at position {pos}")
        self.text = text
        self.pos = pos


class ParseError(CalculatorError, ValueError):
    """Unexpected token, unmatched parenthesis, trailing or missing input."""

    def __init__(self, message, token):
        super().__init__(f"{message} at position {token.pos}")
        self.token = token
        self.pos = token.pos


class UnknownFunctionError(CalculatorError, NameError):
    def __init__(self, name):
        super().__init__(f"unknown function: {name}")
        self.name = name


class ArityError(CalculatorError, TypeError):
    def __init__(self, name, expected, given):
        super().__init__(
            f"invalid function signature for {name}: "
            f"takes {expected} argument(s), {given} given"
        )
        self.name = name
        self.expected = expected
        self.given = given


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    def __init__(self):
        super().__init__("division by zero")
