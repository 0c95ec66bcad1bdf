"""
Arithmetic expression calculator.

Evaluates infix expressions such as "2 * sqrt(16) - pow(2, -1)" to a float
without using eval(). The pipeline is tokenizer -> recursive descent parser
-> AST evaluator; each stage raises a CalculatorError subclass on bad input.
"""
import logging

from .errors import (
    ArityError,
    CalculatorError,
    DivisionByZeroError,
    LexError,
    ParseError,
    UnknownFunctionError,
)
from .evaluator import Evaluator, evaluate
from .functions import FUNCTIONS, Function
from .parser import Parser, parse
from .tokenizer import Tokenizer, tokenize

logger = logging.getLogger(__name__)


def calculate(expr: str) -> float:
    """
    Evaluate an arithmetic expression.

    Supported:
    - Literals: 3, 2.5, .5, 1e-3
    - Operators: + - * / and unary minus, with the usual precedence
    - Parentheses for grouping
    - Functions from FUNCTIONS, e.g. sqrt(16), pow(2, 10), nan()

    Args:
        expr: Expression text

    Returns:
        The result, which may be NaN or infinite when a function yields one

    Raises:
        LexError, ParseError, UnknownFunctionError, ArityError,
        DivisionByZeroError
    """
    try:
        tokens = tokenize(expr)
        ast = parse(tokens)
        return evaluate(ast)
    except CalculatorError as e:
        logger.debug(f"Expression evaluation error: {str(e)} for expression: {expr!r}")
        raise


__all__ = [
    'calculate',
    'Tokenizer', 'tokenize',
    'Parser', 'parse',
    'Evaluator', 'evaluate',
    'Function', 'FUNCTIONS',
    'CalculatorError', 'LexError', 'ParseError',
    'UnknownFunctionError', 'ArityError', 'DivisionByZeroError',
]
