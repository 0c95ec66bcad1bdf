import math
import warnings

import pytest

from calculator import (
    ArityError,
    DivisionByZeroError,
    Evaluator,
    UnknownFunctionError,
    evaluate,
    parse,
    tokenize,
)
from calculator.ast_nodes import BinaryOpNode, FunctionCallNode, NumberNode
from calculator.functions import Function
from calculator.tokens import TokenType


def run(expr):
    return evaluate(parse(tokenize(expr)))


def test_number_node():
    assert evaluate(NumberNode(2.5)) == 2.5


@pytest.mark.parametrize("op, expected", [
    (TokenType.PLUS, 8.0),
    (TokenType.MINUS, 4.0),
    (TokenType.MUL, 12.0),
    (TokenType.DIV, 3.0),
])
def test_binary_operators(op, expected):
    assert evaluate(BinaryOpNode(NumberNode(6.0), op, NumberNode(2.0))) == expected


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError, match="division by zero"):
        run("1 / 0")


def test_division_by_negative_zero():
    with pytest.raises(DivisionByZeroError):
        run("1 / -0")


def test_division_by_zero_is_an_arithmetic_error():
    with pytest.raises(ArithmeticError):
        run("0 / (2 - 2)")


def test_zero_divided_by_tiny_number_is_fine():
    assert run("0 / 1e-300") == 0.0


def test_left_error_wins_over_right_error():
    with pytest.raises(DivisionByZeroError):
        run("1 / 0 + foo(1)")
    with pytest.raises(UnknownFunctionError):
        run("foo(1) + 1 / 0")


def test_arguments_evaluated_before_lookup():
    with pytest.raises(DivisionByZeroError):
        run("foo(1 / 0)")


def test_first_failing_argument_wins():
    with pytest.raises(UnknownFunctionError) as excinfo:
        run("pow(bar(), 1 / 0)")
    assert excinfo.value.name == "bar"


def test_unknown_function():
    with pytest.raises(UnknownFunctionError, match="unknown function: foo"):
        run("foo(1)")


def test_unknown_function_is_a_name_error():
    with pytest.raises(NameError):
        run("SQRT(4)")


def test_arity_mismatch():
    with pytest.raises(ArityError, match="invalid function signature for max") as excinfo:
        run("max(1, 2, 3)")
    assert excinfo.value.expected == 2
    assert excinfo.value.given == 3


def test_missing_arguments_are_not_padded():
    with pytest.raises(ArityError):
        run("sqrt()")
    with pytest.raises(ArityError):
        run("nan(1)")


def test_unary_minus_zero_is_positive_zero():
    result = run("-0")
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_nan_and_infinity_are_results():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isnan(run("sqrt(-1)"))
        assert math.isnan(run("log(-1)"))
        assert run("exp(1000)") == math.inf
        assert run("log(0)") == -math.inf
        assert run("1e308 * 10") == math.inf
        assert math.isnan(run("-nan()"))


def test_results_are_python_floats():
    assert type(run("sqrt(16)")) is float
    assert type(run("1 + 1")) is float


def test_tree_can_be_evaluated_repeatedly():
    tree = parse(tokenize("pow(2, 0.5) * 3 - 1 / 7"))
    first = evaluate(tree)
    assert all(evaluate(tree).hex() == first.hex() for _ in range(5))


def test_custom_function_table():
    table = {"twice": Function("twice", 1, lambda x: 2 * x)}
    tree = FunctionCallNode("twice", [NumberNode(4.0)])
    assert Evaluator(table).eval(tree) == 8.0
    with pytest.raises(UnknownFunctionError):
        Evaluator(table).eval(FunctionCallNode("sqrt", [NumberNode(4.0)]))


def test_invalid_node():
    with pytest.raises(TypeError):
        evaluate("1 + 1")


def test_left_deep_chain_keeps_order():
    tree = parse(tokenize("10 - 2 - 3 * 2 / 4 - 1"))
    assert evaluate(tree) == 5.5
