import numpy as np

from .ast_nodes import BinaryOpNode, FunctionCallNode, NumberNode
from .errors import DivisionByZeroError, UnknownFunctionError
from .functions import FUNCTIONS
from .tokens import TokenType


class Evaluator:
    def __init__(self, functions=FUNCTIONS):
        self.functions = functions

    def eval(self, node):
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, FunctionCallNode):
            args = [self.eval(a) for a in node.args]
            func = self.functions.get(node.name)
            if func is None:
                raise UnknownFunctionError(node.name)
            with np.errstate(all="ignore"):
                return func(*args)

        if isinstance(node, BinaryOpNode):
            # Chains like 1+2+3 are left-deep; walk the left spine iteratively
            spine = []
            while isinstance(node, BinaryOpNode):
                spine.append(node)
                node = node.left

            result = self.eval(node)
            for binop in reversed(spine):
                result = self.apply(binop.op, result, self.eval(binop.right))
            return result

        raise TypeError(f"Invalid AST node {node!r}")

    def apply(self, op, left, right):
        if op == TokenType.PLUS: return left + right
        if op == TokenType.MINUS: return left - right
        if op == TokenType.MUL: return left * right
        if op == TokenType.DIV:
            # Zero divisor is an error, not IEEE infinity
            if right == 0:
                raise DivisionByZeroError()
            return left / right

        raise TypeError(f"Unsupported operator {op}")


def evaluate(node):
    """Evaluate an AST produced by `parse` to a float."""
    return Evaluator().eval(node)
