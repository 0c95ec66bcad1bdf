from .ast_nodes import BinaryOpNode, FunctionCallNode, NumberNode
from .errors import ParseError
from .tokens import TokenType


class Parser:
    """
    Recursive descent parser.

    Precedence, lowest first: additive (+ -), multiplicative (* /),
    unary minus, primary (number, parenthesized expression, function call).
    Binary operators are left-associative.
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.index = 0
        self.current = tokens[0]

    def eat(self, type_, expected):
        if self.current.type != type_:
            self.error(f"expected {expected}")
        self.index += 1
        self.current = self.tokens[self.index]

    def error(self, hint=None):
        message = f"unexpected {self.current.describe()}"
        if hint:
            message = f"{message}, {hint}"
        raise ParseError(message, self.current)

    def parse(self):
        try:
            result = self.expression()
        except RecursionError as e:
            raise ParseError("expression nested too deeply", self.current) from e
        if self.current.type != TokenType.EOF:
            raise ParseError(f"trailing input {self.current.describe()}", self.current)
        return result

    def expression(self):
        node = self.term()

        while self.current.type in (TokenType.PLUS, TokenType.MINUS):
            op = self.current.type
            self.eat(op, "operator")
            node = BinaryOpNode(node, op, self.term())

        return node

    def term(self):
        node = self.unary()

        while self.current.type in (TokenType.MUL, TokenType.DIV):
            op = self.current.type
            self.eat(op, "operator")
            node = BinaryOpNode(node, op, self.unary())

        return node

    def unary(self):
        if self.current.type == TokenType.MINUS:
            self.eat(TokenType.MINUS, "'-'")
            # -x is 0 - x, so negative zero and NaN behave as in subtraction
            return BinaryOpNode(NumberNode(0.0), TokenType.MINUS, self.factor())
        return self.factor()

    def factor(self):
        token = self.current

        if token.type == TokenType.NUMBER:
            self.eat(TokenType.NUMBER, "number")
            return NumberNode(token.value)

        if token.type == TokenType.IDENTIFIER:
            self.eat(TokenType.IDENTIFIER, "function name")
            self.eat(TokenType.LPAREN, f"'(' after {token.value!r}")
            args = []
            if self.current.type != TokenType.RPAREN:
                args.append(self.expression())
                while self.current.type == TokenType.COMMA:
                    self.eat(TokenType.COMMA, "','")
                    args.append(self.expression())
            self.eat(TokenType.RPAREN, "')'")
            return FunctionCallNode(token.value, args)

        if token.type == TokenType.LPAREN:
            self.eat(TokenType.LPAREN, "'('")
            expr = self.expression()
            self.eat(TokenType.RPAREN, "')'")
            return expr

        self.error()


def parse(tokens):
    """Build an AST from a token list produced by `tokenize`."""
    return Parser(tokens).parse()
