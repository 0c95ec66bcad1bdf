class NumberNode:
    __slots__ = ('value',)

    def __init__(self, value): self.value = value

    def __repr__(self):
        return f"NumberNode({self.value!r})"


class BinaryOpNode:
    __slots__ = ('left', 'op', 'right')

    def __init__(self, left, op, right):
        self.left = left
        self.op = op
        self.right = right

    def __repr__(self):
        return f"BinaryOpNode({self.left!r}, {self.op.name}, {self.right!r})"


class FunctionCallNode:
    __slots__ = ('name', 'args')

    def __init__(self, name, args):
        self.name = name
        self.args = tuple(args)

    def __repr__(self):
        return f"FunctionCallNode({self.name!r}, {list(self.args)!r})"
