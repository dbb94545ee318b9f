from enum import Enum


class Operator(Enum):
    AND = '&'
    OR = '|'
    XOR = '^'
    COND = '>'
    BICOND = '='

    @property
    def symbol(self):
        return self.value

    def apply(self, left, right):
        return _OPERATIONS[self](left, right)


# Both operands are always evaluated; these take plain bools.
_OPERATIONS = {
    Operator.AND: lambda a, b: a and b,
    Operator.OR: lambda a, b: a or b,
    Operator.XOR: lambda a, b: a != b,
    Operator.COND: lambda a, b: (not a) or b,
    Operator.BICOND: lambda a, b: a == b,
}


class Kind(Enum):
    FALSE = 'false'
    TRUE = 'true'
    NEGATION = 'negation'
    VARIABLE = 'variable'
    BINARY = 'binary'


class Stmt:
    """A node of a parsed statement.

    The node kinds are fixed, so a node is a tag plus its payload instead of a
    subclass per kind:

    ========== ======================= ==================
    kind       ``value``               ``children``
    ========== ======================= ==================
    FALSE      ``None``                ``()``
    TRUE       ``None``                ``()``
    NEGATION   ``None``                ``(child,)``
    VARIABLE   the letter              ``()``
    BINARY     an :class:`Operator`    ``(left, right)``
    ========== ======================= ==================

    Nodes are never mutated after construction.
    """

    __slots__ = ('kind', 'value', 'children')

    def __init__(self, kind, value=None, children=()):
        self.kind = kind
        self.value = value
        self.children = tuple(children)

    @property
    def is_binary(self):
        return self.kind is Kind.BINARY

    def evaluate(self, truth):
        kind = self.kind
        if kind is Kind.FALSE:
            return False
        if kind is Kind.TRUE:
            return True
        if kind is Kind.NEGATION:
            return not self.children[0].evaluate(truth)
        if kind is Kind.VARIABLE:
            return truth.get(self.value)
        if kind is Kind.BINARY:
            left, right = self.children
            return self.value.apply(left.evaluate(truth), right.evaluate(truth))
        raise AssertionError(f"unknown statement kind {kind!r}")

    def render(self):
        kind = self.kind
        if kind is Kind.FALSE:
            return '0'
        if kind is Kind.TRUE:
            return '1'
        if kind is Kind.NEGATION:
            return '!' + _surround_if_binary(self.children[0])
        if kind is Kind.VARIABLE:
            return self.value
        if kind is Kind.BINARY:
            left, right = self.children
            return f"{_surround_if_binary(left)} {self.value.symbol} {_surround_if_binary(right)}"
        raise AssertionError(f"unknown statement kind {kind!r}")

    def variables(self):
        """Set of letters used in this statement."""
        if self.kind is Kind.VARIABLE:
            return {self.value}
        found = set()
        for child in self.children:
            found |= child.variables()
        return found

    def __eq__(self, other):
        if not isinstance(other, Stmt):
            return NotImplemented
        return (self.kind, self.value, self.children) == (other.kind, other.value, other.children)

    def __hash__(self):
        return hash((self.kind, self.value, self.children))

    def __str__(self):
        return self.render()

    def __repr__(self):
        if self.kind is Kind.VARIABLE:
            return f"Var({self.value})"
        if self.kind is Kind.NEGATION:
            return f"Not({self.children[0]!r})"
        if self.kind is Kind.BINARY:
            return f"{self.value.name.title()}({self.children[0]!r},{self.children[1]!r})"
        return self.kind.name.title() + '()'


def _surround_if_binary(stmt):
    if stmt.is_binary:
        return '(' + stmt.render() + ')'
    return stmt.render()


def constant(value):
    return Stmt(Kind.TRUE if value else Kind.FALSE)


def var(letter):
    return Stmt(Kind.VARIABLE, letter)


def negate(stmt):
    return Stmt(Kind.NEGATION, children=(stmt,))


def binary(left, op, right):
    if not isinstance(op, Operator):
        op = Operator(op)
    return Stmt(Kind.BINARY, op, (left, right))
