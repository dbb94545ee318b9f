import logging
from enum import Enum
from string import ascii_letters

from .errors import UnexpectedCharError, UnmatchedCloseError, UnexpectedEOFError

logger = logging.getLogger(__name__)

NEGATE_SYM = '!'
AND_SYM = '&'
OR_SYM = '|'
XOR_SYM = '^'
COND_SYM = '>'
BICOND_SYM = '='
OPERATOR_SYMS = AND_SYM + OR_SYM + XOR_SYM + COND_SYM + BICOND_SYM

# Characters accepted in each lexer state
VALUE_START = frozenset(NEGATE_SYM + '(01' + ascii_letters)
OPERATOR_OR_CLOSE = frozenset(')' + OPERATOR_SYMS)

_VALUE_START_DESC = "'!', '(', '0', '1', or a variable"
_OPERATOR_OR_CLOSE_DESC = "')', " + ', '.join(repr(c) for c in OPERATOR_SYMS[:-1]) + f", or {OPERATOR_SYMS[-1]!r}"


class LexemeType(Enum):
    FALSE = 'false'
    TRUE = 'true'
    NEGATE = 'negate'
    OPERATOR = 'operator'
    OPEN = 'open'
    CLOSE = 'close'
    VARIABLE = 'variable'


class Lexeme:
    __slots__ = ('type', 'char', 'pos')

    def __init__(self, typ, char, pos):
        self.type = typ
        self.char = char
        self.pos = pos

    def __eq__(self, other):
        if not isinstance(other, Lexeme):
            return NotImplemented
        return (self.type, self.char, self.pos) == (other.type, other.char, other.pos)

    def __hash__(self):
        return hash((self.type, self.char, self.pos))

    def __repr__(self):
        return f"Lexeme({self.type.name},{self.char!r},{self.pos})"


def remove_whitespace(text):
    return ''.join(ch for ch in text if not ch.isspace())


def is_variable_char(ch):
    # str.isalpha() would also accept non-ASCII letters
    return ch in ascii_letters


class _Lexer:
    """Two-state scanner over whitespace-stripped input.

    ``_value`` expects the start of a statement, ``_operator`` expects a binary
    operator or a closing parenthesis. End of input is only valid in
    ``_operator`` with no open groups.
    """

    def __init__(self, text):
        self.input = remove_whitespace(text)
        self.depth = 0

    def _value(self, ch, pos):
        if ch == NEGATE_SYM:
            return LexemeType.NEGATE, self._value
        if ch == '(':
            self.depth += 1
            return LexemeType.OPEN, self._value
        if ch == '0':
            return LexemeType.FALSE, self._operator
        if ch == '1':
            return LexemeType.TRUE, self._operator
        if is_variable_char(ch):
            return LexemeType.VARIABLE, self._operator
        raise UnexpectedCharError(ch, pos, VALUE_START, _VALUE_START_DESC)

    def _operator(self, ch, pos):
        if ch == ')':
            if self.depth == 0:
                raise UnmatchedCloseError(pos)
            self.depth -= 1
            return LexemeType.CLOSE, self._operator
        if ch in OPERATOR_SYMS:
            return LexemeType.OPERATOR, self._value
        raise UnexpectedCharError(ch, pos, OPERATOR_OR_CLOSE, _OPERATOR_OR_CLOSE_DESC)

    def run(self):
        state = self._value
        for pos, ch in enumerate(self.input):
            typ, state = state(ch, pos)
            yield Lexeme(typ, ch, pos)
        if state != self._operator or self.depth:
            raise UnexpectedEOFError(len(self.input), self.depth)
        logger.debug("lexed %d characters", len(self.input))


def lex(text):
    """Yield the lexemes of ``text`` in input order.

    Whitespace is dropped before scanning, so positions in lexemes and errors
    index into the stripped string. The first error is raised from the
    generator; nothing is yielded after it.
    """
    return _Lexer(text).run()


def tokenize(text):
    return list(lex(text))
