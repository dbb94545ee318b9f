import logging

from .errors import ParseError, ChainedOperatorError, NestingTooDeepError
from .lexer import LexemeType, lex
from .stmt import Operator, constant, var, negate, binary, Kind
from .truth import alpha_to_idx, build_index

logger = logging.getLogger(__name__)

# Parser states within one grouping level
EXPECT_STMT = 0
EXPECT_OP_OR_CLOSE = 1
EXPECT_CLOSE = 2

# Deepest group nesting accepted. Parsing, evaluation and rendering all recurse
# once or twice per level, so this stays well under the interpreter limit.
MAX_NESTING = 256


class _Operand:
    """One side of a (possibly) binary statement and its pending negation."""

    def __init__(self):
        self.inner = None
        self.negated = False

    def negate(self):
        # parity only: '!!' cancels out
        self.negated = not self.negated

    def build(self):
        if not self.negated:
            return self.inner
        if self.inner.kind is Kind.NEGATION:
            # !(!x) collapses the same way !!x does
            return self.inner.children[0]
        return negate(self.inner)


def _parse_group(lexemes, depth):
    """Parse one grouping level, returning ``(stmt, occurred)``.

    Consumes ``lexemes`` up to and including the ``)`` that closes this level,
    or to the end of the stream at the top level. ``occurred`` is the bitmask
    of canonical variable indices seen in the group.
    """
    state = EXPECT_STMT
    left = _Operand()
    right = _Operand()
    op = None
    occurred = 0
    closed = False

    for lexeme in lexemes:
        typ = lexeme.type
        if state == EXPECT_STMT:
            operand = left if op is None else right
            if typ is LexemeType.FALSE:
                operand.inner = constant(False)
            elif typ is LexemeType.TRUE:
                operand.inner = constant(True)
            elif typ is LexemeType.NEGATE:
                operand.negate()
                continue
            elif typ is LexemeType.OPEN:
                if depth >= MAX_NESTING:
                    raise NestingTooDeepError(MAX_NESTING, lexeme.pos)
                operand.inner, sub = _parse_group(lexemes, depth + 1)
                occurred |= sub
            elif typ is LexemeType.VARIABLE:
                occurred |= 1 << alpha_to_idx(lexeme.char)
                operand.inner = var(lexeme.char)
            else:
                raise ParseError(f"Unexpected {lexeme.char!r} at {lexeme.pos}: expected a statement", lexeme.pos)
            state = EXPECT_OP_OR_CLOSE if op is None else EXPECT_CLOSE
        elif state == EXPECT_OP_OR_CLOSE:
            if typ is LexemeType.OPERATOR:
                op = Operator(lexeme.char)
                state = EXPECT_STMT
            elif typ is LexemeType.CLOSE:
                closed = True
                break
            else:
                raise ParseError(f"Unexpected {lexeme.char!r} at {lexeme.pos}: expected an operator or ')'",
                                 lexeme.pos)
        else:
            if typ is not LexemeType.CLOSE:
                # the lexer cannot tell 'a & b > c' is ambiguous
                raise ChainedOperatorError(lexeme.char, lexeme.pos)
            closed = True
            break

    if closed and depth == 0:
        raise ParseError("Unexpected ')' with no open group")
    if not closed and depth > 0:
        raise ParseError("Unexpected end of input: unclosed group")
    if state == EXPECT_STMT:
        raise ParseError("Unexpected end of input: expected a statement")

    if op is None:
        return left.build(), occurred
    return binary(left.build(), op, right.build()), occurred


def parse_lexemes(lexemes):
    """Parse an iterable of lexemes into ``(stmt, occurred)``."""
    lexemes = iter(lexemes)
    stmt, occurred = _parse_group(lexemes, 0)
    leftover = next(lexemes, None)
    if leftover is not None:
        raise ParseError(f"Unexpected {leftover.char!r} at {leftover.pos}: extra input after statement",
                         leftover.pos)
    return stmt, occurred


def parse(text):
    """Parse ``text`` into a statement and the index of its variables.

    Returns ``(stmt, index)``. Raises a :class:`~vera.errors.LexError` for
    malformed input and a :class:`~vera.errors.ParseError` for binary
    operators chained without parentheses.
    """
    stmt, occurred = parse_lexemes(lex(text))
    index = build_index(occurred)
    logger.debug("parsed %r as %s", text, stmt)
    return stmt, index
