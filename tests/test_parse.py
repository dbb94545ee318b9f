import logging

import pytest

from vera import parse
from vera.errors import ChainedOperatorError, LexError, NestingTooDeepError, ParseError, UnexpectedCharError, \
    UnexpectedEOFError, UnmatchedCloseError, VeraError
from vera.lexer import Lexeme, LexemeType as T
from vera.parser import parse_lexemes, MAX_NESTING
from vera.stmt import Kind, Operator, Stmt


def results(text):
    stmt, index = parse(text)
    return [stmt.evaluate(t) for t in index.assignments()]


@pytest.mark.parametrize("text,expected", [
    ("a", [False, True]),
    ("(a)", [False, True]),
    ("((a))", [False, True]),
    ("a&b", [False, False, False, True]),
    ("a|b", [False, True, True, True]),
    ("a^b", [False, True, True, False]),
    ("a>b", [True, False, True, True]),
    ("a=b", [True, False, False, True]),
    ("a|!0", [True, True]),
    ("(a & b)", [False, False, False, True]),
    ("!(a > b)", [False, True, False, False]),
    ("!!(a = b)", [True, False, False, True]),
    ("(a = b) | b", [True, False, True, True]),
    ("a & !a", [False, False]),
    ("A & a", [False, False, False, True]),
])
def test_truth_values(text, expected):
    assert results(text) == expected


@pytest.mark.parametrize("text,value", [("0", False), ("1", True), ("!0", True), ("!!0", False), ("(1 & 0)", False)])
def test_constant_statements(text, value):
    stmt, index = parse(text)
    assert not index
    assert stmt.evaluate(None) is value


def test_variables_reported_once_in_canonical_order():
    stmt, index = parse("(z & a) | (B > (a ^ Z))")
    assert index.names == ('B', 'Z', 'a', 'z')
    assert stmt.variables() == {'B', 'Z', 'a', 'z'}


def test_extreme_assignments():
    stmt, index = parse("(a & b) & (c & D)")
    assert stmt.evaluate(index.truth(0)) is False
    assert stmt.evaluate(index.truth(index.count - 1)) is True
    assert all(not v for v in index.truth(0).as_dict().values())
    assert all(index.truth(index.count - 1).as_dict().values())


def test_tree_shape():
    stmt, _ = parse("!(a & b) > 1")
    assert stmt.kind is Kind.BINARY
    assert stmt.value is Operator.COND
    left, right = stmt.children
    assert left.kind is Kind.NEGATION
    assert left.children[0].value is Operator.AND
    assert right.kind is Kind.TRUE


def test_negation_parity():
    stmt, _ = parse("!!!a")
    assert stmt.kind is Kind.NEGATION
    assert stmt.children[0].kind is Kind.VARIABLE
    stmt, _ = parse("!!a")
    assert stmt.kind is Kind.VARIABLE


def test_chained_operators_rejected():
    with pytest.raises(ChainedOperatorError) as exc:
        parse("a & b > c")
    assert exc.value.operator == '>'
    assert exc.value.position == 3


def test_chained_operators_inside_group_rejected():
    with pytest.raises(ChainedOperatorError):
        parse("a | (b & c & d)")


@pytest.mark.parametrize("text,error", [
    ("", UnexpectedEOFError),
    ("()", UnexpectedCharError),
    ("(", UnexpectedEOFError),
    (")", UnexpectedCharError),
    ("^a", UnexpectedCharError),
    ("a>", UnexpectedEOFError),
    ("a)", UnmatchedCloseError),
])
def test_invalid_input(text, error):
    with pytest.raises(error):
        parse(text)


def test_errors_share_base():
    for text in ["", "a & b & c", "a$"]:
        with pytest.raises(VeraError):
            parse(text)
    assert issubclass(UnexpectedEOFError, LexError)
    assert issubclass(ChainedOperatorError, ParseError)


def test_parse_lexemes_rejects_stray_close():
    lexemes = [Lexeme(T.VARIABLE, 'a', 0), Lexeme(T.CLOSE, ')', 1)]
    with pytest.raises(ParseError):
        parse_lexemes(lexemes)


def test_parse_lexemes_rejects_premature_end():
    with pytest.raises(ParseError):
        parse_lexemes([Lexeme(T.VARIABLE, 'a', 0), Lexeme(T.OPERATOR, '&', 1)])
    with pytest.raises(ParseError):
        parse_lexemes([Lexeme(T.OPEN, '(', 0), Lexeme(T.VARIABLE, 'a', 1)])


def nested(depth):
    return "(a & " * depth + "a" + ")" * depth


def test_deepest_allowed_nesting():
    stmt, index = parse(nested(MAX_NESTING))
    assert index.names == ('a',)
    # the outermost group adds no parentheses of its own
    assert stmt.render().count('(') == MAX_NESTING - 1
    assert [stmt.evaluate(t) for t in index.assignments()] == [False, True]


@pytest.mark.parametrize("depth", [MAX_NESTING + 1, 2000])
def test_too_deep_nesting(depth):
    with pytest.raises(NestingTooDeepError) as exc:
        parse(nested(depth))
    assert exc.value.limit == MAX_NESTING
    assert exc.value.position == MAX_NESTING * 3


def test_too_deep_plain_groups():
    with pytest.raises(NestingTooDeepError):
        parse("(" * 2000 + "a" + ")" * 2000)


def test_parse_does_not_render(monkeypatch, caplog):
    caplog.set_level(logging.WARNING, logger="vera.parser")
    calls = []
    original = Stmt.render

    def spy(self):
        calls.append(self)
        return original(self)

    monkeypatch.setattr(Stmt, "render", spy)
    parse("a & b")
    assert calls == []
