"""Error types raised while lexing, parsing and enumerating statements.

Every error carries the data a caller needs to build its own diagnostic
(offending character, position in the whitespace-stripped input, the set of
characters that would have been accepted) so nothing has to be parsed back
out of the message.
"""


class VeraError(Exception):
    """Base class for everything raised by this package."""


# Tokenizing errors

class LexError(VeraError):
    def __init__(self, msg, position):
        super().__init__(msg)
        self.position = position


class UnexpectedCharError(LexError):
    def __init__(self, char, position, expected, expected_desc):
        super().__init__(f"Unexpected character at {position}: {char!r}; expected {expected_desc}", position)
        self.char = char
        self.expected = expected


class UnmatchedCloseError(LexError):
    def __init__(self, position):
        super().__init__(f"Unexpected ')' at {position}: no corresponding '('", position)
        self.char = ')'


class UnexpectedEOFError(LexError):
    def __init__(self, position, depth=0):
        if depth:
            msg = f"Unexpected end of input at {position}: {depth} unclosed '('"
        else:
            msg = f"Unexpected end of input at {position}"
        super().__init__(msg, position)
        self.depth = depth


# Parsing errors

class ParseError(VeraError):
    def __init__(self, msg, position=None):
        super().__init__(msg)
        self.position = position


class ChainedOperatorError(ParseError):
    """Two binary operators at one grouping level, e.g. ``a & b > c``."""

    def __init__(self, operator, position):
        super().__init__(
            f"Unexpected operator {operator!r} at {position}: "
            f"chained operators need parentheses", position)
        self.operator = operator


class NestingTooDeepError(ParseError):
    def __init__(self, limit, position):
        super().__init__(f"Unexpected '(' at {position}: groups nested deeper than {limit} levels", position)
        self.limit = limit


# Enumeration errors

class NoVariablesError(VeraError):
    def __init__(self):
        super().__init__("Statement has no variables; there are no assignments to enumerate")