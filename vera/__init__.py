from .errors import (
    VeraError, LexError, UnexpectedCharError, UnmatchedCloseError, UnexpectedEOFError,
    ParseError, ChainedOperatorError, NestingTooDeepError, NoVariablesError,
)
from .lexer import Lexeme, LexemeType, lex, tokenize
from .parser import parse
from .stmt import Stmt, Kind, Operator
from .truth import Truth, VariableIndex, alpha_to_idx, idx_to_alpha
from .table import render_table, truth_table, PRETTY_BOX, ASCII_BOX

__version__ = '0.1.0'
