"""Truth table rendering.

Layout (with the Unicode charset)::

    ┌───────┬───────────┐
    │a  b  c│(a & b) > c│
    ├───────┼───────────┤
    │0  0  0│     1     │
    ...
    └───────┴───────────┘
"""
import sys
from collections import namedtuple

from colorama import Fore, Style

from .errors import NoVariablesError

CharSet = namedtuple('CharSet', [
    'row_sep', 'col_sep', 'center', 'top_t', 'bottom_t', 'left_t', 'right_t',
    'tl_corner', 'tr_corner', 'bl_corner', 'br_corner',
])

PRETTY_BOX = CharSet('─', '│', '┼', '┬', '┴', '├', '┤', '┌', '┐', '└', '┘')
ASCII_BOX = CharSet('-', '|', '+', '+', '+', '+', '+', '+', '+', '+', '+')

COLUMN_GAP = '  '


def truth_table(stmt, index):
    """Return ``[(truth, result), ...]`` for every assignment of ``index``."""
    return [(truth, stmt.evaluate(truth)) for truth in index.assignments()]


def _input_width(n):
    return n + len(COLUMN_GAP) * (n - 1)


def _center(text, width):
    return text.rjust((width + len(text)) // 2).ljust(width)


def _paint(text, on, colorize):
    if not colorize:
        return text
    return (Fore.GREEN if on else Fore.RED) + text + Style.RESET_ALL


class _TableWriter:
    def __init__(self, out, charset, n_inputs, output_width, colorize):
        self.out = out
        self.cs = charset
        self.input_width = _input_width(n_inputs)
        self.output_width = output_width
        self.colorize = colorize

    def line(self, left, middle, right):
        cs = self.cs
        print(left + cs.row_sep * self.input_width + middle + cs.row_sep * self.output_width + right,
              file=self.out)

    def row(self, inputs, output):
        sep = self.cs.col_sep
        print(sep + inputs + sep + output + sep, file=self.out)

    def data(self, truth, result):
        bits = truth.as_dict().values()
        inputs = COLUMN_GAP.join(_paint(str(int(bit)), bit, self.colorize) for bit in bits)
        output = _paint(_center(str(int(result)), self.output_width), result, self.colorize)
        self.row(inputs, output)


def render_table(stmt, index, out=None, charset=PRETTY_BOX, colorize=True):
    """Write the truth table of ``stmt`` to ``out`` (default stdout).

    Columns are the variables in canonical order followed by the statement;
    rows follow the enumeration order of ``index`` and are written as they
    are evaluated.
    """
    if not index:
        raise NoVariablesError()
    if out is None:
        out = sys.stdout
    header = stmt.render()
    cs = charset
    w = _TableWriter(out, cs, len(index), len(header), colorize)
    w.line(cs.tl_corner, cs.top_t, cs.tr_corner)
    w.row(COLUMN_GAP.join(index.names), header)
    w.line(cs.left_t, cs.center, cs.right_t)
    for truth in index.assignments():
        w.data(truth, stmt.evaluate(truth))
    w.line(cs.bl_corner, cs.bottom_t, cs.br_corner)
