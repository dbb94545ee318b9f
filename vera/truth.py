"""Variable index and assignment enumeration.

Variables are single ASCII letters, ordered canonically with ``A``-``Z`` at
indices 0-25 and ``a``-``z`` at 26-51. A parse records which letters occurred
as a bitmask over those indices; :func:`build_index` then gives each occurring
letter a dense shift ``0..k-1`` in canonical order, so an assignment of truth
values to all ``k`` variables is just an integer in ``[0, 2**k)`` where bit
``s`` holds the value of the variable with shift ``s``. Counting that integer
up from 0 visits every assignment::

    stmt, index = parse("a & (b | !C)")
    for truth in index.assignments():
        print(truth, stmt.evaluate(truth))
"""
import logging

from .errors import NoVariablesError

logger = logging.getLogger(__name__)

MAX_VARIABLES = 52


def alpha_to_idx(letter):
    """Map ``'A'`` -> 0 ... ``'Z'`` -> 25, ``'a'`` -> 26 ... ``'z'`` -> 51."""
    code = ord(letter)
    if code >= ord('a'):
        return code - ord('a') + 26
    return code - ord('A')


def idx_to_alpha(idx):
    if idx >= 26:
        return chr(idx - 26 + ord('a'))
    return chr(idx + ord('A'))


class Truth:
    """One assignment of truth values: an integer plus the table to decode it.

    ``names[i]`` is the variable stored in bit ``i`` of ``value``.
    """

    __slots__ = ('value', 'shifts', 'names')

    def __init__(self, value, shifts, names):
        self.value = value
        self.shifts = shifts
        self.names = names

    def get(self, letter):
        shift = self.shifts[alpha_to_idx(letter)]
        if shift is None:
            raise KeyError(letter)
        return bool(self.value >> shift & 1)

    def as_dict(self):
        return {name: bool(self.value >> i & 1) for i, name in enumerate(self.names)}

    def __eq__(self, other):
        if not isinstance(other, Truth):
            return NotImplemented
        return self.value == other.value and self.names == other.names

    def __hash__(self):
        return hash((self.value, self.names))

    def __str__(self):
        return '{' + ','.join(f"{name}:{int(val)}" for name, val in self.as_dict().items()) + '}'

    def __repr__(self):
        return f"Truth({self.value},{''.join(self.names)!r})"


class VariableIndex:
    """Shift table and ordered names for the variables of one statement.

    Built once per parse and shared by every assignment it hands out.
    """

    def __init__(self, occurred):
        shifts = [None] * MAX_VARIABLES
        names = []
        for idx in range(MAX_VARIABLES):
            if occurred >> idx & 1:
                shifts[idx] = len(names)
                names.append(idx_to_alpha(idx))
        self.occurred = occurred
        self.shifts = tuple(shifts)
        self.names = tuple(names)

    def __len__(self):
        return len(self.names)

    def __bool__(self):
        return bool(self.names)

    def __repr__(self):
        return f"VariableIndex({''.join(self.names)!r})"

    @property
    def count(self):
        """Number of assignments, ``2**k``."""
        return 1 << len(self.names)

    def truth(self, value):
        if not 0 <= value < self.count:
            raise ValueError(f"Assignment value {value} out of range for {len(self.names)} variables")
        return Truth(value, self.shifts, self.names)

    def assignments(self):
        """Yield every assignment with ``value`` counting up from 0.

        Each call starts a fresh sweep. Raises :class:`NoVariablesError`
        when the statement has no variables.
        """
        if not self.names:
            raise NoVariablesError()
        return self._sweep()

    def _sweep(self):
        for value in range(self.count):
            yield Truth(value, self.shifts, self.names)


def build_index(occurred):
    index = VariableIndex(occurred)
    logger.debug("variable index %s from occurrence set %#x", ''.join(index.names) or '(none)', occurred)
    return index
