from pyrsistent import pmap

from turing.errors import ValidationError, ValidationKind


class Tape:
    """Sparse, two-way infinite tape.

    Only non-blank cells are stored. Writing the blank symbol to a cell
    removes it, so two tapes with the same content always compare equal.
    Every write returns a new tape; existing tapes are never changed.
    """

    __slots__ = ("_blank_symbol", "_cells")

    def __init__(self, blank_symbol, cells=None):
        cells = pmap(cells or {})
        blank_positions = [pos for pos, symbol in cells.items() if symbol == blank_symbol]
        if blank_positions:
            evolver = cells.evolver()
            for pos in blank_positions:
                del evolver[pos]
            cells = evolver.persistent()
        self._blank_symbol = blank_symbol
        self._cells = cells

    @classmethod
    def empty(cls, blank_symbol):
        return cls(blank_symbol)

    @classmethod
    def from_list(cls, blank_symbol, cell_list):
        """Build a tape from (position, symbol) pairs, later pairs winning."""
        tape = cls.empty(blank_symbol)
        for position, symbol in cell_list:
            tape = tape.write_cell(position, symbol)
        return tape

    def to_list(self):
        """Non-blank cells as (position, symbol) pairs ordered by position."""
        return [(pos, self._cells[pos]) for pos in sorted(self._cells)]

    @property
    def blank_symbol(self):
        return self._blank_symbol

    @property
    def cells(self):
        return self._cells

    def nonblank_cell_indices(self):
        return set(self._cells.keys())

    def read_cell(self, position):
        return self._cells.get(position, self._blank_symbol)

    def write_cell(self, position, symbol):
        if symbol == self._blank_symbol:
            cells = self._cells.discard(position)
        else:
            cells = self._cells.set(position, symbol)
        return Tape(self._blank_symbol, cells)

    def validate(self, alphabet):
        """Return the tape if every symbol on it belongs to ``alphabet``."""
        if self._blank_symbol not in alphabet:
            raise ValidationError(
                ValidationKind.BLANK_SYMBOL_NOT_IN_ALPHABET,
                f"The tape's blank symbol {self._blank_symbol!r} is not part of the alphabet",
            )
        for position in sorted(self._cells):
            symbol = self._cells[position]
            if symbol not in alphabet:
                raise ValidationError(
                    ValidationKind.TAPE_SYMBOL_NOT_IN_ALPHABET,
                    f"The symbol {symbol!r} at cell {position} is not part of the alphabet",
                )
        return self

    def __eq__(self, other):
        if not isinstance(other, Tape):
            return NotImplemented
        return self._blank_symbol == other._blank_symbol and self._cells == other._cells

    def __hash__(self):
        return hash((self._blank_symbol, self._cells))

    def __repr__(self):
        return f"Tape(blank_symbol={self._blank_symbol!r}, cells={dict(self.to_list())!r})"
