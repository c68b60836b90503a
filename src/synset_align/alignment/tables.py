"""Alignment tables mapping synset offsets between two editions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

from synset_align.exceptions import ReadOnlyTableError, UnlinkedTableError
from synset_align.schema import PARTS_OF_SPEECH, PartOfSpeech

TableKind = Literal["direct", "composed"]


class AlignmentTable(ABC):
    """Offset-to-offset mapping, optionally linked to its inverse table."""

    kind: TableKind

    def __init__(self) -> None:
        self._reverse: AlignmentTable | None = None

    @property
    def reverse(self) -> AlignmentTable | None:
        return self._reverse

    def get_reverse(self) -> AlignmentTable:
        if self._reverse is None:
            raise UnlinkedTableError(f"{self!r} has no linked reverse table")
        return self._reverse

    def link_reverse(self, other: AlignmentTable) -> None:
        """Link ``other`` as this table's inverse, and this table as ``other``'s."""
        if other is self:
            raise ValueError("A table cannot be its own reverse")
        for table in (self, other):
            previous = table._reverse
            if previous is not None and previous._reverse is table:
                previous._reverse = None
        self._reverse = other
        other._reverse = self

    @abstractmethod
    def lookup(self, pos: PartOfSpeech, offset: int) -> int | None:
        """Return the target offset for ``offset``, or None when unmapped."""
        pass

    @abstractmethod
    def add_mapping(
        self,
        pos: PartOfSpeech,
        first: int,
        second: int,
        with_reverse: bool = True,
    ) -> None:
        pass


class DirectTable(AlignmentTable):
    """Alignment table backed by in-memory dictionaries, one per part of speech."""

    kind: TableKind = "direct"

    def __init__(self) -> None:
        super().__init__()
        self._mappings: dict[PartOfSpeech, dict[int, int]] = {pos: {} for pos in PARTS_OF_SPEECH}

    def __len__(self) -> int:
        return sum(len(mapping) for mapping in self._mappings.values())

    def __repr__(self) -> str:
        return f"DirectTable(size={len(self)})"

    def lookup(self, pos: PartOfSpeech, offset: int) -> int | None:
        return self._mappings[pos].get(offset)

    def add_mapping(
        self,
        pos: PartOfSpeech,
        first: int,
        second: int,
        with_reverse: bool = True,
    ) -> None:
        if with_reverse and self._reverse is None:
            raise UnlinkedTableError("Cannot add a reverse mapping before a reverse table is linked")
        self._mappings[pos][first] = second
        if with_reverse:
            self._reverse.add_mapping(pos, second, first, with_reverse=False)


class ComposedTable(AlignmentTable):
    """Alignment table which chains a lookup through two other tables."""

    kind: TableKind = "composed"

    def __init__(self, first: AlignmentTable, second: AlignmentTable) -> None:
        super().__init__()
        if first.kind == "composed" or second.kind == "composed":
            raise ValueError("Composed tables may only chain direct tables")
        self.first = first
        self.second = second

    def __repr__(self) -> str:
        return f"ComposedTable({self.first!r}, {self.second!r})"

    def lookup(self, pos: PartOfSpeech, offset: int) -> int | None:
        intermediate = self.first.lookup(pos, offset)
        if intermediate is None:
            return None
        return self.second.lookup(pos, intermediate)

    def add_mapping(
        self,
        pos: PartOfSpeech,
        first: int,
        second: int,
        with_reverse: bool = True,
    ) -> None:
        raise ReadOnlyTableError("Composed tables are derived from their constituents and cannot be modified")

    def build_reverse(self) -> ComposedTable:
        """Compose the constituents' reverses in opposite order and link the result."""
        reverse = ComposedTable(self.second.get_reverse(), self.first.get_reverse())
        self.link_reverse(reverse)
        return reverse
