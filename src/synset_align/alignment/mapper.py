"""Reusable synset mappers returned by the resolution engine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from synset_align.alignment.tables import AlignmentTable
from synset_align.dictionaries.base import BaseDictionary
from synset_align.schema import Synset


class SynsetMapper(ABC):
    """Translates synsets from one dictionary edition to another."""

    @abstractmethod
    def map_synset(self, synset: Synset) -> Synset | None:
        """Map a synset into the target dictionary.

        Args:
            synset: Synset from the source dictionary.

        Returns:
            The equivalent synset in the target dictionary, or None if the
            target edition has no corresponding sense.
        """
        pass


class IdentityMapper(SynsetMapper):
    """Mapper between a dictionary and itself."""

    def map_synset(self, synset: Synset) -> Synset:
        return synset


class AlignedMapper(SynsetMapper):
    """Mapper backed by an alignment table and the target dictionary."""

    def __init__(self, table: AlignmentTable, target: BaseDictionary):
        self.table = table
        self.target = target

    def map_synset(self, synset: Synset) -> Synset | None:
        target_offset = self.table.lookup(synset.pos, synset.offset)
        if target_offset is None:
            return None
        return self.target.synset_at(synset.pos, target_offset)
