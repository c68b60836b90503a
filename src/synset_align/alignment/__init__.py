"""Synset alignment between dictionary editions."""

from synset_align.alignment.cache import TableCache
from synset_align.alignment.engine import AlignmentConfig, InterLingualIndex, default_index, load_mapper, map_synset
from synset_align.alignment.mapper import AlignedMapper, IdentityMapper, SynsetMapper
from synset_align.alignment.tables import AlignmentTable, ComposedTable, DirectTable

__all__ = [
    "AlignedMapper",
    "AlignmentConfig",
    "AlignmentTable",
    "ComposedTable",
    "DirectTable",
    "IdentityMapper",
    "InterLingualIndex",
    "SynsetMapper",
    "TableCache",
    "default_index",
    "load_mapper",
    "map_synset",
]
