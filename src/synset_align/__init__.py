"""synset-align: Map word senses between dictionary editions and languages."""

from synset_align.alignment import InterLingualIndex, SynsetMapper, load_mapper, map_synset
from synset_align.core import get_dictionary
from synset_align.schema import EditionDescriptor, Synset

__version__ = "0.1.0"

__all__ = [
    "get_dictionary",
    "load_mapper",
    "map_synset",
    "EditionDescriptor",
    "InterLingualIndex",
    "Synset",
    "SynsetMapper",
    "__version__",
]
