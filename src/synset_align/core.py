"""Core dictionary lookup function."""

from synset_align.alignment.engine import InterLingualIndex, default_index
from synset_align.alignment.repository import data_file_path, dictionary_root
from synset_align.dictionaries.base import BaseDictionary
from synset_align.dictionaries.wordnet import WordNetDataDictionary
from synset_align.exceptions import DictionaryError
from synset_align.schema import EditionDescriptor

# source tag -> (publisher, version number)
DICTIONARY_SOURCES: dict[str, tuple[str, str]] = {
    "wn31": ("Princeton", "3.1"),
    "wn30": ("Princeton", "3.0"),
    "wn21": ("Princeton", "2.1"),
    "mcr30": ("MCR", "3.0"),
}


def _select_source(source: str) -> tuple[str, str]:
    source_name = source.strip().lower()
    if source_name not in DICTIONARY_SOURCES:
        raise DictionaryError(f"Unknown dictionary source: {source_name}")
    return DICTIONARY_SOURCES[source_name]


def get_dictionary(
    source: str,
    language: str,
    *,
    index: InterLingualIndex | None = None,
) -> BaseDictionary:
    """Get a dictionary for a language from a known packaged source.

    Args:
        source: One of ``wn31``, ``wn30``, ``wn21`` (Princeton WordNet) or
            ``mcr30`` (Multilingual Central Repository 3.0).
        language: ISO 639-3 language code, e.g. ``eng`` or ``spa``.
        index: Index whose resource loader and configuration are used.
            Defaults to the process-wide index.

    Returns:
        Dictionary resolving synsets of that edition.

    Raises:
        DictionaryError: If the source is unknown or its data is unavailable.
    """
    index = index or default_index()
    publisher, number = _select_source(source)
    language_code = language.strip().lower()
    root = dictionary_root(source.strip().lower(), language_code, index.config.bridge_language)
    if not index.loader.exists(data_file_path(root, "noun")):
        raise DictionaryError(f"Dictionary resource unavailable: {root}")

    version = EditionDescriptor(publisher=publisher, language=language_code, number=number)
    return WordNetDataDictionary(version, root, index.loader, comment_marker=index.config.comment_marker)
