"""Base dictionary interface."""

from abc import ABC, abstractmethod

from synset_align.schema import EditionDescriptor, PartOfSpeech, Synset


class BaseDictionary(ABC):
    """Abstract base class for dictionaries that synsets are mapped between."""

    @property
    @abstractmethod
    def version(self) -> EditionDescriptor:
        """Edition descriptor identifying this dictionary."""
        pass

    @abstractmethod
    def synset_at(self, pos: PartOfSpeech, offset: int) -> Synset:
        """Resolve a synset by part of speech and edition-local offset.

        Raises:
            DictionaryError: If no synset exists at that offset.
        """
        pass
