"""Dictionaries for synset-align."""

from synset_align.dictionaries.base import BaseDictionary
from synset_align.dictionaries.wordnet import WordNetDataDictionary

__all__ = ["BaseDictionary", "WordNetDataDictionary"]
