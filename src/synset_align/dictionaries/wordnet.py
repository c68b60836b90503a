"""Dictionary backed by WordNet-format ``data.*`` files."""

from __future__ import annotations

import logging
import threading

from synset_align.alignment.repository import ResourceLoader, data_file_path, iter_data_file
from synset_align.dictionaries.base import BaseDictionary
from synset_align.exceptions import DictionaryError, ResourceError
from synset_align.schema import EditionDescriptor, PartOfSpeech, Synset


class WordNetDataDictionary(BaseDictionary):
    """Resolves synsets from the ``data.noun``/``data.verb``/... files of one edition."""

    def __init__(
        self,
        version: EditionDescriptor,
        root: str,
        loader: ResourceLoader,
        *,
        comment_marker: str = " ",
    ):
        self._version = version
        self.root = root
        self.loader = loader
        self.comment_marker = comment_marker
        self.logger = logging.getLogger(__name__)
        self._entries: dict[PartOfSpeech, dict[int, str]] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"WordNetDataDictionary({self._version}, root={self.root!r})"

    @property
    def version(self) -> EditionDescriptor:
        return self._version

    def synset_at(self, pos: PartOfSpeech, offset: int) -> Synset:
        line = self._index(pos).get(offset)
        if line is None:
            raise DictionaryError(f"No {pos} synset at offset {offset} in {self._version}")
        return self._parse_synset(pos, offset, line)

    def _index(self, pos: PartOfSpeech) -> dict[int, str]:
        entries = self._entries.get(pos)
        if entries is not None:
            return entries
        with self._lock:
            entries = self._entries.get(pos)
            if entries is None:
                entries = self._load_entries(pos)
                self._entries[pos] = entries
        return entries

    def _load_entries(self, pos: PartOfSpeech) -> dict[int, str]:
        path = data_file_path(self.root, pos)
        lines = self.loader.read_lines(path)
        if lines is None:
            self.logger.debug("No %s data file for %s", pos, self._version)
            return {}
        entries = dict(iter_data_file(lines, path, self.comment_marker))
        self.logger.info("Indexed %d %s synsets from %s", len(entries), pos, path)
        return entries

    def _parse_synset(self, pos: PartOfSpeech, offset: int, line: str) -> Synset:
        # <offset> <lex_filenum> <ss_type> <w_cnt> <word> <lex_id> ... | <gloss>
        head, _, gloss = line.partition(" | ")
        fields = head.split(" ")
        try:
            word_count = int(fields[3], 16)
            words = fields[4 : 4 + 2 * word_count : 2]
        except (IndexError, ValueError) as exc:
            raise ResourceError(f"Malformed synset entry at offset {offset} in {self.root}") from exc
        if len(words) != word_count:
            raise ResourceError(f"Truncated synset entry at offset {offset} in {self.root}")
        return Synset(
            edition=self._version,
            pos=pos,
            offset=offset,
            lemmas=tuple(word.replace("_", " ") for word in words),
            gloss=gloss.strip() or None,
        )
