"""Resolution engine deciding how to align two dictionary editions."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache, partial

from synset_align.alignment.cache import TableCache
from synset_align.alignment.mapper import AlignedMapper, IdentityMapper, SynsetMapper
from synset_align.alignment.repository import (
    ResourceLoader,
    build_offset_list,
    data_file_path,
    dictionary_root,
    iter_inter_lingual_index,
    iter_version_bridge,
)
from synset_align.alignment.tables import AlignmentTable, ComposedTable, DirectTable
from synset_align.dictionaries.base import BaseDictionary
from synset_align.exceptions import MalformedResourceError, MappingUnavailableError, ResourceError
from synset_align.schema import EditionDescriptor, PartOfSpeech, Synset

logger = logging.getLogger(__name__)

BuildStep = Callable[[TableCache], None]


@dataclass(frozen=True)
class AlignmentConfig:
    data_dir: str | None = None
    bridge_language: str = "eng"
    bridge_publisher: str = "Princeton"
    older_bridge_version: str = "3.0"
    newer_bridge_version: str = "3.1"
    foreign_publisher: str = "MCR"
    foreign_version: str = "3.0"
    foreign_source: str = "mcr30"
    version_bridge_resource: str = "alignment/wn31-wn30.csv"
    ili_resource_template: str = "alignment/{language}-ili.csv"
    comment_marker: str = " "

    @classmethod
    def from_env(cls) -> "AlignmentConfig":
        return cls(
            data_dir=os.getenv("SYNSET_ALIGN_DATA_DIR") or None,
            bridge_language=os.getenv("SYNSET_ALIGN_BRIDGE_LANGUAGE", "eng").strip().lower() or "eng",
            version_bridge_resource=os.getenv("SYNSET_ALIGN_VERSION_BRIDGE", "alignment/wn31-wn30.csv"),
            ili_resource_template=os.getenv("SYNSET_ALIGN_ILI_TEMPLATE", "alignment/{language}-ili.csv"),
        )

    @property
    def older_bridge_edition(self) -> EditionDescriptor:
        return EditionDescriptor(
            publisher=self.bridge_publisher,
            language=self.bridge_language,
            number=self.older_bridge_version,
        )

    @property
    def newer_bridge_edition(self) -> EditionDescriptor:
        return EditionDescriptor(
            publisher=self.bridge_publisher,
            language=self.bridge_language,
            number=self.newer_bridge_version,
        )


class InterLingualIndex:
    """Builds, caches and hands out synset mappers between dictionary editions.

    Supported alignments:

    * the two bridge-language versions, from the version-bridge resource;
    * a foreign-language edition and the older bridge version, from that
      language's inter-lingual index resource;
    * a foreign-language edition and the newer bridge version, by composing
      the two tables above.
    """

    def __init__(
        self,
        config: AlignmentConfig | None = None,
        *,
        cache: TableCache | None = None,
        loader: ResourceLoader | None = None,
    ):
        self.config = config or AlignmentConfig()
        self.cache = cache if cache is not None else TableCache()
        self.loader = loader or ResourceLoader(self.config.data_dir)

    def load_mapper(self, source: BaseDictionary, target: BaseDictionary) -> SynsetMapper:
        """Return a reusable mapper from ``source`` synsets to ``target`` synsets.

        Raises:
            MappingUnavailableError: If no alignment between the editions is supported.
            ResourceError: If a required bundled resource cannot be read.
        """
        return self._mapper(source.version, target)

    def map_synset(self, synset: Synset, target: BaseDictionary) -> Synset | None:
        return self._mapper(synset.edition, target).map_synset(synset)

    def resolve_table(self, source: EditionDescriptor, target: EditionDescriptor) -> AlignmentTable:
        table = self.cache.get(source, target)
        if table is not None:
            return table

        self.cache.populate(self._plan(source, target))

        table = self.cache.get(source, target)
        if table is None:
            raise MappingUnavailableError(source, target)
        return table

    def _mapper(self, source: EditionDescriptor, target: BaseDictionary) -> SynsetMapper:
        if source == target.version:
            return IdentityMapper()
        return AlignedMapper(self.resolve_table(source, target.version), target)

    def _plan(self, a: EditionDescriptor, b: EditionDescriptor) -> list[BuildStep]:
        """Return build steps for the a/b alignment in dependency order.

        An empty plan means the pair is unsupported.
        """
        config = self.config
        older = config.older_bridge_edition
        newer = config.newer_bridge_edition

        if a.language == b.language:
            if {a, b} == {older, newer}:
                return [self._load_version_bridge]
            return []

        if a.language == config.bridge_language:
            bridge, foreign = a, b
        elif b.language == config.bridge_language:
            bridge, foreign = b, a
        else:
            return []

        if foreign.publisher != config.foreign_publisher or foreign.number != config.foreign_version:
            return []
        if bridge == older:
            return [partial(self._load_inter_lingual_index, foreign)]
        if bridge == newer:
            return [
                partial(self._load_inter_lingual_index, foreign),
                partial(self._compose_with_version_bridge, foreign),
            ]
        return []

    def _load_version_bridge(self, cache: TableCache) -> None:
        older = self.config.older_bridge_edition
        newer = self.config.newer_bridge_edition
        if cache.get(newer, older) is not None:
            return

        path = self.config.version_bridge_resource
        lines = self.loader.read_lines(path)
        if lines is None:
            raise ResourceError(f"Version bridge resource not found: {path}")

        table = DirectTable()
        table.link_reverse(DirectTable())
        for _, pos, newer_offset, older_offset in iter_version_bridge(lines, path):
            table.add_mapping(pos, newer_offset, older_offset)
        logger.info("Loaded %d version bridge mappings from %s", len(table), path)
        cache.insert_pair(newer, older, table)

    def _load_inter_lingual_index(self, foreign: EditionDescriptor, cache: TableCache) -> None:
        older = self.config.older_bridge_edition
        if cache.get(foreign, older) is not None:
            return

        path = self.config.ili_resource_template.format(language=foreign.language)
        lines = self.loader.read_lines(path)
        if lines is None:
            logger.debug("No inter-lingual index for %s at %s", foreign.language, path)
            return

        root = dictionary_root(self.config.foreign_source, foreign.language, self.config.bridge_language)
        offsets: dict[PartOfSpeech, list[int]] = {}
        table = DirectTable()
        table.link_reverse(DirectTable())
        for line_number, pos, index, bridge_offset in iter_inter_lingual_index(lines, path):
            if pos not in offsets:
                offsets[pos] = self._offset_list(root, pos)
            if index >= len(offsets[pos]):
                raise MalformedResourceError(
                    path,
                    line_number,
                    f"{pos} index {index} out of range ({len(offsets[pos])} entries)",
                )
            table.add_mapping(pos, offsets[pos][index], bridge_offset)
        logger.info("Loaded %d inter-lingual mappings for %s from %s", len(table), foreign, path)
        cache.insert_pair(foreign, older, table)

    def _compose_with_version_bridge(self, foreign: EditionDescriptor, cache: TableCache) -> None:
        older = self.config.older_bridge_edition
        newer = self.config.newer_bridge_edition
        if cache.get(foreign, newer) is not None:
            return

        to_older = cache.get(foreign, older)
        if to_older is None:
            logger.debug("No %s => %s table, skipping version bridge", foreign, older)
            return

        self._load_version_bridge(cache)
        bridge = cache.get(older, newer)
        if bridge is None:
            return

        table = ComposedTable(to_older, bridge)
        table.build_reverse()
        cache.insert_pair(foreign, newer, table)

    def _offset_list(self, root: str, pos: PartOfSpeech) -> list[int]:
        path = data_file_path(root, pos)
        lines = self.loader.read_lines(path)
        if lines is None:
            raise ResourceError(f"Data file required by inter-lingual index not found: {path}")
        return build_offset_list(lines, path, self.config.comment_marker)


@lru_cache(maxsize=1)
def default_index() -> InterLingualIndex:
    """Process-wide index configured from the environment, created on first use."""
    return InterLingualIndex(AlignmentConfig.from_env())


def load_mapper(
    source: BaseDictionary,
    target: BaseDictionary,
    *,
    index: InterLingualIndex | None = None,
) -> SynsetMapper:
    """Load a reusable mapper translating ``source`` synsets into ``target``."""

    return (index or default_index()).load_mapper(source, target)


def map_synset(
    synset: Synset,
    target: BaseDictionary,
    *,
    index: InterLingualIndex | None = None,
) -> Synset | None:
    """Map a single synset into ``target``; None if it has no counterpart there."""

    return (index or default_index()).map_synset(synset, target)
