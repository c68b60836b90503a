"""Process-wide store of resolved alignment tables."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from synset_align.alignment.tables import AlignmentTable
from synset_align.schema import EditionDescriptor

logger = logging.getLogger(__name__)


def pair_key(source: EditionDescriptor, target: EditionDescriptor) -> str:
    return f"{source} => {target}"


class TableCache:
    """Grow-only mapping from ``"source => target"`` keys to alignment tables.

    Reads never block. All inserts happen inside :meth:`populate`, which runs
    build steps under a single lock so each table is built at most once.
    """

    def __init__(self) -> None:
        self._tables: dict[str, AlignmentTable] = {}
        self._lock = threading.Lock()
        self._owner: int | None = None

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, key: str) -> bool:
        return key in self._tables

    def get(self, source: EditionDescriptor, target: EditionDescriptor) -> AlignmentTable | None:
        return self._tables.get(pair_key(source, target))

    def keys(self) -> list[str]:
        return list(self._tables)

    def populate(self, steps: Iterable[Callable[[TableCache], None]]) -> None:
        """Run build steps in order while holding the cache lock."""
        with self._lock:
            self._owner = threading.get_ident()
            try:
                for step in steps:
                    step(self)
            finally:
                self._owner = None

    def insert_pair(
        self,
        source: EditionDescriptor,
        target: EditionDescriptor,
        table: AlignmentTable,
    ) -> None:
        """Store ``table`` for source => target and its reverse for target => source.

        Must only be called from a step passed to :meth:`populate`, on the
        thread running it.
        """
        if self._owner != threading.get_ident():
            raise RuntimeError("TableCache.insert_pair called outside populate()")
        reverse = table.get_reverse()
        self._tables[pair_key(target, source)] = reverse
        self._tables[pair_key(source, target)] = table
        logger.info("Cached alignment %s <=> %s (%s)", source, target, table.kind)
