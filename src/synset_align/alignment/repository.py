"""Bundled resource access and parsers for alignment data files."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from synset_align.exceptions import MalformedResourceError, ResourceError
from synset_align.schema import POS_BY_TAG, PartOfSpeech

logger = logging.getLogger(__name__)

DATA_FILE_SUFFIX: dict[PartOfSpeech, str] = {
    "noun": "noun",
    "verb": "verb",
    "adjective": "adj",
    "adverb": "adv",
}

_OFFSET_KEY = re.compile(r"^([a-z])(\d+)$", re.ASCII)
_INDEX_KEY = re.compile(r"^([a-z])#(\d+)$", re.ASCII)


class ResourceLoader:
    """Reads text lines from resources below a data root.

    The root is either a filesystem directory or the packaged
    ``synset_align.data`` resources.
    """

    def __init__(self, root: Traversable | Path | str | None = None):
        if root is None:
            self.root: Traversable | Path = files("synset_align.data")
        elif isinstance(root, str):
            self.root = Path(root)
        else:
            self.root = root

    def __repr__(self) -> str:
        return f"ResourceLoader({self.root!s})"

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read_lines(self, path: str) -> Iterator[str] | None:
        """Return an iterator over the resource's lines, or None if it is absent.

        Lines are yielded without their trailing newline.
        """
        resource = self._resolve(path)
        if not resource.is_file():
            return None
        return _iter_lines(resource, path)

    def _resolve(self, path: str) -> Traversable | Path:
        resource = self.root
        for part in path.strip("/").split("/"):
            resource = resource.joinpath(part)
        return resource


def _iter_lines(resource: Traversable | Path, name: str) -> Iterator[str]:
    try:
        with resource.open("r", encoding="utf-8", newline="") as handle:
            for line in handle:
                yield line.rstrip("\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(f"Failed to read resource {name}: {exc}") from exc


def data_file_path(root: str, pos: PartOfSpeech) -> str:
    return f"{root}/data.{DATA_FILE_SUFFIX[pos]}"


def dictionary_root(source: str, language: str, bridge_language: str = "eng") -> str:
    if language == bridge_language:
        return f"wordnet/{source}"
    return f"{source}/{language}"


def parse_sense_key(value: str) -> tuple[PartOfSpeech, int]:
    """Parse ``<pos tag><offset>`` (e.g. ``n14383252``) into a POS and offset."""
    match = _OFFSET_KEY.match(value.strip())
    if not match or match.group(1) not in POS_BY_TAG:
        raise ValueError(f"Invalid sense key: {value!r}")
    return POS_BY_TAG[match.group(1)], int(match.group(2))


def _parse_field(pattern: re.Pattern[str], value: str, resource: str, line_number: int) -> tuple[PartOfSpeech, int]:
    match = pattern.match(value.strip())
    if not match or match.group(1) not in POS_BY_TAG:
        raise MalformedResourceError(resource, line_number, f"invalid sense key {value!r}")
    return POS_BY_TAG[match.group(1)], int(match.group(2))


def _iter_pairs(
    lines: Iterable[str],
    resource: str,
    first_pattern: re.Pattern[str],
) -> Iterator[tuple[int, PartOfSpeech, int, int]]:
    discarded = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        fields = line.split(",")
        if len(fields) != 2:
            raise MalformedResourceError(resource, line_number, f"expected 2 fields, got {len(fields)}")
        first_pos, first = _parse_field(first_pattern, fields[0], resource, line_number)
        second_pos, second = _parse_field(_OFFSET_KEY, fields[1], resource, line_number)
        if first_pos != second_pos:
            # Known inconsistency in the published mappings.
            logger.debug("%s:%d: discarding row with mismatched parts of speech", resource, line_number)
            discarded += 1
            continue
        yield line_number, first_pos, first, second
    if discarded:
        logger.info("Discarded %d rows with mismatched parts of speech from %s", discarded, resource)


def iter_version_bridge(lines: Iterable[str], resource: str) -> Iterator[tuple[int, PartOfSpeech, int, int]]:
    """Yield ``(line_number, pos, first_offset, second_offset)`` rows of a version-bridge file."""
    return _iter_pairs(lines, resource, _OFFSET_KEY)


def iter_inter_lingual_index(lines: Iterable[str], resource: str) -> Iterator[tuple[int, PartOfSpeech, int, int]]:
    """Yield ``(line_number, pos, local_index, bridge_offset)`` rows of an inter-lingual index file."""
    return _iter_pairs(lines, resource, _INDEX_KEY)


def iter_data_file(
    lines: Iterable[str],
    resource: str,
    comment_marker: str = " ",
) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` for each entry of a WordNet ``data.*`` file.

    Every entry must start with its own byte offset within the file.
    """
    position = 0
    for line_number, line in enumerate(lines, start=1):
        line_offset = position
        position += len(line.encode("utf-8")) + 1
        if not line or line.startswith(comment_marker):
            continue
        head, _, _ = line.partition(" ")
        if not (head.isascii() and head.isdigit()):
            raise MalformedResourceError(resource, line_number, f"entry does not start with an offset: {head!r}")
        if int(head) != line_offset:
            raise MalformedResourceError(
                resource,
                line_number,
                f"self-reported offset {int(head)} does not match byte position {line_offset}",
            )
        yield line_offset, line


def build_offset_list(lines: Iterable[str], resource: str, comment_marker: str = " ") -> list[int]:
    """Return the offsets of a data file's entries in file order."""
    return [offset for offset, _ in iter_data_file(lines, resource, comment_marker)]
