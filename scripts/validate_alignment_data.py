"""Validate alignment resource consistency.

Checks:
1. Every WordNet ``data.*`` file reports byte offsets matching its own layout.
2. Every alignment CSV row has two well-formed sense keys.
3. Inter-lingual index rows reference entries that exist in the language's data files.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from synset_align.alignment.engine import AlignmentConfig  # noqa: E402
from synset_align.alignment.repository import (  # noqa: E402
    ResourceLoader,
    build_offset_list,
    data_file_path,
    dictionary_root,
    iter_inter_lingual_index,
    iter_version_bridge,
)
from synset_align.exceptions import ResourceError  # noqa: E402

DEFAULT_DATA_ROOT = SRC / "synset_align" / "data"


def fail(message: str) -> None:
    print(f"[alignment-check] ERROR: {message}")
    raise SystemExit(1)


def relative(path: Path, data_root: Path) -> str:
    return path.relative_to(data_root).as_posix()


def validate_data_files(loader: ResourceLoader, data_root: Path, marker: str) -> int:
    count = 0
    for path in sorted(data_root.rglob("data.*")):
        name = relative(path, data_root)
        build_offset_list(loader.read_lines(name), name, marker)
        count += 1
    return count


def validate_version_bridge(loader: ResourceLoader, config: AlignmentConfig) -> None:
    name = config.version_bridge_resource
    lines = loader.read_lines(name)
    if lines is None:
        print(f"[alignment-check] skip: {name} not present")
        return
    rows = sum(1 for _ in iter_version_bridge(lines, name))
    print(f"[alignment-check] {name}: {rows} rows")


def validate_inter_lingual_indexes(loader: ResourceLoader, config: AlignmentConfig, data_root: Path) -> None:
    prefix, _, suffix = config.ili_resource_template.partition("{language}")
    for path in sorted(data_root.glob(f"{prefix}*{suffix}")):
        name = relative(path, data_root)
        language = name[len(prefix) : len(name) - len(suffix)]
        root = dictionary_root(config.foreign_source, language, config.bridge_language)
        sizes: dict[str, int] = {}
        rows = 0
        for line_number, pos, index, _ in iter_inter_lingual_index(loader.read_lines(name), name):
            if pos not in sizes:
                lines = loader.read_lines(data_file_path(root, pos))
                if lines is None:
                    fail(f"{name}:{line_number}: missing {pos} data file under {root}")
                sizes[pos] = len(build_offset_list(lines, data_file_path(root, pos), config.comment_marker))
            if index >= sizes[pos]:
                fail(f"{name}:{line_number}: {pos} index {index} out of range ({sizes[pos]} entries)")
            rows += 1
        print(f"[alignment-check] {name}: {rows} rows")


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate alignment resources")
    parser.add_argument("--data-dir", default=None, help="Data root (default: packaged data)")
    args = parser.parse_args()

    config = AlignmentConfig.from_env()
    data_root = Path(args.data_dir or config.data_dir or DEFAULT_DATA_ROOT)
    if not data_root.is_dir():
        fail(f"Data root not found: {data_root}")
    loader = ResourceLoader(data_root)

    try:
        count = validate_data_files(loader, data_root, config.comment_marker)
        validate_version_bridge(loader, config)
        validate_inter_lingual_indexes(loader, config, data_root)
    except ResourceError as exc:
        fail(str(exc))

    print(f"[alignment-check] OK ({count} data files)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
