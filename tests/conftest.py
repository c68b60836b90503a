"""Pytest fixtures: a small, self-consistent alignment data tree."""

from pathlib import Path
from types import SimpleNamespace

import pytest

from synset_align.alignment import AlignmentConfig, InterLingualIndex, TableCache
from synset_align.core import get_dictionary

LICENSE_HEADER = [
    "  1 This software and database is being provided to you, the LICENSEE, by",
    "  2 Princeton University under the following license.",
]

POS_TAGS = {"noun": "n", "verb": "v"}
SUFFIXES = {"noun": "noun", "verb": "verb"}


def write_data_file(
    path: Path,
    pos: str,
    entries: list[tuple[tuple[str, ...], str]],
    header: list[str] = LICENSE_HEADER,
) -> dict[str, int]:
    """Write a WordNet data file and return the offset of each entry's first lemma."""
    lines = list(header)
    position = sum(len(line.encode("utf-8")) + 1 for line in lines)
    offsets: dict[str, int] = {}
    for lemmas, gloss in entries:
        words = " ".join(f"{lemma.replace(' ', '_')} 0" for lemma in lemmas)
        line = f"{position:08d} 03 {POS_TAGS[pos]} {len(lemmas):02x} {words} 000 | {gloss}"
        offsets[lemmas[0]] = position
        lines.append(line)
        position += len(line.encode("utf-8")) + 1
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8", newline="\n")
    return offsets


def write_dictionary(root: Path, entries: dict[str, list], header: list[str] = LICENSE_HEADER) -> dict[str, dict[str, int]]:
    return {
        pos: write_data_file(root / f"data.{SUFFIXES[pos]}", pos, items, header)
        for pos, items in entries.items()
    }


@pytest.fixture
def data_dir(tmp_path):
    wn30 = write_dictionary(
        tmp_path / "wordnet" / "wn30",
        {
            "noun": [
                (("acrophobia",), "a morbid fear of great heights"),
                (("claustrophobia",), "a morbid fear of being closed in a confined space"),
                (("love", "passion"), "any object of warm affection or devotion"),
            ],
            "verb": [(("run",), "move fast by using one's feet")],
        },
    )
    wn31 = write_dictionary(
        tmp_path / "wordnet" / "wn31",
        {
            "noun": [
                (("zumbooruk",), "a small cannon mounted on a swivel"),
                (("acrophobia",), "a morbid fear of great heights"),
                (("claustrophobia",), "a morbid fear of being closed in a confined space"),
                (("love", "passion"), "any object of warm affection or devotion"),
            ],
            "verb": [(("run",), "move fast by using one's feet")],
        },
        header=LICENSE_HEADER + ["  3 WordNet 3.1 Copyright 2011 by Princeton University."],
    )
    spa = write_dictionary(
        tmp_path / "mcr30" / "spa",
        {
            "noun": [
                (("acrofobia",), "miedo mórbido a las alturas"),
                (("claustrofobia",), "miedo mórbido a los espacios cerrados"),
                (("mujer",), "persona adulta de sexo femenino"),
            ],
            "verb": [(("correr",), "desplazarse rápidamente")],
        },
    )
    wn21 = write_dictionary(
        tmp_path / "wordnet" / "wn21",
        {"noun": [(("woman",), "an adult female person")]},
    )

    alignment = tmp_path / "alignment"
    alignment.mkdir()
    bridge_rows = [
        f"n{wn31['noun'][lemma]:08d},n{wn30['noun'][lemma]:08d}"
        for lemma in ("love", "claustrophobia", "acrophobia")
    ]
    bridge_rows.append(f"v{wn31['verb']['run']:08d},v{wn30['verb']['run']:08d}")
    bridge_rows.append(f"n{wn31['noun']['zumbooruk']:08d},v{wn30['verb']['run']:08d}")
    (alignment / "wn31-wn30.csv").write_text("\n".join(bridge_rows) + "\n", encoding="utf-8")

    ili_rows = [
        f"n#0,n{wn30['noun']['acrophobia']:08d}",
        f"n#1,n{wn30['noun']['claustrophobia']:08d}",
        f"v#0,v{wn30['verb']['run']:08d}",
        f"v#0,n{wn30['noun']['love']:08d}",
    ]
    (alignment / "spa-ili.csv").write_text("\n".join(ili_rows) + "\n", encoding="utf-8")

    return SimpleNamespace(
        root=tmp_path,
        offsets={"wn30": wn30, "wn31": wn31, "spa": spa, "wn21": wn21},
    )


@pytest.fixture
def config(data_dir):
    return AlignmentConfig(data_dir=str(data_dir.root))


@pytest.fixture
def index(config):
    return InterLingualIndex(config, cache=TableCache())


@pytest.fixture
def dictionaries(index):
    return SimpleNamespace(
        wn31=get_dictionary("wn31", "eng", index=index),
        wn30=get_dictionary("wn30", "eng", index=index),
        wn21=get_dictionary("wn21", "eng", index=index),
        spa=get_dictionary("mcr30", "spa", index=index),
    )
