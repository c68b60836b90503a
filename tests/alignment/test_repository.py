"""Tests for resource loading and alignment file parsers."""

import logging

import pytest

from synset_align.alignment.repository import (
    ResourceLoader,
    build_offset_list,
    data_file_path,
    dictionary_root,
    iter_data_file,
    iter_inter_lingual_index,
    iter_version_bridge,
    parse_sense_key,
)
from synset_align.exceptions import MalformedResourceError, ResourceError


def test_parse_sense_key():
    assert parse_sense_key("n14383252") == ("noun", 14383252)
    assert parse_sense_key("s00001740") == ("adjective", 1740)
    assert parse_sense_key(" r0 ") == ("adverb", 0)


@pytest.mark.parametrize("value", ["14383252", "x123", "n#12", "n12a", ""])
def test_parse_sense_key_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_sense_key(value)


def test_version_bridge_rows():
    lines = ["n12345678,n12345670", "v00000100,v00000099"]

    rows = list(iter_version_bridge(lines, "bridge.csv"))

    assert rows == [(1, "noun", 12345678, 12345670), (2, "verb", 100, 99)]


def test_version_bridge_discards_mismatched_tags(caplog):
    lines = ["n00000001,v00000002", "a00000003,s00000004", ""]

    with caplog.at_level(logging.INFO, logger="synset_align.alignment.repository"):
        rows = list(iter_version_bridge(lines, "bridge.csv"))

    assert rows == [(2, "adjective", 3, 4)]
    assert "Discarded 1 rows" in caplog.text


@pytest.mark.parametrize(
    "line",
    ["n00000001", "n00000001,n00000002,n00000003", "n00000001,q00000002", "n#1,n00000002"],
)
def test_version_bridge_malformed_line_is_fatal(line):
    with pytest.raises(MalformedResourceError) as excinfo:
        list(iter_version_bridge(["n00000005,n00000006", line], "bridge.csv"))

    assert excinfo.value.line_number == 2
    assert "bridge.csv:2" in str(excinfo.value)


def test_inter_lingual_index_rows():
    lines = ["n#0,n14382766", "v#12,n00000001", "r#3,r00000042"]

    rows = list(iter_inter_lingual_index(lines, "spa-ili.csv"))

    assert rows == [(1, "noun", 0, 14382766), (3, "adverb", 3, 42)]


def test_inter_lingual_index_requires_index_key():
    with pytest.raises(MalformedResourceError):
        list(iter_inter_lingual_index(["n00000001,n00000002"], "spa-ili.csv"))


def test_data_file_offsets_follow_byte_positions():
    header = "  1 license"
    first = "00000012 03 n 01 mujer 0 000 | persona adulta"
    second = f"{12 + len(first) + 1:08d} 03 n 01 niño 0 000 | pequeño"
    third = f"{12 + len(first) + 1 + len(second.encode('utf-8')) + 1:08d} 03 n 01 casa 0 000 | edificio"

    entries = list(iter_data_file([header, first, second, third], "data.noun"))

    assert [offset for offset, _ in entries] == [12, 12 + len(first) + 1, int(third[:8])]
    assert entries[1][1] == second


def test_data_file_offset_mismatch_is_fatal():
    lines = ["  1 license", "00000000 03 n 01 mujer 0 000 | persona adulta"]

    with pytest.raises(MalformedResourceError, match="does not match byte position 12"):
        build_offset_list(lines, "data.noun")


def test_data_file_entry_without_offset_is_fatal():
    with pytest.raises(MalformedResourceError):
        build_offset_list(["mujer 0 000"], "data.noun")


def test_data_file_custom_comment_marker():
    lines = ["# comment", "00000010 03 n 01 mujer 0 000 | persona adulta"]

    assert build_offset_list(lines, "data.noun", comment_marker="#") == [10]


def test_fixture_data_files_are_self_consistent(data_dir):
    loader = ResourceLoader(str(data_dir.root))
    for root in ("wordnet/wn30", "wordnet/wn31", "mcr30/spa"):
        for pos in ("noun", "verb"):
            path = data_file_path(root, pos)
            offsets = build_offset_list(loader.read_lines(path), path)
            assert len(offsets) > 0


def test_loader_reports_absent_resource(tmp_path):
    loader = ResourceLoader(tmp_path)

    assert loader.read_lines("alignment/missing.csv") is None
    assert not loader.exists("alignment/missing.csv")


def test_loader_reads_lines_without_newlines(tmp_path):
    (tmp_path / "alignment").mkdir()
    (tmp_path / "alignment" / "rows.csv").write_bytes(b"n1,n2\nv3,v4\n")
    loader = ResourceLoader(str(tmp_path))

    assert loader.exists("alignment/rows.csv")
    assert list(loader.read_lines("alignment/rows.csv")) == ["n1,n2", "v3,v4"]


def test_loader_wraps_decode_errors(tmp_path):
    (tmp_path / "broken.csv").write_bytes(b"n1,n2\n\xff\xfe\n")
    loader = ResourceLoader(tmp_path)

    with pytest.raises(ResourceError):
        list(loader.read_lines("broken.csv"))


def test_packaged_loader_has_no_alignment_data():
    loader = ResourceLoader()

    assert loader.read_lines("alignment/wn31-wn30.csv") is None


def test_dictionary_root():
    assert dictionary_root("wn30", "eng") == "wordnet/wn30"
    assert dictionary_root("mcr30", "spa") == "mcr30/spa"
    assert data_file_path("mcr30/spa", "adjective") == "mcr30/spa/data.adj"
