"""Command-line interface for synset-align."""

import argparse
import logging
import sys

from synset_align import __version__, get_dictionary, map_synset
from synset_align.alignment.repository import parse_sense_key
from synset_align.exceptions import MappingUnavailableError, SynsetAlignError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="synset-align",
        description="Map a word sense between dictionary editions and languages",
    )
    parser.add_argument("source", help="Source dictionary as SOURCE:LANG, e.g. wn30:eng")
    parser.add_argument("target", help="Target dictionary as SOURCE:LANG, e.g. mcr30:spa")
    parser.add_argument("sense", help="Sense key in the source dictionary, e.g. n14383252")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log table loading details",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"synset-align {__version__}",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        pos, offset = parse_sense_key(args.sense)
        source = get_dictionary(*_split_dictionary_arg(args.source))
        target = get_dictionary(*_split_dictionary_arg(args.target))
        result = map_synset(source.synset_at(pos, offset), target)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except MappingUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except SynsetAlignError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result is None:
        print(f"No equivalent sense for {args.sense} in {target.version}", file=sys.stderr)
        return 3

    if args.json:
        print(result.model_dump_json(indent=2, exclude_none=True))
    else:
        _print_formatted(result)

    return 0


def _split_dictionary_arg(value: str) -> tuple[str, str]:
    source, sep, language = value.partition(":")
    if not sep or not source or not language:
        raise ValueError(f"Dictionary must be given as SOURCE:LANG, got {value!r}")
    return source, language


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    print()
    print("  synset-align")
    print()

    fields = [
        ("Edition", str(result.edition)),
        ("Sense", result.sense_key),
        ("Lemmas", ", ".join(result.lemmas) if result.lemmas else None),
        ("Gloss", result.gloss),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<10} {display}")

    print()


if __name__ == "__main__":
    sys.exit(main())
