# src/rude_word_finder/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: show which rude words can be built from pieces of the given words."""
    from .matching import RudeWordFinder
    from .matching.general.utils import ConfigFileNotFound, ConfigTypeError, DataDirNotFound
    from .matching.general.vocab import load_rude_words

    parser = argparse.ArgumentParser(
        prog="rwf-demo",
        description="Find rude words hiding in pieces of the given input words.",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Input words (e.g. mars crunchy snickers picnic maltesers)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--separator",
        default=None,
        help="Single character placed between pieces (default from finder_settings.json)",
    )
    parser.add_argument(
        "--vocab",
        default=None,
        help="Vocabulary file name inside the data directory (e.g. rude_word_list)",
    )

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    words = args.words or ["mars", "crunchy", "snickers", "picnic", "maltesers"]

    try:
        if args.vocab:
            sep = args.separator or "|"
            finder = RudeWordFinder(load_rude_words(args.vocab, separator=sep), separator=sep)
        else:
            finder = RudeWordFinder(separator=args.separator)
        result = finder.find(words)
    # ConfigParseError and VocabularyError are ValueErrors
    except (ConfigFileNotFound, DataDirNotFound, ConfigTypeError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps({"input": words, "matches": result}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
