
#!/usr/bin/env python3
import argparse
import sys

from wordlist import __version__
from wordlist.errors import WordlistError
from wordlist.orchestrator import run_compact, run_words


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordlist", description="Hunspell word-list tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    words = sub.add_parser("words", help="Output all the words in the <hunspell.dic> file.")
    words.add_argument("hunspell_dic_file", help="Path to the .dic file (extension optional)")
    words.add_argument("-o", "--output", help="Output file - defaults to stdout")
    words.add_argument("-s", "--sort", dest="sort", action="store_true", help="Sort the list of words")
    words.add_argument("-u", "--unique", dest="unique", action="store_true", help="Make sure the words are unique")
    words.add_argument("-i", "--ignore_case", "--ignore-case", dest="ignore_case", action="store_true",
                       help="Compare case-insensitively; used with --unique and --sort")
    words.add_argument("-l", "--lower_case", "--lower-case", dest="lower_case", action="store_true",
                       help="Output in lower case")
    words.add_argument("--config", help="Path to YAML config")
    # None means "not given on the command line": the config file value wins
    words.set_defaults(sort=None, unique=None, ignore_case=None, lower_case=None)

    compact = sub.add_parser("compact", help="Compact a sorted word list into a prefix-sharing format.")
    compact.add_argument("sorted_word_list_file", help="Sorted word list, one word per line")
    compact.add_argument("-o", "--output", help="Output file - defaults to stdout")
    compact.add_argument("--config", help="Path to YAML config")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "words":
            overrides = {
                "sort": args.sort,
                "unique": args.unique,
                "ignore_case": args.ignore_case,
                "lower_case": args.lower_case,
                "output": args.output,
            }
            run_words(args.hunspell_dic_file, config_path=args.config, overrides=overrides)
        else:
            run_compact(args.sorted_word_list_file, config_path=args.config, output=args.output)
    except WordlistError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
