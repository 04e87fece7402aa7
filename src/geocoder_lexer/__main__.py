"""
Command-line entry point for the lexer package.

Examples:
  python -m geocoder_lexer clean "PO BOX 55, 1200 Café Rd., V8W 1P6"
  python -m geocoder_lexer batch data/raw/addresses.csv data/processed/clean.csv --column address
"""

import argparse
import sys
from typing import List, Optional

from geocoder_lexer.lexer.registry import available_rulesets, get_lexical_rules
from geocoder_lexer.pipelines.clean_addresses import clean_address_csv


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Address lexical normalization")
    parser.add_argument(
        "--ruleset",
        choices=available_rulesets(),
        default=None,
        help="Ruleset name (default from lexer.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    clean = subparsers.add_parser("clean", help="Clean one or more address strings")
    clean.add_argument("text", nargs="+")
    clean.add_argument(
        "--no-special",
        action="store_true",
        help="Skip postal junk removal; print the cleaned sentence only",
    )

    batch = subparsers.add_parser("batch", help="Clean the address column of a CSV")
    batch.add_argument("input")
    batch.add_argument("output")
    batch.add_argument("--column", default=None)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    rules = get_lexical_rules(args.ruleset)

    if args.command == "clean":
        for text in args.text:
            if args.no_special:
                print(rules.clean_sentence(text))
            else:
                print(rules.normalize_sentence(text))
    elif args.command == "batch":
        issues = clean_address_csv(args.input, args.output, addr_col=args.column, rules=rules)
        for issue in issues:
            print(issue, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
