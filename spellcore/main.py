"""
Command-line entry point for checking text against a word list.

Usage:
    spellcore check "Helo wrold"
    echo "Helo wrold" | spellcore check --json
    spellcore check --wordlist data/dictionaries/en-words.txt --max-distance 1 "teh"
"""
import argparse
import json
import sys
from typing import List, Optional

from spellcore.config import settings
from spellcore.schemas.spellcheck import TokenStatus
from spellcore.services.errors import InvalidInputError, LoadError
from spellcore.services.spellcheck import initialize_spellcheck

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_INVALID_INPUT = 2


def non_negative_int(value: str) -> int:
    """argparse type for counts and budgets."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellcore",
        description="Check spelling against a word list and suggest corrections",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Check text (argument or stdin)")
    check_parser.add_argument("text", nargs="?", help="Text to check (default: read stdin)")
    check_parser.add_argument(
        "--wordlist", "-w",
        default=None,
        help=f"Word list path (default: {settings.SPELLCHECK_WORDLIST_PATH})",
    )
    check_parser.add_argument(
        "--max-distance",
        type=non_negative_int,
        default=None,
        help=f"Edit-distance budget (default: {settings.SPELLCHECK_MAX_EDIT_DISTANCE})",
    )
    check_parser.add_argument(
        "--limit",
        type=non_negative_int,
        default=None,
        help=f"Suggestions per word (default: {settings.SPELLCHECK_SUGGESTION_COUNT})",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print every token as JSON instead of a list of issues",
    )
    return parser


def run_check(args: argparse.Namespace) -> int:
    """Load the dictionary, check the text and print the outcome."""
    try:
        service = initialize_spellcheck(
            wordlist_path=args.wordlist,
            max_distance=args.max_distance,
            suggestion_limit=args.limit,
        )
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    text = args.text if args.text is not None else sys.stdin.read()

    try:
        results = service.check(text)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(service.to_wire(results), ensure_ascii=False, indent=2))
        return EXIT_OK

    for result in results:
        if result.status is not TokenStatus.UNKNOWN:
            continue
        if result.suggestions:
            rendered = ", ".join(f"{s.word} ({s.distance})" for s in result.suggestions)
        else:
            rendered = "no suggestions"
        print(f"{result.start}: {result.token} -> {rendered}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # "check" is the only subcommand
    return run_check(args)


if __name__ == "__main__":
    sys.exit(main())
