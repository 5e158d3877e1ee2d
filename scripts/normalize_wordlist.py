#!/usr/bin/env python3
"""
Merge raw word lists into one normalized word list.

Applies the same rules the dictionary loader uses: entries are stripped and
lowercased, comments and non-alphabetic entries are dropped, and duplicates
keep their highest count. The output is sorted so it diffs cleanly.

Usage:
    python scripts/normalize_wordlist.py raw-words.txt
    python scripts/normalize_wordlist.py a.txt b.txt --output data/dictionaries/en-words.txt
    python scripts/normalize_wordlist.py freq.txt --keep-counts

Output:
    One word per line (or `word count` with --keep-counts)
"""

import argparse
import sys
from pathlib import Path
from typing import Dict

from spellcore.services.dictionary import parse_entry


def main():
    """Normalize and merge word lists."""
    parser = argparse.ArgumentParser(
        description="Normalize and merge newline-delimited word lists"
    )
    parser.add_argument("inputs", nargs="+", help="Word list files to merge")
    parser.add_argument(
        "--output", "-o",
        default="words.txt",
        help="Output file path (default: words.txt)"
    )
    parser.add_argument(
        "--keep-counts",
        action="store_true",
        help="Write `word count` lines instead of bare words"
    )
    args = parser.parse_args()

    ranks: Dict[str, int] = {}
    dropped = 0

    for input_name in args.inputs:
        input_file = Path(input_name)
        if not input_file.is_file():
            print(f"Error: {input_file} not found")
            sys.exit(1)

        print(f"Reading {input_file}...")
        with open(input_file, "r", encoding="utf-8") as f:
            for line in f:
                entry = parse_entry(line)
                if entry is None:
                    if line.strip() and not line.strip().startswith("#"):
                        dropped += 1
                    continue
                word, rank = entry
                ranks[word] = max(rank, ranks.get(word, 0))

    if not ranks:
        print("Error: no usable words found")
        sys.exit(1)

    sorted_words = sorted(ranks)

    # Ensure output directory exists
    output_file = Path(args.output)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    print(f"Writing to {output_file}...")

    with open(output_file, "w", encoding="utf-8") as f:
        if args.keep_counts:
            f.write("\n".join(f"{word} {ranks[word]}" for word in sorted_words))
        else:
            f.write("\n".join(sorted_words))
        f.write("\n")

    print(f"\nDone! Wrote {len(sorted_words):,} unique words ({dropped:,} entries dropped)")
    print(f"Output: {output_file}")


if __name__ == "__main__":
    main()
