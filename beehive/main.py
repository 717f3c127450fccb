"""CLI entry point for the Spelling Bee solver."""

from __future__ import annotations

import argparse
import os
import sys

from beehive.constants import DEFAULT_INDEX_PATH, WORKER_COUNT
from beehive.dictionary import (
    Dictionary,
    build_index,
    load_default_dictionary,
    read_words,
    save_index,
)
from beehive.display import write_answers
from beehive.solver import is_pangram, solve


def _queen(value: str) -> str:
    letter = value.lower()
    if len(letter) != 1 or not letter.isalpha():
        raise argparse.ArgumentTypeError(f"queen must be a single letter, got {value!r}")
    return letter


def _workers(value: str) -> str:
    letters = value.lower()
    if len(letters) != WORKER_COUNT or not letters.isalpha():
        raise argparse.ArgumentTypeError(
            f"workers must be exactly {WORKER_COUNT} letters, got {value!r}"
        )
    return letters


def _add_dictionary_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--index", "-i",
        help=f"Prebuilt letter-key index (default: {DEFAULT_INDEX_PATH})",
    )
    source.add_argument(
        "--wordlist", "-w",
        help="Raw word list (one word per line), indexed at startup",
    )
    parser.add_argument(
        "--pangrams", "-p",
        action="store_true",
        help="Mark words that use all seven letters with '*'",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beehive",
        description="Spelling Bee Solver: list every word buildable from the hive letters",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    beehive = commands.add_parser(
        "beehive",
        help="Solve a puzzle from its letters",
        description=(
            "Answers are at least 4 letters long, may repeat letters, "
            "and must use the queen letter at least once."
        ),
    )
    beehive.add_argument("queen", type=_queen, help="The letter required in every word")
    beehive.add_argument(
        "workers", type=_workers,
        help=f"The {WORKER_COUNT} other letters that may be used",
    )
    _add_dictionary_args(beehive)

    scan = commands.add_parser("scan", help="Solve a puzzle from a screenshot")
    scan.add_argument("image", help="Screenshot of the puzzle (PNG or JPEG)")
    scan.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept the recognized letters without confirmation",
    )
    _add_dictionary_args(scan)

    build = commands.add_parser("build", help="Build the letter-key index from a word list")
    build.add_argument("wordlist", help="Word list, one word per line")
    build.add_argument(
        "--output", "-o",
        default=str(DEFAULT_INDEX_PATH),
        help=f"Where to write the index (default: {DEFAULT_INDEX_PATH})",
    )
    return parser


def load_dictionary(args: argparse.Namespace) -> Dictionary:
    if args.index:
        return Dictionary.load(args.index)
    if args.wordlist:
        return Dictionary.load(args.wordlist)
    return load_default_dictionary()


def run_build(args: argparse.Namespace) -> None:
    print(f"Indexing {args.wordlist}...", file=sys.stderr)
    index = build_index(read_words(args.wordlist))
    save_index(index, args.output)
    print(f"Wrote {len(index)} letter keys to {args.output}", file=sys.stderr)


def run_solve(queen: str, workers: str, args: argparse.Namespace) -> None:
    dictionary = load_dictionary(args)
    print(f"Loaded {dictionary.word_count} words.", file=sys.stderr)
    answers = solve(queen, workers, dictionary)

    def pangram_mark(word: str) -> str:
        return " *" if is_pangram(word, queen, workers) else ""

    write_answers(answers, mark=pangram_mark if args.pangrams else None)


def run(args: argparse.Namespace) -> None:
    if args.command == "build":
        run_build(args)
    elif args.command == "scan":
        import anthropic

        from beehive.ocr import confirm_hive, recognize_hive

        try:
            queen, workers = recognize_hive(args.image)
        except anthropic.APIError as e:
            raise ValueError(f"Could not recognize {args.image}: {e}") from e
        if not args.yes:
            queen, workers = confirm_hive(queen, workers)
        run_solve(queen, workers, args)
    else:
        run_solve(args.queen, args.workers, args)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except BrokenPipeError:
        # Redirect stdout so the flush at interpreter exit does not raise again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        print("Error: output closed before all answers were written", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
