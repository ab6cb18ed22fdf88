"""CLI entrypoint for the StarCon vocabulary crossword builder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from starcon.engine.builder import build_crossword
from starcon.engine.session import PuzzleSession
from starcon.engine.validator import GridValidator
from starcon.data.normalization import parse_words_file
from starcon.io.clues import (
    GeminiClueGenerator,
    attach_clue_texts,
    clue_texts_to_jsonable,
    generate_clue_texts,
)
from starcon.utils.logger import configure_logging
from starcon.utils.pretty import format_clues, format_session, print_crossword_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a vocabulary crossword from a word list",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Vocabulary words (format: WORD or WORD:translation)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:translation entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--initial-help",
        type=int,
        default=0,
        help="Letters of every word pre-filled in the player grid (default 0)",
    )
    parser.add_argument(
        "--languages",
        nargs="+",
        default=["English"],
        help="Languages to write clue sentences in",
    )
    parser.add_argument(
        "--clue-language",
        type=str,
        default=None,
        help="Language whose sentences are attached to the clue list (default: first of --languages)",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Write clue sentences with Gemini (requires GEMINI_API_KEY)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if not args.words and not args.words_file:
        parser.error("provide --words or --words-file")
    if args.initial_help < 0:
        parser.error("--initial-help must be zero or positive")
    clue_language = args.clue_language or args.languages[0]
    if clue_language not in args.languages:
        parser.error("--clue-language must be one of --languages")

    words: List[str] = []
    if args.words:
        words.extend(parse_words_file(args.words))
    if args.words_file:
        words.extend(parse_words_file(args.words_file.read_text(encoding="utf-8").splitlines()))

    result = build_crossword(words)
    if result.is_empty:
        print("Error: none of the words could be placed on the grid", file=sys.stderr)
        return 1

    validation = GridValidator().validate(result)

    placed_words = [clue.word for clue in result.clues]
    generator = GeminiClueGenerator() if args.llm else None
    clue_texts = generate_clue_texts(placed_words, args.languages, generator)
    attach_clue_texts(result, clue_texts, clue_language)

    session = PuzzleSession(result, initial_help=args.initial_help)

    payload: Dict[str, Any] = {
        "crossword": result.to_jsonable(),
        "clue_texts": clue_texts_to_jsonable(clue_texts),
        "initial_help": args.initial_help,
        "player_grid": session.entries,
        "validation": validation.messages,
    }

    print_crossword_stats(result, stream=sys.stderr)
    print(file=sys.stderr)
    print(format_clues(result), file=sys.stderr)
    if args.initial_help:
        print(file=sys.stderr)
        print(format_session(session), file=sys.stderr)

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
