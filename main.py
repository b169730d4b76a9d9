"""CLI entrypoint for the word maze generator."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from wordmaze.core.constants import DEFAULT_ALPHABET, DEFAULT_RETRY_LIMIT
from wordmaze.core.exceptions import UnsolvableError, WordListError
from wordmaze.engine.generator import GeneratorConfig, WordMazeGenerator, WordMazeResult
from wordmaze.io.word_list import load_word_list
from wordmaze.utils.logger import configure_logging
from wordmaze.utils.pretty import print_maze_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a maze whose solution path spells the answers to a list of questions",
    )
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="CSV file or http(s) URL with 'question,answer[,alternate...]' rows",
    )
    parser.add_argument("--width", type=int, required=True, help="Maze width in boxes")
    parser.add_argument("--height", type=int, required=True, help="Maze height in boxes")
    parser.add_argument(
        "--start",
        type=int,
        required=True,
        help="Entrance perimeter index, counted clockwise from the top-left corner",
    )
    parser.add_argument("--end", type=int, required=True, help="Exit perimeter index")
    parser.add_argument(
        "--barrier-removals",
        type=int,
        default=0,
        help="Extra interior walls to remove after carving",
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        default=DEFAULT_ALPHABET,
        help="Characters used to fill cells off the answer path",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--retry-limit",
        type=int,
        default=DEFAULT_RETRY_LIMIT,
        help="Fresh mazes to try before giving up",
    )
    parser.add_argument(
        "--search-budget",
        type=int,
        default=None,
        help="Maximum search expansions per path search (default: unbounded)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the answer key, maze and stats to stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_payload(result: WordMazeResult, questions: list[str]) -> Dict[str, Any]:
    return {
        "maze": result.grid.to_jsonable(),
        "answer_letters": result.answer_letters,
        "questions": questions,
        "words": result.words,
        "path": [list(cell) for cell in result.path.cells],
        "extra_letter": result.extra_letter,
        "extra_letter_cell": list(result.extra_letter_cell),
        "boundaries": [
            {
                "word": boundary.word,
                "offset": boundary.offset,
                "candidates": [list(cell) for cell in boundary.candidates],
            }
            for boundary in result.boundaries
        ],
        "alternates": [
            {
                "word_index": placement.boundary_index,
                "answer": placement.answer,
                "cells": [list(cell) for cell in placement.cells],
                "exact": placement.exact,
            }
            for placement in result.placements
        ],
        "attempts": result.attempts,
        "seed": result.seed,
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    config = GeneratorConfig(
        width=args.width,
        height=args.height,
        start_position=args.start,
        end_position=args.end,
        barrier_removals=args.barrier_removals,
        alphabet=args.alphabet,
        seed=args.seed,
        retry_limit=args.retry_limit,
        search_budget=args.search_budget,
    )
    try:
        config.validate()
    except (ValueError, IndexError) as exc:
        parser.error(str(exc))

    try:
        entries = load_word_list(args.input)
    except WordListError as exc:
        parser.error(str(exc))

    generator = WordMazeGenerator(config)
    try:
        result = generator.generate(
            [entry.answer for entry in entries],
            [entry.alternates for entry in entries],
        )
    except UnsolvableError as exc:
        print(f"Unable to generate the maze: {exc}", file=sys.stderr)
        print("Re-run the generator, possibly with a different maze size or more barrier removals.", file=sys.stderr)
        return 2

    if args.show:
        print_maze_stats(result, stream=sys.stderr)

    payload = build_payload(result, [entry.question for entry in entries])
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
