"""
Command-line Boggle solver.

Usage:
    python -m boggle <dimension> <board> [--dictionary PATH]

Examples:
    python -m boggle 2 abcd
    python -m boggle 4 catsrepobonedigs --dictionary words.txt

The board is given row-major, all rows appended to the first, so the board

    | a b |
    | c d |

is written 'abcd'. A 'q' on the board stands for "qu".
"""
import argparse
import logging
import sys

from boggle.board import Board
from boggle.dictionary import load_dictionary
from boggle.errors import InvalidArgumentError
from boggle.metrics import StageTimer
from boggle.settings import settings
from boggle.solver import solve

logger = logging.getLogger("boggle")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boggle", description="Find every dictionary word on a Boggle board")
    parser.add_argument("dimension", type=int, help="Board is dimension x dimension")
    parser.add_argument("board", help="Board letters, row-major (e.g. 'abcd' for a 2x2 board)")
    parser.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH),
                        help=f"Word list, one word per line (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Shortest word to report (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--reject-duplicates", action="store_true", default=settings.REJECT_DUPLICATE_LETTERS,
                        help="Refuse boards that repeat a letter")
    parser.add_argument("--workers", type=int, default=settings.SEARCH_WORKERS,
                        help="Threads searching starting cells in parallel (default: %(default)s)")
    parser.add_argument("--max-results", type=int, default=settings.MAX_RESULTS,
                        help="Print at most this many words, 0 for all (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress and stage timings")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if settings.DEBUG else (logging.INFO if args.verbose else logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    timer = StageTimer()
    try:
        with timer.stage("build_board"):
            board = Board(args.dimension, args.board, args.reject_duplicates)
        with timer.stage("load_dictionary"):
            dictionary = load_dictionary(args.dictionary, args.min_length, settings.SHUFFLE_DICTIONARY)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: could not read dictionary {args.dictionary}: {e}", file=sys.stderr)
        return 1

    print(board.render())
    print()

    with timer.stage("search"):
        words = solve(board, dictionary, args.max_results, args.workers)

    if words:
        print(f"{len(words)} words found.")
        for word in words:
            print(word)
    else:
        print(f"No words with {args.min_length} or more letters found!")

    logger.info("timings: %s", timer.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
