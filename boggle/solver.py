from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass

from boggle.board import Board
from boggle.dictionary import Dictionary
from boggle.results import ResultSet

logger = logging.getLogger("boggle")


@dataclass
class SearchStats:
    roots: int = 0
    visited: int = 0
    pruned: int = 0
    recorded: int = 0

    def merge(self, other: SearchStats):
        self.roots += other.roots
        self.visited += other.visited
        self.pruned += other.pruned
        self.recorded += other.recorded


class SearchPath:
    """The path currently being extended from one starting cell.

    Owns the visited grid and the accumulated letters. A path belongs to a
    single DFS root and is never shared between roots.
    """

    def __init__(self, board: Board):
        self.board = board
        self.visited = [[False] * board.dimension for _ in range(board.dimension)]
        self._chars: list[str] = []

    @property
    def word(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def is_visited(self, row: int, col: int) -> bool:
        return self.visited[row][col]

    @contextmanager
    def visit(self, row: int, col: int):
        """Step onto a cell for the duration of the block.

        On exit the cell's letters ("qu" counts as two) are removed from the
        path and the cell is unmarked, however the block is left.
        """
        cell = self.board.cell_at(row, col)
        self._chars.extend(cell)
        self.visited[row][col] = True
        try:
            yield self.word
        finally:
            del self._chars[-len(cell):]
            self.visited[row][col] = False


class Searcher:
    """Backtracking DFS over a board with trie prefix pruning."""

    def __init__(self, board: Board, dictionary: Dictionary):
        self.board = board
        self.dictionary = dictionary
        self.stats = SearchStats()

    def search(self, results: ResultSet | None = None, workers: int = 1) -> ResultSet:
        results = ResultSet() if results is None else results
        self.stats = SearchStats()
        starts = list(self.board.positions())

        if workers > 1:
            lock = threading.Lock()

            def run(start: tuple[int, int]):
                local, stats = self._search_root(*start)
                with lock:
                    results.update(local)
                    self.stats.merge(stats)

            with ThreadPoolExecutor(max_workers=workers) as executor:
                for future in [executor.submit(run, start) for start in starts]:
                    future.result()
        else:
            for row, col in starts:
                _, stats = self._search_root(row, col, results)
                self.stats.merge(stats)

        logger.debug(
            "search stats: roots=%d visited=%d pruned=%d recorded=%d",
            self.stats.roots, self.stats.visited, self.stats.pruned, self.stats.recorded,
        )
        return results

    def _search_root(self, row: int, col: int, results: ResultSet | None = None) -> tuple[ResultSet, SearchStats]:
        results = ResultSet() if results is None else results
        stats = SearchStats(roots=1)
        self._extend(SearchPath(self.board), row, col, results, stats)
        return results, stats

    def _extend(self, path: SearchPath, row: int, col: int, results: ResultSet, stats: SearchStats):
        with path.visit(row, col) as word:
            stats.visited += 1
            if not self.dictionary.is_prefix(word):
                stats.pruned += 1
                return

            if self.dictionary.is_word(word) and results.add_if_absent(word):
                stats.recorded += 1

            for nr, nc in self.board.neighbors(row, col):
                if not path.is_visited(nr, nc):
                    self._extend(path, nr, nc, results, stats)


def solve(board: Board, dictionary: Dictionary, max_results: int = 0, workers: int = 1) -> list[str]:
    """Find every dictionary word on the board.

    Returns the words in ascending order without duplicates, cut to
    ``max_results`` when it is positive.
    """
    results = Searcher(board, dictionary).search(workers=workers)
    words = results.words
    logger.info("Found %d words on %dx%d board", len(words), board.dimension, board.dimension)
    return words[:max_results] if max_results > 0 else words
