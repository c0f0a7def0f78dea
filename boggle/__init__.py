from boggle.board import Board
from boggle.dictionary import Dictionary, load_dictionary
from boggle.errors import BoggleError, InvalidArgumentError
from boggle.results import ResultSet
from boggle.solver import Searcher, solve
from boggle.trie import TernarySearchTrie

__all__ = [
    "Board",
    "BoggleError",
    "Dictionary",
    "InvalidArgumentError",
    "ResultSet",
    "Searcher",
    "TernarySearchTrie",
    "load_dictionary",
    "solve",
]
