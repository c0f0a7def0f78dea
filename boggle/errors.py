class BoggleError(Exception):
    """Base exception for the solver."""


class InvalidArgumentError(BoggleError, ValueError):
    """Raised when a board, dictionary word or trie key fails validation."""
