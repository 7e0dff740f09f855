"""Array, binary-search and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "answers", "singly", "list_ops", "cycles", "doubly"]