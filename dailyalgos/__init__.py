"""Algorithm puzzles and small data structures for graphs, lists, strings, arrays and numbers."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "linked", "numbers", "partition", "search", "structures", "text"]