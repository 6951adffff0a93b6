"""Water sort puzzle boards with breadth-first and best-first solvers and a command line."""

__version__ = "0.1.0"
__all__ = ["puzzle", "bfs", "best_first", "cli"]