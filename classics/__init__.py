"""Classic data structures, algorithms, a tic-tac-toe game, simulations and file, bit and network utilities."""

__version__ = "1.0.0"