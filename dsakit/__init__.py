"""Classic data structures and algorithms: lists, deques, trees, graphs, hashing, sorting, expressions, scheduling and polynomials."""

__version__ = "0.1.0"