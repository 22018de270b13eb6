"""Classic algorithms and data structures: search, powers, hashing, sorting, heaps, graphs, spanning trees and disjoint sets."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "graph",
    "hashing",
    "heap",
    "mst",
    "partition",
    "search",
    "sorting",
    "structures",
    "unionfind",
]