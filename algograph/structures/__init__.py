"""
Auxiliary data structures used by graph algorithms.
"""

from .disjoint_sets import DisjointSets

__all__ = ["DisjointSets"]
