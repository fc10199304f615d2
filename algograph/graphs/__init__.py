"""
Graph data structures.

This package provides:
- Vertex and Edge value types, and the Weighted edge-property protocol
- The Graph interface every algorithm depends on
- Directed and undirected simple graphs
- Tree graphs and multipartite graphs built on undirected graphs
"""

from .core import INFINITY, Edge, Vertex, Weight, Weighted
from .directed import DirectedGraph, DirectedSimpleGraph
from .graph import Graph, GraphProperties, SimpleGraph
from .multipartite import MultipartiteGraph
from .representation import GraphRepresentation
from .tree import TreeGraph
from .undirected import UndirectedGraph, UndirectedSimpleGraph

__all__ = [
    "INFINITY",
    "Vertex",
    "Edge",
    "Weight",
    "Weighted",
    "Graph",
    "GraphProperties",
    "GraphRepresentation",
    "SimpleGraph",
    "DirectedGraph",
    "DirectedSimpleGraph",
    "UndirectedGraph",
    "UndirectedSimpleGraph",
    "TreeGraph",
    "MultipartiteGraph",
]
