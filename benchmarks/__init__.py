"""Performance benchmarks for undigraph.

This package contains benchmarks for the hot paths in the library: graph
construction, Kruskal's minimum spanning tree and Dijkstra shortest paths.
"""
