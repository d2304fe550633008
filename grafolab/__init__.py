"""Small graph tools: BFS distances, DFS traces, path queries, bipartite and triangle checks, Bacon numbers."""

__version__ = "0.1.0"