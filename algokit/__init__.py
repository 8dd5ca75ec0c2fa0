"""Path finding, graph traversal, shortest paths, spanning trees, N-queens,
selection sort and a small support chatbot."""

__version__ = "0.1.0"