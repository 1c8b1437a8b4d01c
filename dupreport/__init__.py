"""Bug report model, report reader, IDF collections, similarity measures and RankNet training loop."""

__version__ = "0.1.0"