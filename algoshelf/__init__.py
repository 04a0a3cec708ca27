"""Classic data structures and algorithms: arrays, lists, queues, hash tables, trees, graphs, heaps and sorting."""

__version__ = "0.1.0"