"""General-purpose utilities: hash table, linked list, JSON escaping, logging, math and random helpers."""

__version__ = "1.0.0"