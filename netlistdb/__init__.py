"""In-memory database of digital circuit netlists: nets, function calls,
components, hardware types, and graph queries (paths, sensitivity,
traversal and pattern matching)."""

__version__ = "0.1.0"