"""Classic graph algorithms over plain Python data, with nodes numbered from 1."""

__version__ = "0.1.0"

__all__ = ["connectivity", "errors", "euler", "flow", "paths", "scc", "spanning", "tours"]