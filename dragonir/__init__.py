"""IR types, values, def-use edges, variables, scopes and index sets for a small compiler."""

__version__ = "1.0.1"