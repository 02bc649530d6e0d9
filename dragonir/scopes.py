"""Stack of nested variable scopes."""

from __future__ import annotations

from .values import Value


class ScopeStack:
    """Nested scopes; each maps names to values, innermost last."""

    def __init__(self) -> None:
        self._scopes: list[dict[str, Value]] = []

    def _innermost(self) -> dict[str, Value]:
        if not self._scopes:
            raise IndexError("no scope has been entered")
        return self._scopes[-1]

    def enter_scope(self) -> None:
        """Open a new, empty innermost scope."""
        self._scopes.append({})

    def leave_scope(self) -> None:
        """Close the innermost scope."""
        self._innermost()
        self._scopes.pop()

    def insert_value(self, value: Value) -> None:
        """Add ``value`` under its name to the innermost scope; an existing entry is kept."""
        self._innermost().setdefault(value.name, value)

    def find_current_scope(self, name: str) -> Value | None:
        """Return the value named ``name`` in the innermost scope, or None."""
        return self._innermost().get(name)

    def find_all_scopes(self, name: str) -> Value | None:
        """Return the value named ``name`` from the innermost scope that has it, or None."""
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return None

    def current_level(self) -> int:
        """Return the level of the innermost scope, counting from 0."""
        return len(self._scopes) - 1