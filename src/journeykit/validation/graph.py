# journeykit/validation/graph.py
"""Cycle detection over name-keyed dependency graphs.

The graph is implicit: ``edges(name)`` returns the names ``name`` depends on.
Names with no edges (including names that were never registered) are leaves,
so dangling references never raise here.
"""

from collections.abc import Callable, Iterable, Mapping

from journeykit.exceptions import CyclicDependencyError

__all__ = ["DependencyGraph"]

EdgeFn = Callable[[str], Iterable[str]]


class DependencyGraph:
    """Depth-first cycle detection with ``visited``/``path`` bookkeeping."""

    def __init__(self, edges: EdgeFn) -> None:
        self._edges = edges

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "DependencyGraph":
        return cls(lambda name: mapping.get(name, ()))

    def find_cycle(self, start: str) -> list[str] | None:
        """Return the first cycle reachable from ``start`` as a closed path, else ``None``.

        ``["a", "b", "a"]`` means ``a -> b -> a``.
        """
        visited: set[str] = set()
        path: list[str] = []
        on_path: set[str] = set()

        def visit(node: str) -> list[str] | None:
            if node in on_path:
                return path[path.index(node):] + [node]
            if node in visited:
                return None
            on_path.add(node)
            path.append(node)
            for dep in self._edges(node):
                cycle = visit(dep)
                if cycle is not None:
                    return cycle
            # backtrack
            path.pop()
            on_path.discard(node)
            visited.add(node)
            return None

        return visit(start)

    def has_cycle(self, start: str) -> bool:
        return self.find_cycle(start) is not None

    def require_acyclic(self, start: str) -> None:
        """
        :raises CyclicDependencyError: if a cycle is reachable from ``start``.
        """
        cycle = self.find_cycle(start)
        if cycle is not None:
            raise CyclicDependencyError(cycle)
