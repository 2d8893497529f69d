"""
Type definitions for graph reachability operations.

This module contains the graph representations consumed by the traversal
algorithms, organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeAlias, TypeVar, runtime_checkable

# Basic type variables for generic operations
T = TypeVar("T")


# Map graph representation
NodeId: TypeAlias = int
MapGraph: TypeAlias = Mapping[NodeId, Set[NodeId]]  # graph[id] -> neighbour ids


# Node graph representation
@dataclass(eq=False)
class Vertex(Generic[T]):
    """
    A vertex of a directed graph owning references to its successors.

    Equality and hashing are by identity: two vertices holding the same data
    are distinct. Neighbour lists may form cycles, including self-loops.
    """

    data: T
    neighbors: list[Vertex[T]] = field(default_factory=list)

    def connect(self, *others: Vertex[T]) -> Vertex[T]:
        """Appends edges self -> other for each other, returns self."""
        self.neighbors.extend(others)
        return self

    def __repr__(self) -> str:
        return f"Vertex({self.data!r}, out={len(self.neighbors)})"


# Professional network representation
@runtime_checkable
class Professional(Protocol):
    """Anything with an employer and links to other professionals."""

    @property
    def company(self) -> str: ...

    @property
    def connections(self) -> Iterable[Professional]: ...


@dataclass(eq=False)
class Person:
    name: str
    company: str
    connections: list[Person] = field(default_factory=list)

    def connect(self, *others: Person) -> Person:
        self.connections.extend(others)
        return self

    def __repr__(self) -> str:
        return f"Person({self.name!r} @ {self.company!r})"
