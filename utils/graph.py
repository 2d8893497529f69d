"""
Functions related to graphs

Every walk here is guarded by a visited set keyed by `key(vertex)`, so cyclic
graphs (self-loops, mutual references, reconverging diamonds) terminate and
each vertex is produced exactly once. The default key is `id`, which makes the
walk follow object identity rather than value equality. Integer-labelled
graphs must pass `key=identity` instead, as equal ints need not share an id.

Functions:
    depth_first_reachable(after, root, key) - DFS preorder over reachable vertices
    count_reachable(after, root, predicate, key) - Reachable vertices matching predicate
    find_reachable(after, root, predicate, key) - First reachable match, short-circuits
    can_reach(after, source, target, key) - Directed reachability, reflexive
    map_neighbors(graph) - `after` function for an adjacency mapping
"""

import logging
from collections.abc import Callable, Hashable, Mapping, Set
from typing import TypeVar

from typing_extensions import Iterable, Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_NO_NEIGHBOURS: frozenset = frozenset()


def identity(x: H) -> H:
    return x


def depth_first_reachable(
    after: Callable[[T], Iterable[T]],
    root: T | None,
    key: Callable[[T], Hashable] = id,
) -> Iterator[T]:
    """
    Yields every vertex reachable from root exactly once, parent before children.

    Args:
        after: Function returning the direct successors of a vertex.
        root: Starting vertex, included in the output. None yields nothing.
        key: Visited-set key of a vertex.

    Uses an explicit stack, so arbitrarily long chains do not hit the
    recursion limit. Successors are visited in the order `after` returns them.
    """
    if root is None:
        return

    seen: set[Hashable] = set()
    stack = [root]
    while stack:
        current = stack.pop()

        # Avoid cycles
        k = key(current)
        if k in seen:
            continue
        seen.add(k)

        yield current
        children = list(after(current))
        stack.extend(reversed(children))


def count_reachable(
    after: Callable[[T], Iterable[T]],
    root: T | None,
    predicate: Callable[[T], bool],
    key: Callable[[T], Hashable] = id,
) -> int:
    """Number of vertices reachable from root (root included) satisfying predicate."""
    return sum(1 for vertex in depth_first_reachable(after, root, key) if predicate(vertex))


def find_reachable(
    after: Callable[[T], Iterable[T]],
    root: T | None,
    predicate: Callable[[T], bool],
    key: Callable[[T], Hashable] = id,
) -> T | None:
    """
    Returns the first vertex in depth-first preorder satisfying predicate.

    The walk stops as soon as a match is found; the remainder of the graph is
    never expanded. Returns None if nothing reachable matches.
    """
    for vertex in depth_first_reachable(after, root, key):
        if predicate(vertex):
            return vertex
    return None


def can_reach(
    after: Callable[[T], Iterable[T]],
    source: T,
    target: T,
    key: Callable[[T], Hashable] = id,
) -> bool:
    """True if a directed path leads from source to target. Every vertex reaches itself."""
    target_key = key(target)
    if key(source) == target_key:
        return True

    for visited, vertex in enumerate(depth_first_reachable(after, source, key), start=1):
        if key(vertex) == target_key:
            logger.debug(f"Reached target after {visited} vertices")
            return True
    return False


def map_neighbors(graph: Mapping[H, Set[H]]) -> Callable[[H], Set[H]]:
    """
    Turns an adjacency mapping into an `after` function.

    Vertices absent from the keys have no successors, so a neighbour that
    only appears as a value is reached but never expanded.
    """

    def after(node: H) -> Set[H]:
        return graph.get(node, _NO_NEIGHBOURS)

    return after
