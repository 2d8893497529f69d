"""
Reachability queries over node graphs, map graphs and professional networks.

Node graphs:
    odd_vertices(start)            - Count of reachable vertices holding odd values
    sorted_reachable(start)        - Sorted values of reachable vertices, duplicates kept
    two_way(v1, v2)                - Mutual reachability

Map graphs:
    sorted_reachable_ids(graph, start_id)              - Sorted reachable identifiers
    positive_path_exists(graph, start_id, end_id)      - Path through positive ids only

Networks:
    has_extended_connection_at_company(start, company) - Anyone reachable works there

All queries are total: missing starts, unknown ids and non-positive endpoints
give 0, [] or False rather than raising. Input graphs are never modified.
"""

import logging
from typing import TypeVar

from localtypes import MapGraph, NodeId, Professional, Vertex
from utils.graph import (
    can_reach,
    count_reachable,
    depth_first_reachable,
    find_reachable,
    identity,
    map_neighbors,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _successors(vertex: Vertex[T]) -> list[Vertex[T]]:
    return vertex.neighbors


def _connections(person: Professional):
    return person.connections


# =============================================================================
# Node graphs
# =============================================================================


def odd_vertices(start: Vertex[int] | None) -> int:
    """
    Returns the number of vertices with odd values reachable from start.

    The starting vertex counts if its value is odd. Each vertex counts once,
    so equal values on distinct vertices count separately.

    Example:
        5 --> 4
        |     |
        v     v
        8 --> 7 <-- 1
        |
        v
        9

        From 5 the odd vertices reached are 5, 7 and 9: the result is 3.
    """
    if start is None:
        return 0
    # Floor modulo: -3 % 2 == 1
    return count_reachable(_successors, start, lambda v: v.data % 2 == 1)


def sorted_reachable(start: Vertex[int] | None) -> list[int]:
    """
    Returns the values of all vertices reachable from start, in ascending order.

    Duplicated values held by distinct vertices all appear in the output.

    Example:
        5 --> 8
        |     |
        v     v
        8 --> 2 <-- 4

        From 5 the result is [2, 5, 8, 8].
    """
    if start is None:
        return []
    values = [vertex.data for vertex in depth_first_reachable(_successors, start)]
    logger.debug(f"Collected {len(values)} values from {start!r}")
    return sorted(values)


def two_way(v1: Vertex[T] | None, v2: Vertex[T] | None) -> bool:
    """
    True iff v2 is reachable from v1 and v1 is reachable from v2.

    A vertex always reaches itself, so two_way(v, v) holds without a search.
    """
    if v1 is None or v2 is None:
        return False
    if v1 is v2:
        return True
    return can_reach(_successors, v1, v2) and can_reach(_successors, v2, v1)


# =============================================================================
# Map graphs
# =============================================================================


def sorted_reachable_ids(graph: MapGraph | None, start_id: NodeId) -> list[NodeId]:
    """
    Returns the identifiers reachable from start_id, in ascending order.

    Identifiers are unique by construction, so the output has no duplicates.
    An id that only appears as a neighbour is included but not expanded.
    Returns [] if graph is None or start_id is not one of its keys.
    """
    if graph is None or start_id not in graph:
        logger.debug(f"No vertex {start_id} in graph, nothing reachable")
        return []
    reached = set(depth_first_reachable(map_neighbors(graph), start_id, key=identity))
    return sorted(reached)


def positive_path_exists(
    graph: MapGraph | None, start_id: NodeId, end_id: NodeId
) -> bool:
    """
    True if a path leads from start_id to end_id through positive ids only.

    Both endpoints must be keys of the graph and strictly positive; otherwise
    the answer is False without searching. start_id == end_id is a path of
    length zero.

    Example:
        1 --> 2 --> -3 --> 4

        (1, 2) is True; (1, 4) is False as every route passes through -3.
    """
    if graph is None:
        return False
    if start_id not in graph or end_id not in graph:
        logger.debug(f"Endpoint missing from graph: {start_id} -> {end_id}")
        return False
    if start_id <= 0 or end_id <= 0:
        logger.debug(f"Non-positive endpoint: {start_id} -> {end_id}")
        return False

    neighbours = map_neighbors(graph)

    def positive_neighbours(node: NodeId) -> list[NodeId]:
        return [n for n in neighbours(node) if n > 0]

    return can_reach(positive_neighbours, start_id, end_id, key=identity)


# =============================================================================
# Professional networks
# =============================================================================


def has_extended_connection_at_company(
    start: Professional | None, company_name: str
) -> bool:
    """
    True if anyone in the extended network of start works for company_name.

    The extended network is everyone reachable through any number of
    connections, start included. Each person's company is checked once, on
    their first visit; the search stops at the first match.
    """
    if start is None:
        return False
    match = find_reachable(
        _connections, start, lambda person: person.company == company_name
    )
    if match is not None:
        logger.debug(f"{match!r} works at {company_name!r}")
    return match is not None


__all__ = [
    "odd_vertices",
    "sorted_reachable",
    "two_way",
    "sorted_reachable_ids",
    "positive_path_exists",
    "has_extended_connection_at_company",
]
