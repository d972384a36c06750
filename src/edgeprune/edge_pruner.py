# edge_pruner.py
from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional, Set, TypeVar

from .graph import Edge, Graph, canonical_edge
from .logger import get_logger
from .spanning_tree import SpanningTree

log = get_logger(__name__)

T = TypeVar("T")


def eligible_edges(graph: Graph, protected: SpanningTree) -> Iterator[Edge]:
    """
    Stream every undirected edge of ``graph`` not in ``protected``, once each.

    Edges come out in canonical form. The generator only reads the graph, so
    it must be drained before the graph is mutated.
    """
    seen: Set[Edge] = set()
    for nid, node in graph.nodes.items():
        for to in node.neighbours:
            e = canonical_edge(nid, to)
            if e in seen or e in protected:
                continue
            seen.add(e)
            yield e


def reservoir_sample(stream: Iterable[T], n: int, rng: random.Random) -> List[T]:
    """
    Uniform sample of up to ``n`` items from ``stream`` in one pass (Algorithm R).

    The first ``n`` items fill the reservoir. The k-th item after that
    (k counted from 1 over the whole stream) replaces slot ``j`` when
    ``j = rng.randrange(k)`` falls below ``n``, which keeps every item's
    inclusion probability at ``n / k``.
    """
    if n < 0:
        raise ValueError(f"reservoir size must be >= 0, got {n}")
    reservoir: List[T] = []
    if n == 0:
        return reservoir

    for k, item in enumerate(stream, start=1):
        if k <= n:
            reservoir.append(item)
            continue
        j = rng.randrange(k)
        if j < n:
            reservoir[j] = item
    return reservoir


def remove_random_edges(
    graph: Graph,
    n: int,
    protected: SpanningTree,
    rng: Optional[random.Random] = None,
) -> List[Edge]:
    """
    Remove up to ``n`` random edges of ``graph`` that are not in ``protected``.

    Parameters
    ----------
    graph : Graph
        Undirected graph, mutated in place.
    n : int
        Number of edges to remove. Asking for more than are eligible removes
        all of them.
    protected : SpanningTree
        Edges that must survive; pass the graph's spanning tree to keep it
        connected.
    rng : random.Random, optional
        Source of randomness. A fresh private generator is used when omitted.

    Returns
    -------
    list[Edge]
        The removed edges, canonical form.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0:
        return []
    rng = rng or random.Random()

    # sample first, mutate once the edge stream is exhausted
    chosen = reservoir_sample(eligible_edges(graph, protected), n, rng)

    for a, b in chosen:
        graph.remove_edge(a, b)

    log.debug("Removed %d of %d requested edge(s)", len(chosen), n)
    return chosen
