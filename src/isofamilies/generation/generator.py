"""Exhaustive generation of simple graphs up to isomorphism.

Starting from the one-node graph, each accepted graph G on n nodes is
extended by a node n joined to every subset of {0..n-1} (2^n candidates).
Every candidate goes through FamilyStore.try_insert exactly once, and only
accepted candidates are extended further, so each size level holds one
representative per isomorphism class.

Cost: adding the n-th node produces 2^(n-1) candidates per class on n-1
nodes, so time and memory grow roughly like 2^(n^2/2) in max_size.
Recursion depth equals max_size.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

import networkx as nx
from loguru import logger

from isofamilies.generation.families import filter_families
from isofamilies.generation.store import FamilyStore
from isofamilies.utils.isomorphism import Oracle


def _check_max_size(max_size: int) -> None:
    if isinstance(max_size, bool) or not isinstance(max_size, int):
        raise ValueError(f"max_size must be an int, got {max_size!r}.")
    if max_size < 1:
        raise ValueError(f"max_size must be >= 1, got {max_size}.")


def extend_graph(G: nx.Graph, mask: int) -> nx.Graph:
    """
    Copy of G plus node n = |V(G)|, joined to the j-th node of G (in sorted
    order) iff bit j of mask is set.
    """
    nodes = sorted(G.nodes())
    new = len(nodes)
    H = G.copy()
    H.add_node(new)
    H.add_edges_from((new, v) for j, v in enumerate(nodes) if (mask >> j) & 1)
    return H


def _extend(G: nx.Graph, max_size: int, store: FamilyStore) -> None:
    n = G.number_of_nodes()
    if n + 1 > max_size:
        return

    for mask in range(1 << n):
        H = extend_graph(G, mask)
        if store.try_insert(H):
            _extend(H, max_size, store)


def generate_graphs(
    max_size: int,
    *,
    oracle: Optional[Oracle] = None,
    store: Optional[FamilyStore] = None,
) -> Dict[str, List[nx.Graph]]:
    """
    Enumerate every simple graph on 1..max_size nodes up to isomorphism.

    Returns the store's buckets (signature -> pairwise non-isomorphic
    graphs), unfiltered and in discovery order. A caller-supplied store must
    be empty and is filled in place; oracle is ignored when store is given.
    Raises ValueError for max_size < 1 or a non-empty store.
    """
    _check_max_size(max_size)
    if store is None:
        store = FamilyStore(oracle=oracle)
    elif len(store):
        # the root would be rejected as a duplicate and nothing extended
        raise ValueError(f"store must be empty, it already holds {store.num_graphs()} graphs.")

    G0 = nx.Graph()
    G0.add_node(0)
    if store.try_insert(G0):
        _extend(G0, max_size, store)

    per_size = Counter(G.number_of_nodes() for b in store.buckets.values() for G in b)
    for n in sorted(per_size):
        logger.debug(f"size {n}: {per_size[n]} isomorphism classes")
    store.log_stats()
    logger.info(f"Found {store.num_graphs()} unique graphs under {len(store)} signatures")
    return store.buckets


def generate_families(
    max_size: int,
    *,
    oracle: Optional[Oracle] = None,
) -> Dict[str, List[nx.Graph]]:
    """generate_graphs followed by filter_families."""
    result = generate_graphs(max_size, oracle=oracle)
    families = filter_families(result, max_size)
    logger.info(f"Found {len(families)} families of size {max_size}")
    return families
