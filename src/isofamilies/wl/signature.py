"""k-WL canonical signatures.

``k_wl(G, k, iterations)`` is an isomorphism invariant: isomorphic graphs
always get equal strings, while non-isomorphic graphs usually (not always)
get different ones. k=1 runs the node-label WL hash; k>=2 refines colors of
ordered k-tuples.
"""
from __future__ import annotations

import itertools
from collections import Counter
from typing import Dict, Hashable, List, Optional, Tuple

import networkx as nx

from .hashing import deterministic_hash


TupleK = Tuple[Hashable, ...]


def _check_params(k: int, iterations: Optional[int]) -> None:
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f"k must be an int, got {k!r}.")
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}.")
    if iterations is None:
        return
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise ValueError(f"iterations must be None or an int, got {iterations!r}.")
    if iterations < 1:
        raise ValueError(f"iterations must be None or >= 1, got {iterations}.")


def _resolve_iterations(G: nx.Graph, iterations: Optional[int]) -> int:
    # Refinement can split at most n-1 times on n elements.
    return G.number_of_nodes() if iterations is None else iterations


def atomic_type(G: nx.Graph, t: TupleK) -> Tuple[int, ...]:
    """
    Adjacency indicators over the C(k,2) position pairs (i<j) of tuple t,
    in row-major pair order.
    """
    k = len(t)
    return tuple(
        1 if G.has_edge(t[i], t[j]) else 0
        for i in range(k)
        for j in range(i + 1, k)
    )


def _compress(sig: Dict[TupleK, object]) -> Dict[TupleK, int]:
    """Integer colors by enumerating the distinct signatures in sorted order."""
    mp = {s: i for i, s in enumerate(sorted(set(sig.values())))}
    return {t: mp[s] for t, s in sig.items()}


def k_tuple_colors(
    G: nx.Graph,
    k: int,
    iterations: Optional[int] = None,
) -> Tuple[Dict[TupleK, int], int]:
    """
    Run k-WL refinement on all n^k ordered k-tuples of G.

    Returns:
      (colors, rounds)
    where colors maps each tuple to its final integer color and rounds is
    the number of refinement rounds computed (the round that detects a fixed
    point is counted).

    NOTE: n^k tuples, each with k*n neighbors per round; small graphs only.
    """
    _check_params(k, iterations)
    max_rounds = _resolve_iterations(G, iterations)

    nodes: List[Hashable] = sorted(G.nodes())
    tuples: List[TupleK] = list(itertools.product(nodes, repeat=k))

    colors = _compress({t: atomic_type(G, t) for t in tuples})

    rounds = 0
    for _ in range(max_rounds):
        rounds += 1
        sig: Dict[TupleK, object] = {}
        for t in tuples:
            parts: List[object] = [colors[t]]
            t_list = list(t)
            for i in range(k):
                old = t_list[i]
                multiset = []
                for v in nodes:
                    t_list[i] = v
                    multiset.append(colors[tuple(t_list)])
                t_list[i] = old
                multiset.sort()
                parts.append(tuple(multiset))
            sig[t] = tuple(parts)

        new_colors = _compress(sig)
        if new_colors == colors:
            break
        colors = new_colors

    return colors, rounds


def wl1_graph_hash(G: nx.Graph, iterations: int) -> str:
    """
    Node-label WL hash.

    Labels start as degrees (as strings). Each round a node's label becomes
    the hash of its label followed by its neighbors' sorted labels. The
    sorted (label, count) histogram of every round is collected, and the
    whole trajectory is hashed into the signature.
    """
    labels: Dict[Hashable, str] = {v: str(d) for v, d in G.degree()}

    trajectory: List[Tuple[str, int]] = []
    for _ in range(iterations):
        new_labels: Dict[Hashable, str] = {}
        for v in G.nodes():
            neigh = sorted(labels[u] for u in G.neighbors(v))
            new_labels[v] = deterministic_hash(labels[v] + "".join(neigh))
        labels = new_labels
        trajectory.extend(sorted(Counter(labels.values()).items()))

    return deterministic_hash(trajectory)


def k_wl(G: nx.Graph, k: int = 1, iterations: Optional[int] = None) -> str:
    """
    k-WL signature of G.

    iterations=None runs until the coloring stabilizes, bounded by the node
    count (k=1 always runs the full bound, its trajectory is part of the hash).
    Raises ValueError for k < 1 or iterations < 1.
    """
    _check_params(k, iterations)
    if k == 1:
        return wl1_graph_hash(G, _resolve_iterations(G, iterations))

    colors, _rounds = k_tuple_colors(G, k, iterations)
    return deterministic_hash(sorted(colors.values()))
