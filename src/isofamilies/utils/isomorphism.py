"""Exact isomorphism oracles.

An oracle is any callable ``(A, B) -> bool`` that decides graph isomorphism
exactly. The deduplication store only ever consumes this interface.
"""
from __future__ import annotations

import os
from typing import Callable, Dict

import networkx as nx

from isofamilies.utils.canonical import canonical_graph_bruteforce, canonical_graph_nauty

Oracle = Callable[[nx.Graph, nx.Graph], bool]

DEFAULT_ORACLE = "vf2"


def _same_size(A: nx.Graph, B: nx.Graph) -> bool:
    return (
        A.number_of_nodes() == B.number_of_nodes()
        and A.number_of_edges() == B.number_of_edges()
    )


def vf2_is_isomorphic(A: nx.Graph, B: nx.Graph) -> bool:
    """NetworkX VF2 matcher."""
    return _same_size(A, B) and nx.is_isomorphic(A, B)


def nauty_is_isomorphic(A: nx.Graph, B: nx.Graph) -> bool:
    """Equal nauty canonical forms. Raises RuntimeError without nauty."""
    return _same_size(A, B) and canonical_graph_nauty(A) == canonical_graph_nauty(B)


def bruteforce_is_isomorphic(A: nx.Graph, B: nx.Graph) -> bool:
    """Equal min-over-permutations canonical forms (n <= 10)."""
    if not _same_size(A, B):
        return False
    ca = canonical_graph_bruteforce(list(A.edges()), set(A.nodes()))
    cb = canonical_graph_bruteforce(list(B.edges()), set(B.nodes()))
    return ca == cb


ORACLES: Dict[str, Oracle] = {
    "vf2": vf2_is_isomorphic,
    "nauty": nauty_is_isomorphic,
    "bruteforce": bruteforce_is_isomorphic,
}


def get_oracle(name: str | None = None) -> Oracle:
    """Resolve an oracle by name (default: $ISOFAMILIES_ORACLE or 'vf2')."""
    if name is None:
        name = os.environ.get("ISOFAMILIES_ORACLE", DEFAULT_ORACLE)
    try:
        return ORACLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown isomorphism oracle {name!r}; choose from {sorted(ORACLES)}."
        ) from None
