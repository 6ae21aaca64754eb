from __future__ import annotations

from itertools import permutations

import networkx as nx

from isofamilies.external.nauty import nauty_available, canon_g6
from isofamilies.io.graph6 import nx_to_g6

# Largest node count canonical_graph_bruteforce accepts.
BRUTEFORCE_MAX_NODES = 10


def canonical_graph_bruteforce(
    edges: list[tuple[int, int]],
    vertices: set[int] | None = None,
) -> tuple[tuple[int, int], ...]:
    """Canonical form via min over all vertex permutations.

    Only practical for small graphs (n <= 10).
    Raises ValueError for n > 10; use canonical_graph_nauty instead.

    Returns a sorted tuple of (u, v) edge pairs with u < v, representing
    the lexicographically smallest relabeling. Isolated vertices only
    matter through *vertices*; compare vertex counts separately.
    """
    if not edges:
        return ()

    if vertices is None:
        vertices = set()
        for u, v in edges:
            vertices.add(u)
            vertices.add(v)

    vlist = sorted(vertices)
    n = len(vlist)

    if n > BRUTEFORCE_MAX_NODES:
        raise ValueError(
            f"Brute-force canonicalization is impractical for n={n}. "
            "Use canonical_graph_nauty() instead."
        )

    best: tuple[tuple[int, int], ...] | None = None
    for perm in permutations(range(n)):
        v_map = {vlist[i]: perm[i] for i in range(n)}
        relabeled = tuple(sorted(
            (min(v_map[u], v_map[v]), max(v_map[u], v_map[v]))
            for u, v in edges
        ))
        if best is None or relabeled < best:
            best = relabeled
    return best  # type: ignore[return-value]


def canonical_graph_nauty(G: nx.Graph) -> str:
    """Canonical graph6 string of G via nauty shortg.

    Raises RuntimeError if nauty is not available.
    """
    if not nauty_available():
        raise RuntimeError(
            "nauty not available for canonical_graph_nauty. "
            "Install nauty (geng, shortg) or use canonical_graph_bruteforce."
        )
    return canon_g6(nx_to_g6(G))
