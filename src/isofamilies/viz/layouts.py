from __future__ import annotations

import networkx as nx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable layout:
      - planar_layout if planar and succeeds
      - otherwise spring_layout
    """
    is_planar, _ = nx.check_planarity(G)
    if is_planar:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)
