"""Post-generation selection of families."""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

import networkx as nx

# Buckets smaller than this never resolved an isomorphism ambiguity.
MIN_FAMILY_SIZE = 2


def filter_families(
    result: Mapping[str, Sequence[nx.Graph]],
    max_size: int,
) -> Dict[str, List[nx.Graph]]:
    """
    Keep signatures whose bucket held at least two graphs, restricted to the
    members with exactly max_size nodes; drop signatures left empty.

    The bucket-size rule is applied before the node-count restriction.
    The input is not modified; signature order is preserved.
    """
    out: Dict[str, List[nx.Graph]] = {}
    for sig, graphs in result.items():
        if len(graphs) < MIN_FAMILY_SIZE:
            continue
        kept = [G for G in graphs if G.number_of_nodes() == max_size]
        if kept:
            out[sig] = kept
    return out


def classes_of_size(
    result: Mapping[str, Sequence[nx.Graph]],
    size: int,
) -> Dict[str, List[nx.Graph]]:
    """
    Every isomorphism class on exactly *size* nodes, grouped by signature,
    with no minimum bucket size.
    """
    out: Dict[str, List[nx.Graph]] = {}
    for sig, graphs in result.items():
        kept = [G for G in graphs if G.number_of_nodes() == size]
        if kept:
            out[sig] = kept
    return out


def count_classes(
    result: Mapping[str, Sequence[nx.Graph]],
    size: Optional[int] = None,
) -> int:
    """Number of graphs held in *result*, optionally only those on *size* nodes."""
    if size is None:
        return sum(len(graphs) for graphs in result.values())
    return sum(
        1 for graphs in result.values() for G in graphs if G.number_of_nodes() == size
    )
