"""
isofamilies: exhaustive enumeration of simple graphs up to isomorphism,
bucketed by WL signatures and confirmed with an exact isomorphism test.
"""

from .wl import deterministic_hash, k_wl, k_tuple_colors, wl1_graph_hash
from .generation import (
    FamilyStore,
    StoreStats,
    generate_graphs,
    generate_families,
    filter_families,
    classes_of_size,
    count_classes,
)
from .utils.isomorphism import Oracle, get_oracle, vf2_is_isomorphic
from .io.families import format_graph, write_families
from .io.graph6 import g6_to_nx, nx_to_g6
from .external.nauty import nauty_available, geng_g6
from .viz.draw import draw_family

__all__ = [
    # WL
    "deterministic_hash",
    "k_wl",
    "k_tuple_colors",
    "wl1_graph_hash",
    # Generation
    "FamilyStore",
    "StoreStats",
    "generate_graphs",
    "generate_families",
    "filter_families",
    "classes_of_size",
    "count_classes",
    # Oracles
    "Oracle",
    "get_oracle",
    "vf2_is_isomorphic",
    # IO
    "format_graph",
    "write_families",
    "g6_to_nx",
    "nx_to_g6",
    # Nauty
    "nauty_available",
    "geng_g6",
    # Viz
    "draw_family",
]
