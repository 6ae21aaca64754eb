from .graph6 import strip_graph6_header, g6_to_nx, nx_to_g6
from .families import (
    sorted_edges,
    isolated_nodes,
    format_graph,
    family_dir,
    write_families,
)

__all__ = [
    "strip_graph6_header",
    "g6_to_nx",
    "nx_to_g6",
    "sorted_edges",
    "isolated_nodes",
    "format_graph",
    "family_dir",
    "write_families",
]
