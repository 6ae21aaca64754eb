from __future__ import annotations

import networkx as nx


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph on 0..n-1.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def nx_to_g6(G: nx.Graph) -> str:
    """
    graph6 string (no header) of G, with nodes taken in sorted order.
    """
    # to_graph6_bytes encodes in insertion order; relabeling alone keeps it
    ordered = nx.Graph()
    ordered.add_nodes_from(sorted(G.nodes()))
    ordered.add_edges_from(G.edges())
    H = nx.convert_node_labels_to_integers(ordered)
    return nx.to_graph6_bytes(H, header=False).decode("ascii").strip()
