"""Text serialization of graph families.

Each family is written to ``graphs_<size>/family_<i>.txt`` with one line per
member graph, e.g. ``[(0, 1), (1, 2), (3, )]``: edges as ``(u, v)`` with
``u < v``, followed by isolated nodes as ``(n, )``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import networkx as nx
from loguru import logger


def sorted_edges(G: nx.Graph) -> List[Tuple[int, int]]:
    """Undirected edges as (u, v) with u < v, sorted."""
    return sorted((u, v) if u < v else (v, u) for u, v in G.edges())


def isolated_nodes(G: nx.Graph) -> List[int]:
    return sorted(v for v in G.nodes() if G.degree(v) == 0)


def format_graph(G: nx.Graph) -> str:
    parts = [f"({u}, {v})" for u, v in sorted_edges(G)]
    parts.extend(f"({v}, )" for v in isolated_nodes(G))
    return "[" + ", ".join(parts) + "]"


def family_dir(size: int, root: str | Path = ".") -> Path:
    return Path(root) / f"graphs_{size}"


def write_families(
    families: Dict[str, Sequence[nx.Graph]],
    size: int,
    root: str | Path = ".",
) -> List[Path]:
    """
    Write each family (in insertion order) to root/graphs_<size>/family_<i>.txt.

    Returns the written paths. OSError from directory or file creation
    propagates to the caller.
    """
    out_dir = family_dir(size, root)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths: List[Path] = []
    for i, graphs in enumerate(families.values()):
        path = out_dir / f"family_{i}.txt"
        with open(path, "w", encoding="utf-8") as f:
            for G in graphs:
                f.write(format_graph(G) + "\n")
        paths.append(path)

    logger.debug(f"Wrote {len(paths)} family files to {out_dir}")
    return paths
