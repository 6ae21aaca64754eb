from __future__ import annotations

import math
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import networkx as nx

from isofamilies.io.families import format_graph
from .layouts import base_layout


def draw_family(
    graphs: Sequence[nx.Graph],
    *,
    title: str | None = None,
    seed: int = 7,
    node_size: int = 140,
    edge_width: float = 1.2,
    max_cols: int = 4,
    save_path: str | Path | None = None,
):
    """
    Draw the members of one family side by side, one subplot per graph.

    If save_path is set, the figure is written there (PNG) and closed;
    otherwise it is shown. Returns the figure.
    """
    if not graphs:
        raise ValueError("draw_family needs at least one graph.")

    cols = min(max_cols, len(graphs))
    rows = math.ceil(len(graphs) / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(3.5 * cols, 3.5 * rows), squeeze=False)

    for ax in axes.flat:
        ax.set_axis_off()

    for ax, G in zip(axes.flat, graphs):
        ax.set_title(
            f"|V|={G.number_of_nodes()}  |E|={G.number_of_edges()}\n{format_graph(G)}",
            fontsize=7,
        )
        nx.draw_networkx(
            G,
            pos=base_layout(G, seed=seed),
            ax=ax,
            with_labels=True,
            node_size=node_size,
            width=edge_width,
            font_size=7,
        )

    if title:
        fig.suptitle(title)
    plt.tight_layout()

    if save_path is not None:
        fig.savefig(str(save_path), dpi=150)
        plt.close(fig)
    else:
        plt.show()
    return fig
