from __future__ import annotations

import os
import shutil
import subprocess
from typing import Iterable

import networkx as nx


NAUTY_GENG = os.environ.get("NAUTY_GENG", "geng")
NAUTY_SHORTG = os.environ.get("NAUTY_SHORTG", "shortg")


def nauty_available() -> bool:
    """Returns True iff geng and shortg appear runnable."""
    return (
        shutil.which(NAUTY_GENG) is not None
        and shutil.which(NAUTY_SHORTG) is not None
    )


def _require_nauty() -> None:
    if not nauty_available():
        raise RuntimeError(
            "nauty not available (need 'geng' and 'shortg' in PATH, "
            "or set NAUTY_GENG/NAUTY_SHORTG)."
        )


def _looks_like_graph6_line(line: str) -> bool:
    if not line:
        return False
    if line.startswith(">"):
        return False
    if (" " in line) or ("\t" in line):
        return False
    return True


# ---------------------------------------------------------------------------
# Graph6 encoding
# ---------------------------------------------------------------------------

def edgelist_to_g6(edges: list[tuple[int, int]], n: int) -> str:
    """Convert an edge list on vertices {0..n-1} to a graph6 string."""
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(edges)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------

def canon_g6(g6: str) -> str:
    """Canonicalize a graph6 string using nauty shortg."""
    _require_nauty()
    inp = (g6.strip() + "\n").encode("ascii")
    p = subprocess.run(
        [NAUTY_SHORTG, "-q"],
        input=inp,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
    )
    lines = [ln.strip() for ln in p.stdout.decode("ascii", errors="replace").splitlines()]
    g6_lines = [ln for ln in lines if _looks_like_graph6_line(ln)]
    if not g6_lines:
        raise RuntimeError(
            "shortg produced no graph6 output.\n"
            f"input={g6!r}\nstdout={p.stdout!r}\nstderr={p.stderr!r}"
        )
    return g6_lines[-1]


# ---------------------------------------------------------------------------
# Graph generation (geng)
# ---------------------------------------------------------------------------

def geng_g6(n: int, *, connected: bool = False) -> Iterable[str]:
    """Stream graph6 strings for all graphs on n vertices, one per iso class.

    connected: only connected graphs (-c).
    """
    _require_nauty()

    cmd = [NAUTY_GENG, "-q", "-g"]
    if connected:
        cmd.append("-c")
    cmd.append(str(n))

    # stderr is discarded so a chatty geng cannot block on a full pipe; the
    # with-block reaps the child even when the caller stops iterating early
    with subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True) as p:
        assert p.stdout is not None
        for line in p.stdout:
            s = line.strip()
            if not s or s.startswith(">"):
                continue
            yield s
        p.wait()

    if p.returncode != 0:
        raise RuntimeError(f"geng failed for n={n} with return code {p.returncode}")
