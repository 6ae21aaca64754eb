from .hashing import HASH_SEED, structural_hash, deterministic_hash
from .signature import (
    atomic_type,
    k_tuple_colors,
    wl1_graph_hash,
    k_wl,
)

__all__ = [
    "HASH_SEED",
    "structural_hash",
    "deterministic_hash",
    "atomic_type",
    "k_tuple_colors",
    "wl1_graph_hash",
    "k_wl",
]
