from .canonical import (
    BRUTEFORCE_MAX_NODES,
    canonical_graph_bruteforce,
    canonical_graph_nauty,
)
from .isomorphism import (
    Oracle,
    DEFAULT_ORACLE,
    ORACLES,
    vf2_is_isomorphic,
    nauty_is_isomorphic,
    bruteforce_is_isomorphic,
    get_oracle,
)

__all__ = [
    "BRUTEFORCE_MAX_NODES",
    "canonical_graph_bruteforce",
    "canonical_graph_nauty",
    "Oracle",
    "DEFAULT_ORACLE",
    "ORACLES",
    "vf2_is_isomorphic",
    "nauty_is_isomorphic",
    "bruteforce_is_isomorphic",
    "get_oracle",
]
