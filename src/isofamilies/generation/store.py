"""Signature-bucketed store of pairwise non-isomorphic graphs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

import networkx as nx
from loguru import logger

from isofamilies.utils.isomorphism import Oracle, get_oracle
from isofamilies.wl.signature import k_wl

SignatureFn = Callable[[nx.Graph], str]


def wl1_signature(G: nx.Graph) -> str:
    """Bucket key used during generation: 1-WL run for n rounds."""
    return k_wl(G, 1, None)


@dataclass
class StoreStats:
    """
    Counters for one store.

    candidates:   try_insert calls
    inserted:     graphs accepted as new
    duplicates:   graphs rejected as isomorphic to a bucket member
    oracle_calls: exact isomorphism tests performed
    """

    candidates: int = 0
    inserted: int = 0
    duplicates: int = 0
    oracle_calls: int = 0


class FamilyStore:
    """
    Maps a signature to the graphs already confirmed distinct under it.

    No two graphs in one bucket are isomorphic: every candidate is checked
    against each member of its bucket with the exact oracle before it is
    appended.
    """

    def __init__(
        self,
        oracle: Optional[Oracle] = None,
        signature: Optional[SignatureFn] = None,
    ) -> None:
        self.oracle: Oracle = oracle if oracle is not None else get_oracle()
        self.signature: SignatureFn = signature if signature is not None else wl1_signature
        self.buckets: Dict[str, List[nx.Graph]] = {}
        self.stats = StoreStats()

    def try_insert(self, G: nx.Graph) -> bool:
        """Add G unless its bucket already holds an isomorphic graph.

        Returns True iff G was added. A rejected graph leaves the store
        unchanged (no empty bucket is created).
        """
        self.stats.candidates += 1
        key = self.signature(G)
        bucket = self.buckets.get(key)

        if bucket is not None:
            for H in bucket:
                self.stats.oracle_calls += 1
                if self.oracle(G, H):
                    self.stats.duplicates += 1
                    return False
            bucket.append(G)
        else:
            self.buckets[key] = [G]

        self.stats.inserted += 1
        return True

    def num_graphs(self) -> int:
        return sum(len(b) for b in self.buckets.values())

    def __len__(self) -> int:
        return len(self.buckets)

    def __contains__(self, key: object) -> bool:
        return key in self.buckets

    def __iter__(self) -> Iterator[str]:
        return iter(self.buckets)

    def log_stats(self) -> None:
        s = self.stats
        logger.debug(
            f"store: {s.candidates} candidates, {s.inserted} inserted, "
            f"{s.duplicates} duplicates, {s.oracle_calls} oracle calls, "
            f"{len(self)} signatures"
        )
