"""Deterministic two-stage hashing for WL labels and signatures."""
from __future__ import annotations

import hashlib
import struct

import xxhash

# XXH3 seed; must never vary between runs or processes.
HASH_SEED = 0


def structural_hash(obj: object) -> int:
    """Fixed-seed 64-bit XXH3 digest of ``repr(obj)``.

    Only nested tuples/lists of ints and strings are hashed here, and their
    ``repr`` is stable across interpreter runs.
    """
    return xxhash.xxh3_64_intdigest(repr(obj).encode("utf-8"), seed=HASH_SEED)


def deterministic_hash(obj: object) -> str:
    """SHA-256 hex digest of the little-endian structural hash of *obj*."""
    buf = struct.pack("<Q", structural_hash(obj))
    return hashlib.sha256(buf).hexdigest()
