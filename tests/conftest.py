"""
Shared fixtures for the hash ring test suite.
"""
import os
import sys

import pytest

# Add project root to path so the flat modules import without installation
project_root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


class TableHash:
    """Deterministic hash function backed by a lookup table, for exact placements."""

    def __init__(self, table):
        self.table = dict(table)

    def __call__(self, key):
        return self.table[key]


@pytest.fixture
def table_hash():
    return TableHash


@pytest.fixture
def abc_ring(table_hash):
    """Three single-replica nodes at positions 10, 20 and 30."""
    from hash_ring import HashRing

    hash_fn = table_hash({
        "A:0": 10, "B:0": 20, "C:0": 30,
        "k5": 5, "k10": 10, "k15": 15, "k20": 20, "k25": 25, "k30": 30, "k35": 35,
    })
    return HashRing(1, hash_fn, nodes=["A", "B", "C"])
