#!/usr/bin/env python
"""
DenseTensor Demo: Row-Major Indexing
====================================

Builds a small tensor, shows the offsets derived from its shape and
walks through partial and full indexing.
"""

import sys
import os
import logging

# Add parent directory to path so we can import densetensor
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import densetensor as dn


def demo_layout():
    """Demo: shape and offsets."""
    print("\n" + "=" * 60)
    print("LAYOUT")
    print("=" * 60)
    
    t = dn.tensor(range(12), (2, 2, 3))
    print(f"\n{t}")
    print(f"shape   = {t.shape}")
    print(f"offsets = {t.offsets}")
    return t


def demo_indexing(t):
    """Demo: partial and full multi-indices."""
    print("\n" + "=" * 60)
    print("INDEXING")
    print("=" * 60)
    
    for idx in ([], [1], [1, 1], [1, 1, 0]):
        sub = t.at(idx)
        print(f"\nat({idx}) -> shape {sub.shape}")
        print(f"  {sub.tolist()}")
    
    for idx in ([2, 2, 2, 2], [2]):
        try:
            t.at(idx)
        except dn.TensorError as e:
            print(f"\nat({idx}) -> {type(e).__name__}: {e}")


if __name__ == "__main__":
    dn.setup_logging(logging.DEBUG if "-v" in sys.argv else logging.INFO)
    demo_indexing(demo_layout())
