#!/usr/bin/env python3
"""
Weighted Sampling
=================
Proportional selection over integer weights using a caller-supplied
``random.Random``-compatible source (``secrets.SystemRandom`` in production,
a seeded ``random.Random`` for reproducible runs).
"""

import secrets
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar('T')


def system_rng() -> secrets.SystemRandom:
    """Fresh CSPRNG backed by the operating system entropy pool."""
    return secrets.SystemRandom()


def weighted_index(weights: Sequence[int], rng) -> Optional[int]:
    """
    Pick index ``i`` with probability ``weights[i] / sum(weights)``.

    Uses a single ``rng.randrange`` draw and one cumulative scan.

    Returns:
        The chosen index, or None when ``weights`` is empty or sums to zero.
    """
    total = sum(weights)
    if total <= 0:
        return None

    target = rng.randrange(total)
    cumulative = 0
    for i, weight in enumerate(weights):
        cumulative += weight
        if target < cumulative:
            return i
    # Unreachable for non-negative weights
    return None


def weighted_choice(pairs: Sequence[Tuple[T, int]], rng) -> Optional[T]:
    """Pick the item of an ``(item, weight)`` sequence, or None if nothing can be drawn."""
    index = weighted_index([weight for _, weight in pairs], rng)
    if index is None:
        return None
    return pairs[index][0]


__all__ = ["system_rng", "weighted_index", "weighted_choice"]
