#!/usr/bin/env python3
"""
Entropy Estimates
=================
Entropy figures attached to every generated password, plus the strength
buckets used when the value is shown to a user.

Each estimate carries a ``source`` label naming the code path that produced
it, since the Markov path and the syllable fallback are scored differently.
"""

import math
from dataclasses import dataclass
from enum import Enum


# Bits at which the strength bar is full
PERCENTAGE_CAP_BITS = 128.0


class StrengthLevel(Enum):
    """Strength bucket derived from entropy bits."""
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

    @property
    def label(self) -> str:
        return self.value


# (upper bound in whole bits, level), checked in order
_STRENGTH_THRESHOLDS = (
    (24, StrengthLevel.VERY_WEAK),
    (49, StrengthLevel.WEAK),
    (74, StrengthLevel.MODERATE),
    (99, StrengthLevel.STRONG),
)


@dataclass(frozen=True)
class EntropyInfo:
    """Entropy estimate in bits and the label of the path that produced it."""
    bits: float
    source: str

    def __post_init__(self):
        if math.isnan(self.bits) or self.bits < 0:
            raise ValueError(f"entropy must be a non-negative number, got {self.bits}")

    def strength(self) -> StrengthLevel:
        whole_bits = int(self.bits)
        for upper, level in _STRENGTH_THRESHOLDS:
            if whole_bits <= upper:
                return level
        return StrengthLevel.VERY_STRONG

    def percentage(self) -> int:
        """Percentage for a progress bar (0-100, full at 128 bits)."""
        return int(min(self.bits / PERCENTAGE_CAP_BITS * 100.0, 100.0))


def uniform_entropy(length: int, choices: float, divisor: float = 1.0) -> float:
    """
    Bits for ``length`` independent picks among ``choices`` options.

    ``divisor`` scales the result down for coarser sampling schemes
    (the syllable fallback halves it because each pick covers two characters).
    """
    if length <= 0:
        return 0.0
    if choices < 1:
        raise ValueError(f"choices must be >= 1, got {choices}")
    return length * math.log2(choices) / divisor


__all__ = [
    "EntropyInfo",
    "StrengthLevel",
    "uniform_entropy",
    "PERCENTAGE_CAP_BITS",
]
