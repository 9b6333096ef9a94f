#!/usr/bin/env python3
"""
Pronounceability Rules
======================
Letter classes and the run-length check applied to Markov candidates.
"""

VOWELS = 'aeiou'

# Consonants used to pad a walk that hit a dead end
PADDING_CONSONANTS = 'bcdfghklmnprst'

# Longest allowed run of vowels or of consonants
MAX_RUN = 3


def is_vowel(char: str) -> bool:
    return char.lower() in VOWELS


def is_pronounceable(text: str) -> bool:
    """Reject text with more than MAX_RUN consecutive vowels or consonants.

    Non-alphabetic characters (digits, symbols) break a run. Text without
    letters, including the empty string, is accepted.
    """
    vowel_run = 0
    consonant_run = 0

    for char in text.lower():
        if not char.isalpha():
            vowel_run = 0
            consonant_run = 0
            continue

        if char in VOWELS:
            vowel_run += 1
            consonant_run = 0
            if vowel_run > MAX_RUN:
                return False
        else:
            consonant_run += 1
            vowel_run = 0
            if consonant_run > MAX_RUN:
                return False

    return True


__all__ = ["VOWELS", "PADDING_CONSONANTS", "MAX_RUN", "is_vowel", "is_pronounceable"]
