"""
Tests for the Pronounceability Check
====================================
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passforge.generators.phonetics import MAX_RUN, is_pronounceable, is_vowel


class TestIsPronounceable:
    """Tests for is_pronounceable()."""

    @pytest.mark.parametrize("word", ["hello", "password", "banana", "orchard"])
    def test_accepts_natural_words(self, word):
        assert is_pronounceable(word)

    @pytest.mark.parametrize("word", ["abcdstrng", "xyzwvuts", "queueing"])
    def test_rejects_long_runs(self, word):
        assert not is_pronounceable(word)

    def test_run_of_three_allowed(self):
        assert is_pronounceable("strap")
        assert is_pronounceable("beautiful")  # 'eau'

    def test_run_of_four_rejected(self):
        assert not is_pronounceable("stramp" + "bcdf")
        assert not is_pronounceable("aeio")

    def test_case_insensitive(self):
        assert not is_pronounceable("STRNG")
        assert is_pronounceable("Banana")

    def test_non_alpha_resets_runs(self):
        assert is_pronounceable("str4ng")
        assert is_pronounceable("aei-ou")
        assert not is_pronounceable("a1bcdf")

    def test_empty_and_no_letters(self):
        assert is_pronounceable("")
        assert is_pronounceable("1234!@#$")

    def test_y_counts_as_consonant(self):
        assert not is_pronounceable("rhythm")

    def test_max_run(self):
        assert MAX_RUN == 3


def test_is_vowel():
    assert is_vowel('a')
    assert is_vowel('U')
    assert not is_vowel('y')
    assert not is_vowel('b')
