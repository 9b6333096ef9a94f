#!/usr/bin/env python3
"""
Markov Pronounceable Password Generator
=======================================
Generates pronounceable passwords by walking a second-order character model
trained on a word list.

Pipeline per attempt:
1. Candidate: weighted start context, then weighted successors until the
   target length or a dead end; dead ends are padded by alternating
   vowels and consonants.
2. Post-processing: optional capitalization, digit and symbol insertion
   (length is restored by truncation after each insertion).
3. Validation: no run of more than three vowels or three consonants.

After ``max_attempts`` rejected candidates, or when the model has no start
contexts, the generator switches to a syllable table. That path always
succeeds and reports a lower entropy estimate under its own label.

Entropy:
- Markov path: ``length * log2(avg_branching_factor)``. This treats every
  step as uniform over the average branching factor and ignores weight skew.
- Syllable fallback: ``length * log2(86) / 2``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from passforge.entropy import EntropyInfo, uniform_entropy
from passforge.settings import require_setting
from passforge.generators.base import GeneratedPassword
from passforge.generators.model import TransitionModel, default_model
from passforge.generators.phonetics import (
    VOWELS,
    PADDING_CONSONANTS,
    is_vowel,
    is_pronounceable,
)
from passforge.generators.sampling import system_rng, weighted_choice

logger = logging.getLogger(__name__)


MARKOV_LABEL = "Markov pronounceable"
FALLBACK_LABEL = "Syllable fallback"

READABLE_SYMBOLS = '!@#$%&*-_+'
DIGITS = '0123456789'

# Consonant-vowel syllables for the fallback path (86 entries)
SYLLABLES = tuple(
    consonant + vowel
    for consonant in 'bdfghjklmnprstvz'
    for vowel in VOWELS
) + ('wa', 'we', 'wi', 'wo', 'ya', 'yo')


class GenerationState(Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"


# =============================================================================
# Request
# =============================================================================

@dataclass(frozen=True)
class GenerationRequest:
    """Options for one generator. Unset fields come from ``markov.defaults`` in app.yaml."""
    length: Optional[int] = None
    include_digits: Optional[bool] = None
    include_symbols: Optional[bool] = None
    capitalize: Optional[bool] = None

    def __post_init__(self):
        for name in ("length", "include_digits", "include_symbols", "capitalize"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, require_setting(f"markov.defaults.{name}"))

        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an integer, got {self.length!r}")
        if self.length < 1:
            raise ValueError(f"length must be positive, got {self.length}")


# =============================================================================
# Generator
# =============================================================================

class MarkovGenerator:
    """Pronounceable passwords from a trained TransitionModel"""

    def __init__(self,
                 request: GenerationRequest = None,
                 model: TransitionModel = None,
                 max_attempts: int = None,
                 max_walk_steps: int = None):
        """
        Args:
            request: Length and character options (defaults from app.yaml)
            model: Trained model to share; the configured corpus is used if None
            max_attempts: Candidates tried before the syllable fallback
            max_walk_steps: Model-driven steps allowed per candidate
        """
        self.request = request if request is not None else GenerationRequest()
        self.model = model if model is not None else default_model()
        self.max_attempts = (max_attempts if max_attempts is not None
                             else require_setting("markov.max_attempts"))
        self.max_walk_steps = (max_walk_steps if max_walk_steps is not None
                               else require_setting("markov.max_walk_steps"))

    @property
    def length(self) -> int:
        return self.request.length

    def description(self) -> str:
        return "Pronounceable (Markov chain)"

    # -------------------------------------------------------------------------
    # Candidate walk
    # -------------------------------------------------------------------------

    def generate_candidate(self, rng) -> Optional[str]:
        """Raw lowercase candidate of exactly ``length`` chars, or None if the model has no start contexts."""
        start = weighted_choice(self.model.start_contexts, rng)
        if start is None:
            return None

        chars = list(start)
        steps = 0
        while len(chars) < self.length and steps < self.max_walk_steps:
            successors = self.model.successors((chars[-2], chars[-1]))
            next_char = weighted_choice(successors, rng)
            if next_char is None:
                break  # dead end
            chars.append(next_char)
            steps += 1

        while len(chars) < self.length:
            if is_vowel(chars[-1]):
                chars.append(rng.choice(PADDING_CONSONANTS))
            else:
                chars.append(rng.choice(VOWELS))

        return ''.join(chars[:self.length])

    # -------------------------------------------------------------------------
    # Post-processing
    # -------------------------------------------------------------------------

    def _insert_random(self, text: str, alphabet: str, rng) -> str:
        # Position 0 is skipped so a capitalized first letter survives
        pos = rng.randrange(1, len(text))
        char = rng.choice(alphabet)
        return (text[:pos] + char + text[pos:])[:self.length]

    def post_process(self, text: str, rng) -> str:
        """
        Capitalize, then insert a digit, then a symbol.

        Each insertion is followed by truncation back to ``length``, so a
        later insertion can push an earlier one off the end.
        """
        if self.request.capitalize and text:
            # Some letters uppercase to several chars (ß -> SS); keep the first
            text = text[0].upper()[0] + text[1:]

        if self.request.include_digits and len(text) > 2:
            text = self._insert_random(text, DIGITS, rng)

        if self.request.include_symbols and len(text) > 2:
            text = self._insert_random(text, READABLE_SYMBOLS, rng)

        return text

    # -------------------------------------------------------------------------
    # Fallback
    # -------------------------------------------------------------------------

    def generate_syllables(self, rng) -> str:
        """Uniform syllable concatenation truncated to ``length``."""
        parts = []
        size = 0
        while size < self.length:
            syllable = rng.choice(SYLLABLES)
            parts.append(syllable)
            size += len(syllable)
        return ''.join(parts)[:self.length]

    # -------------------------------------------------------------------------
    # Entropy
    # -------------------------------------------------------------------------

    def markov_entropy(self) -> EntropyInfo:
        bits = uniform_entropy(self.length, self.model.avg_branching_factor)
        return EntropyInfo(bits, MARKOV_LABEL)

    def fallback_entropy(self) -> EntropyInfo:
        bits = uniform_entropy(self.length, len(SYLLABLES), divisor=2.0)
        return EntropyInfo(bits, FALLBACK_LABEL)

    # -------------------------------------------------------------------------
    # Controller
    # -------------------------------------------------------------------------

    def generate(self, rng=None) -> GeneratedPassword:
        """
        Generate one password.

        Starts in PRIMARY and moves to FALLBACK (never back) when the retry
        budget is spent or no candidate can be built.

        Args:
            rng: random.Random-compatible source; a fresh SystemRandom if None
        """
        if rng is None:
            rng = system_rng()

        state = GenerationState.PRIMARY
        attempts = 0

        while state is GenerationState.PRIMARY:
            if attempts >= self.max_attempts:
                logger.debug("No pronounceable candidate after %d attempts, "
                             "using syllable fallback", attempts)
                state = GenerationState.FALLBACK
                continue

            attempts += 1
            candidate = self.generate_candidate(rng)
            if candidate is None:
                logger.debug("Model has no start contexts, using syllable fallback")
                state = GenerationState.FALLBACK
                continue

            password = self.post_process(candidate, rng)
            if is_pronounceable(password):
                return GeneratedPassword.from_text(password, self.markov_entropy())

        password = self.post_process(self.generate_syllables(rng), rng)
        return GeneratedPassword.from_text(password, self.fallback_entropy())

    def generate_batch(self, count: int, rng=None) -> list[GeneratedPassword]:
        """Generate ``count`` passwords from one randomness source."""
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        if rng is None:
            rng = system_rng()
        return [self.generate(rng) for _ in range(count)]


__all__ = [
    "MarkovGenerator",
    "GenerationRequest",
    "GenerationState",
    "MARKOV_LABEL",
    "FALLBACK_LABEL",
    "READABLE_SYMBOLS",
    "SYLLABLES",
]
