#!/usr/bin/env python3
"""
Transition Model
================
Second-order character model trained on a word corpus.

For every word the first two letters are counted as a start context, and
every trigram ``abc`` adds one to the weight of ``c`` following ``ab``.
The finished model is frozen and can be shared between any number of
generators and threads.

Corpus files use the diceware layout, one ``<rank><TAB><word>`` per line:

    11111	abacus
    11112	abdomen
"""

import logging
from collections import defaultdict, Counter
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from passforge.settings import require_setting, resolve_path

logger = logging.getLogger(__name__)


Context = Tuple[str, str]

# Used when the corpus yields no contexts at all (alphabet size)
DEFAULT_BRANCHING_FACTOR = 26.0

# Shortest word that still contains a trigram
MIN_WORD_LENGTH = 3


@dataclass(frozen=True)
class TransitionModel:
    """Character-level 2nd-order Markov model (read-only after build)"""
    transitions: Mapping[Context, Tuple[Tuple[str, int], ...]] = field(
        default_factory=lambda: MappingProxyType({}))
    start_contexts: Tuple[Tuple[Context, int], ...] = ()
    avg_branching_factor: float = DEFAULT_BRANCHING_FACTOR

    def successors(self, context: Context) -> Tuple[Tuple[str, int], ...]:
        """Weighted successors of ``context``; empty at a dead end."""
        return self.transitions.get(context, ())

    @property
    def context_count(self) -> int:
        return len(self.transitions)

    @property
    def is_empty(self) -> bool:
        return not self.start_contexts


def normalize_word(word: str) -> str:
    """Lowercase and keep alphabetic characters only."""
    return ''.join(c for c in word.lower() if c.isalpha())


def build_model(words: Iterable[str]) -> TransitionModel:
    """Count start contexts and trigram transitions over ``words``."""
    transition_counts = defaultdict(Counter)
    start_counts = Counter()
    used = 0

    for word in words:
        chars = normalize_word(word)
        if len(chars) < MIN_WORD_LENGTH:
            continue
        used += 1

        start_counts[(chars[0], chars[1])] += 1
        for i in range(len(chars) - 2):
            context = (chars[i], chars[i + 1])
            transition_counts[context][chars[i + 2]] += 1

    transitions = {
        context: tuple(counts.items())
        for context, counts in transition_counts.items()
    }

    if transitions:
        total_successors = sum(len(succ) for succ in transitions.values())
        avg_branching_factor = total_successors / len(transitions)
    else:
        avg_branching_factor = DEFAULT_BRANCHING_FACTOR

    model = TransitionModel(
        transitions=MappingProxyType(transitions),
        start_contexts=tuple(start_counts.items()),
        avg_branching_factor=avg_branching_factor,
    )
    logger.info(
        "Built transition model: %d words, %d contexts, %d start contexts, "
        "branching factor %.2f",
        used, model.context_count, len(model.start_contexts),
        model.avg_branching_factor,
    )
    return model


# =============================================================================
# Corpus Loading
# =============================================================================

def parse_corpus(lines: Iterable[str]) -> list[str]:
    """Extract the word column from ``<rank>\\t<word>`` lines.

    Lines that do not have exactly two tab-separated fields are skipped.
    """
    words = []
    for line in lines:
        parts = line.rstrip('\r\n').split('\t')
        if len(parts) != 2:
            continue
        words.append(parts[1])
    return words


def load_corpus(path: Path) -> list[str]:
    """Read and parse a corpus file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Training corpus not found: {path}")
    # Undecodable bytes become U+FFFD, which normalize_word() drops
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return parse_corpus(f)


def build_model_from_file(path: Path) -> TransitionModel:
    return build_model(load_corpus(path))


@lru_cache(maxsize=1)
def default_model() -> TransitionModel:
    """Model trained on the configured corpus (``markov.corpus_path``), built once."""
    corpus_path = resolve_path(require_setting("markov.corpus_path"))
    return build_model_from_file(corpus_path)


__all__ = [
    "Context",
    "TransitionModel",
    "DEFAULT_BRANCHING_FACTOR",
    "build_model",
    "build_model_from_file",
    "default_model",
    "load_corpus",
    "normalize_word",
    "parse_corpus",
]
