#!/usr/bin/env python3
"""
Password Generators
===================
Strategies implementing the PasswordGenerator capability:
- Markov: pronounceable passwords from a trained character model,
  with a syllable-table fallback
"""

from .base import GeneratedPassword, PasswordGenerator
from .model import (
    TransitionModel,
    build_model,
    build_model_from_file,
    default_model,
    load_corpus,
    parse_corpus,
)
from .sampling import system_rng, weighted_index, weighted_choice
from .phonetics import is_pronounceable
from .markov import (
    MarkovGenerator,
    GenerationRequest,
    GenerationState,
    MARKOV_LABEL,
    FALLBACK_LABEL,
)

__all__ = [
    "GeneratedPassword",
    "PasswordGenerator",
    "TransitionModel",
    "build_model",
    "build_model_from_file",
    "default_model",
    "load_corpus",
    "parse_corpus",
    "system_rng",
    "weighted_index",
    "weighted_choice",
    "is_pronounceable",
    "MarkovGenerator",
    "GenerationRequest",
    "GenerationState",
    "MARKOV_LABEL",
    "FALLBACK_LABEL",
]
