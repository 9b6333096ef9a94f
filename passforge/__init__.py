#!/usr/bin/env python3
"""
passforge - Pronounceable Password Generator
============================================

Generates pronounceable passwords from a character-level Markov model
and reports a conservative entropy estimate for each one.

Quick Start
-----------
    import passforge

    with passforge.generate_password(length=14, include_symbols=True) as pw:
        print(pw.value, f"{pw.entropy.bits:.1f} bits", pw.entropy.strength().label)

    # Reproducible output for tests
    import random
    gen = passforge.MarkovGenerator(passforge.GenerationRequest(length=10))
    pw = gen.generate(random.Random(42))

Modules
-------
    passforge.generators - Transition model, sampler and Markov generator
    passforge.entropy    - Entropy estimates and strength levels
    passforge.secret     - Wipeable storage for generated values
    passforge.settings   - app.yaml settings and logging setup
"""

__version__ = "0.1.0"

from . import generators
from . import entropy
from . import settings

from .entropy import EntropyInfo, StrengthLevel
from .secret import SecretValue
from .generators import (
    GeneratedPassword,
    PasswordGenerator,
    TransitionModel,
    MarkovGenerator,
    GenerationRequest,
    build_model,
    default_model,
    system_rng,
)
from .settings import configure_logging, get_setting


def generate_password(length: int = None,
                      include_digits: bool = None,
                      include_symbols: bool = None,
                      capitalize: bool = None,
                      rng=None) -> GeneratedPassword:
    """
    Generate one pronounceable password with the default model.

    Args left as None take their value from ``markov.defaults`` in app.yaml.

    Raises:
        ValueError: If length is not a positive integer
    """
    request = GenerationRequest(
        length=length,
        include_digits=include_digits,
        include_symbols=include_symbols,
        capitalize=capitalize,
    )
    return MarkovGenerator(request).generate(rng)


__all__ = [
    "EntropyInfo",
    "StrengthLevel",
    "SecretValue",
    "GeneratedPassword",
    "PasswordGenerator",
    "TransitionModel",
    "MarkovGenerator",
    "GenerationRequest",
    "build_model",
    "default_model",
    "system_rng",
    "configure_logging",
    "get_setting",
    "generate_password",
]
