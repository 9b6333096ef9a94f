#!/usr/bin/env python3
"""
Generator Interface
===================
Shared result type and the capability every password strategy provides.

Strategies are plain classes that satisfy :class:`PasswordGenerator`;
there is no common base class.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from passforge.entropy import EntropyInfo
from passforge.secret import SecretValue


@dataclass(eq=False)
class GeneratedPassword:
    """A generated value and its entropy estimate.

    The value is sensitive: call wipe() (or use the object as a context
    manager) once it is no longer needed.
    """
    secret: SecretValue
    entropy: EntropyInfo

    @classmethod
    def from_text(cls, text: str, entropy: EntropyInfo) -> 'GeneratedPassword':
        return cls(secret=SecretValue(text), entropy=entropy)

    @property
    def value(self) -> str:
        return self.secret.reveal()

    def wipe(self):
        self.secret.wipe()

    def __len__(self):
        return len(self.secret)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.wipe()


@runtime_checkable
class PasswordGenerator(Protocol):
    """Capability shared by all password strategies."""

    def generate(self, rng) -> GeneratedPassword:
        """Generate one password, drawing randomness only from ``rng``."""
        ...

    def description(self) -> str:
        """Human-readable name of the strategy."""
        ...


__all__ = ["GeneratedPassword", "PasswordGenerator"]
