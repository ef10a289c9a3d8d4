from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

# Half-open range: secrets are 1..=100.
SECRET_LOW = 1
SECRET_HIGH = 101


class SecretSource(Protocol):
    def generate(self, low: int, high: int) -> int:  # pragma: no cover
        ...


@dataclass(slots=True)
class RandomSecretSource:
    """Uniform secrets from a process-local generator.

    `random.Random()` without a seed is seeded from OS entropy, so games are not
    reproducible.
    """

    rng: random.Random = field(default_factory=random.Random)

    def generate(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError(f"Empty secret range [{low}, {high})")
        return self.rng.randrange(low, high)


@dataclass(frozen=True, slots=True)
class FixedSecretSource:
    """Always returns the same secret (tests, demos)."""

    value: int

    def generate(self, low: int, high: int) -> int:
        return self.value


def draw_secret(source: SecretSource) -> int:
    return source.generate(SECRET_LOW, SECRET_HIGH)
