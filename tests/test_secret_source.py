from __future__ import annotations

import random

import pytest

from guessing_game.core.secret import SECRET_HIGH, SECRET_LOW, FixedSecretSource, RandomSecretSource, draw_secret


def test_random_source_stays_in_range() -> None:
    source = RandomSecretSource(rng=random.Random(1234))
    values = {draw_secret(source) for _ in range(2000)}

    assert min(values) >= 1
    assert max(values) <= 100
    # 2000 draws over 100 values should hit both ends.
    assert {1, 100} <= values


def test_random_source_rejects_empty_range() -> None:
    with pytest.raises(ValueError) as e:
        RandomSecretSource().generate(5, 5)
    assert "Empty secret range" in str(e.value)


def test_fixed_source_ignores_bounds() -> None:
    assert FixedSecretSource(42).generate(SECRET_LOW, SECRET_HIGH) == 42
