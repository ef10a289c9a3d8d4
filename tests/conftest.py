from __future__ import annotations

from collections.abc import Generator

import fakeredis
import pytest
from fastapi.testclient import TestClient

from guessing_game.api.deps import get_redis, get_secret_source
from guessing_game.core.secret import FixedSecretSource
from guessing_game.main import app


@pytest.fixture()
def client_and_redis() -> Generator[tuple[TestClient, fakeredis.FakeRedis], None, None]:
    """TestClient backed by fakeredis, with every new game's secret fixed at 42."""

    r = fakeredis.FakeRedis(decode_responses=True)

    def _override() -> Generator[fakeredis.FakeRedis, None, None]:
        yield r

    app.dependency_overrides[get_redis] = _override
    app.dependency_overrides[get_secret_source] = lambda: FixedSecretSource(42)
    with TestClient(app) as c:
        yield c, r
    app.dependency_overrides.clear()
