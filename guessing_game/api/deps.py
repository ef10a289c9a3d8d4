from __future__ import annotations

from collections.abc import Generator

import redis

from guessing_game.core.secret import RandomSecretSource, SecretSource
from guessing_game.infra.redis_client import create_redis


def get_redis() -> Generator[redis.Redis, None, None]:
    client = create_redis()
    try:
        yield client
    finally:
        client.close()


def get_secret_source() -> SecretSource:
    return RandomSecretSource()
