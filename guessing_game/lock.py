from __future__ import annotations

from contextlib import contextmanager
from uuid import uuid4

import redis


@contextmanager
def game_lock(*, r: redis.Redis, game_id: str, ttl_ms: int = 5_000):
    """Per-game lock so concurrent guesses on one game are applied one at a time.

    Fails fast instead of waiting. Release only deletes the key while this
    holder still owns it.
    """

    key = f"lock:guessing:{game_id}"
    token = uuid4().hex
    acquired = r.set(key, token, nx=True, px=ttl_ms)
    if not acquired:
        raise ValueError("Game is busy")
    try:
        yield
    finally:
        if r.get(key) == token:
            r.delete(key)
