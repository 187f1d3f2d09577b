"""Picking a unique instance name on the session bus."""

from __future__ import annotations

import hashlib
import logging
import random
from typing import Iterable, Optional

log = logging.getLogger(__name__)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def gen_instance_name(app_id: str, rng: Optional[random.Random] = None) -> str:
    """Generate ``<app_id>._<8 hex digits>`` from a random number."""
    rng = rng if rng is not None else random.Random()
    number = rng.randrange(_I32_MIN, _I32_MAX)
    digest = hashlib.blake2b(
        number.to_bytes(4, "little", signed=True), digest_size=8
    ).hexdigest()
    return f"{app_id}._{digest[: len(digest) // 2]}"


def choose_instance_name(
    app_id: str, existing_names: Iterable[str], rng: Optional[random.Random] = None
) -> str:
    """Return ``app_id`` if it is free, otherwise a generated unused name."""
    taken = {name for name in existing_names if name.startswith(app_id)}
    if app_id not in taken:
        name = app_id
    else:
        rng = rng if rng is not None else random.Random()
        name = gen_instance_name(app_id, rng)
        while name in taken:
            name = gen_instance_name(app_id, rng)
    log.info("instance name: %s", name)
    return name