"""Constrained password generation by bounded rejection sampling."""

import logging
import math
import random
from typing import Optional
from shared.config.config import config
from shared.interfaces.composition_policy import CompositionPolicy
from shared.implementations.policies import FixedSymbolClassPolicy
from shared.domain.errors import GenerationExhaustedError

logger = logging.getLogger(__name__)


def build_pool(word1: str, word2: str, word3: str, symbols: str, numbers: str) -> str:
    """
    Build the character pool from the caller's fragments.

    The words are included as typed and again upper-cased, followed by the
    symbol and number strings. Duplicates are kept, so repeated characters
    are drawn more often.
    """
    words = word1 + word2 + word3
    return words + words.upper() + symbols + numbers


def _draw_candidate(pool: str, length: int, rng: random.Random) -> str:
    """Draw `length` characters uniformly over pool positions, with replacement."""
    pool_size = len(pool)
    return "".join(
        pool[math.floor(rng.random() * pool_size)]
        for _ in range(length)
    )


def generate_password(
    pool: str,
    length: Optional[int] = None,
    policy: Optional[CompositionPolicy] = None,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """
    Generate a password from `pool` that satisfies `policy`.

    Draws up to `max_attempts` candidates and returns the first one the
    policy accepts. There is no search for a "best" candidate.

    Returns:
        Accepted password of exactly `length` characters.

    Raises:
        ValueError: If pool is empty or length is not positive.
        GenerationExhaustedError: If no candidate was accepted within
            the attempt budget.
    """
    length = config.PASSWORD_LENGTH if length is None else length
    max_attempts = config.MAX_GENERATION_ATTEMPTS if max_attempts is None else max_attempts
    policy = policy or FixedSymbolClassPolicy()
    rng = rng or random.Random()

    if not pool:
        raise ValueError("Character pool is empty")
    if length <= 0:
        raise ValueError(f"Password length must be positive, got {length}")

    for attempt in range(1, max_attempts + 1):
        candidate = _draw_candidate(pool, length, rng)
        if policy.is_satisfied(candidate):
            logger.debug(
                f"Accepted candidate on attempt {attempt}/{max_attempts} "
                f"(length={length}, pool_size={len(pool)})"
            )
            return candidate

    logger.warning(
        f"Generation exhausted after {max_attempts} attempts "
        f"(length={length}, pool_size={len(pool)})"
    )
    raise GenerationExhaustedError(
        attempts=max_attempts,
        length=length,
        pool_size=len(pool),
    )
