"""Generate-and-check flow: fragments in, password and status out."""

import logging
import random
from typing import Optional
from shared.config.config import config
from shared.domain.consts import CheckStatus, OutcomeStatus, StatusMessage
from shared.domain.errors import InputIncompleteError, GenerationExhaustedError
from shared.domain.models import PasswordRequest, PasswordOutcome
from shared.factories.policy_factory import create_policy
from generator.services.generator import build_pool, generate_password
from checker.infrastructure.breach_client import BreachClient

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("word1", "word2", "word3", "symbols", "numbers")

_CHECK_OUTCOMES = {
    CheckStatus.COMPROMISED: (OutcomeStatus.COMPROMISED, StatusMessage.COMPROMISED),
    CheckStatus.SAFE: (OutcomeStatus.SAFE, StatusMessage.SAFE),
    CheckStatus.UNKNOWN: (OutcomeStatus.UNKNOWN, StatusMessage.UNKNOWN),
}


def validate_request(request: PasswordRequest) -> None:
    """
    Ensure every fragment is non-empty.

    Raises:
        InputIncompleteError: Listing the empty fields.
    """
    missing = [name for name in REQUIRED_FIELDS if not getattr(request, name)]
    if missing:
        raise InputIncompleteError(missing)


async def generate_and_check(
    request: PasswordRequest,
    client: BreachClient,
    policy_name: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> PasswordOutcome:
    """
    Build the pool, generate a password and check it against the breach database.

    Every failure is reported through the outcome status; nothing is raised
    for incomplete input, exhausted generation or an incomplete breach check.

    Returns:
        PasswordOutcome with the password (when one was generated), status and message.
    """
    try:
        validate_request(request)
    except InputIncompleteError as e:
        logger.info(f"Rejected request: {e}")
        return PasswordOutcome(
            password=None,
            status=OutcomeStatus.INPUT_INCOMPLETE,
            message=StatusMessage.INPUT_INCOMPLETE,
        )

    pool = build_pool(
        request.word1, request.word2, request.word3, request.symbols, request.numbers
    )
    policy = create_policy(policy_name or config.COMPOSITION_POLICY, symbols=request.symbols)

    try:
        password = generate_password(pool, config.PASSWORD_LENGTH, policy=policy, rng=rng)
    except GenerationExhaustedError as e:
        logger.info(f"Generation failed: {e}")
        return PasswordOutcome(
            password=None,
            status=OutcomeStatus.GENERATION_EXHAUSTED,
            message=StatusMessage.GENERATION_EXHAUSTED,
        )

    result = await client.check_password(password)
    status, message = _CHECK_OUTCOMES[result.status]

    return PasswordOutcome(
        password=password,
        status=status,
        message=message,
        breach=result,
    )
