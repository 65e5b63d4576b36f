"""Main entry point for the password generator."""

import asyncio
import logging
import sys
from typing import Optional
from shared.config.config import config
from shared.domain.consts import OutcomeStatus
from shared.domain.models import PasswordRequest, PasswordOutcome
from checker.infrastructure.breach_client import BreachClient
from web.services.password_service import generate_and_check

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

USAGE = "Usage: python main.py <word1> <word2> <word3> <symbols> <numbers>"


def parse_args(argv: list[str]) -> PasswordRequest:
    """
    Build a PasswordRequest from positional command line arguments.

    Raises:
        ValueError: If the number of arguments is wrong.
    """
    if len(argv) != 5:
        raise ValueError(f"Expected 5 arguments, got {len(argv)}")
    word1, word2, word3, symbols, numbers = argv
    return PasswordRequest(
        word1=word1,
        word2=word2,
        word3=word3,
        symbols=symbols,
        numbers=numbers,
    )


def format_outcome(outcome: PasswordOutcome) -> str:
    """Render an outcome as the lines printed to the terminal."""
    lines = []
    if outcome.password is not None:
        lines.append(f"Password: {outcome.password}")
    lines.append(f"Status: {outcome.message}")
    return "\n".join(lines)


async def main(argv: Optional[list[str]] = None) -> int:
    """Main execution function. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    try:
        request = parse_args(argv)
    except ValueError as e:
        logger.error(str(e))
        print(USAGE)
        return 1

    async with BreachClient() as client:
        outcome = await generate_and_check(request, client)

    print(format_outcome(outcome))
    return 0 if outcome.status == OutcomeStatus.SAFE else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
