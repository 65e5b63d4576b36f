"""Generator services layer."""

from generator.services.generator import build_pool, generate_password

__all__ = [
    "build_pool",
    "generate_password",
]
