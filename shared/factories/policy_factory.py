"""Factory for creating composition policy instances."""

from typing import Optional
from shared.interfaces.composition_policy import CompositionPolicy
from shared.implementations.policies import FixedSymbolClassPolicy, CallerSymbolsPolicy
from shared.domain.consts import PolicyName


POLICIES: dict[str, type[CompositionPolicy]] = {
    PolicyName.FIXED_SYMBOL_CLASS: FixedSymbolClassPolicy,
    PolicyName.CALLER_SYMBOLS: CallerSymbolsPolicy,
}


def create_policy(policy_name: str, symbols: Optional[str] = None) -> CompositionPolicy:
    """Factory for creating composition policies.

    The caller_symbols policy is built from the caller's symbol string;
    other policies ignore it.

    Returns:
        CompositionPolicy instance

    Raises:
        ValueError: If policy_name is unknown, or caller_symbols is
            requested without symbols
    """
    try:
        policy_cls = POLICIES[policy_name]
    except KeyError:
        raise ValueError(f"Unknown composition policy: {policy_name}")
    if policy_cls is CallerSymbolsPolicy:
        return CallerSymbolsPolicy(symbols or "")
    return policy_cls()
