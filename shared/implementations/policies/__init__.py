"""Composition policy implementations.

This package contains concrete implementations of composition policies.
"""

from shared.implementations.policies.fixed_symbol_class import FixedSymbolClassPolicy
from shared.implementations.policies.caller_symbols import CallerSymbolsPolicy

__all__ = ["FixedSymbolClassPolicy", "CallerSymbolsPolicy"]
