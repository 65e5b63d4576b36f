"""Composition policy counting only the caller's own symbols."""

from shared.implementations.policies.fixed_symbol_class import FixedSymbolClassPolicy


class CallerSymbolsPolicy(FixedSymbolClassPolicy):
    """Same minimums as FixedSymbolClassPolicy, but the symbol rule counts
    only characters from the symbol string the caller supplied.

    A caller symbol outside the fixed class (e.g. a space or a non-ASCII
    character) counts here, and a fixed-class character the caller did not
    supply does not.
    """

    def __init__(self, symbols: str) -> None:
        if not symbols:
            raise ValueError("CallerSymbolsPolicy requires a non-empty symbol string")
        self.symbol_class = frozenset(symbols)
