"""Composition policy using the fixed symbol class."""

import string
from typing import FrozenSet
from shared.interfaces.composition_policy import CompositionPolicy
from shared.domain.consts import Composition


class FixedSymbolClassPolicy(CompositionPolicy):
    """Accepts candidates with enough uppercase letters, symbols and distinct digits.

    Rules (all must hold):
    - At least 2 characters in A-Z
    - At least 2 characters from the symbol class
    - At least 2 distinct digit values 0-9 (counted as a set)

    The symbol class is the hardcoded superset in Composition.SYMBOL_CLASS,
    regardless of which symbols were used to build the pool.
    """

    symbol_class: FrozenSet[str] = Composition.SYMBOL_CLASS

    def is_satisfied(self, candidate: str) -> bool:
        uppercase_count = sum(1 for c in candidate if c in string.ascii_uppercase)
        if uppercase_count < Composition.MIN_UPPERCASE:
            return False

        symbol_count = sum(1 for c in candidate if c in self.symbol_class)
        if symbol_count < Composition.MIN_SYMBOLS:
            return False

        distinct_digits = {c for c in candidate if c in string.digits}
        return len(distinct_digits) >= Composition.MIN_DISTINCT_DIGITS
