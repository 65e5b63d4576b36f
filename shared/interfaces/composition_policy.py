"""Abstract composition policy interface."""

from abc import ABC, abstractmethod


class CompositionPolicy(ABC):
    """Abstract composition policy interface.

    All composition policies must implement:
    - is_satisfied: Decide whether a candidate password is acceptable
    """

    @abstractmethod
    def is_satisfied(self, candidate: str) -> bool:
        """Check a candidate password against the composition rules.

        Args:
            candidate: Candidate password string

        Returns:
            True if every rule holds, False otherwise
        """
        pass
