"""Base interface for license text resolvers.

Resolvers look up the full body text of a license by its identifier.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseTextResolver(ABC):
    """Abstract base class for license text resolvers."""

    @abstractmethod
    def resolve(self, spdx_id: str) -> Optional[str]:
        """Return the full text for a license identifier.

        Args:
            spdx_id: License identifier (e.g., "MIT").

        Returns:
            The license text, or None if no text is available. A missing
            text is not an error.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging."""
        ...
