"""Localizer contract.

The domain and application layers only ever produce rule identifiers
("MissingName", "CartEmpty", ...). Turning them into text for a given
language is the job of whatever implements this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Localizer(ABC):

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the text for ``key``, or ``key`` itself when unknown."""

    def get_all(self, keys: Iterable[str]) -> list[str]:
        return [self.get(str(key)) for key in keys]
