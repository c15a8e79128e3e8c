"""Base agent class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseAgent(ABC):
    """Action dispatcher shared by the evolution, validator and conductor agents."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Agent identifier used in error messages."""

    def process(self, action: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Run ``action`` against ``payload``.

        The action name selects the ``_handle_<action>`` method.

        Raises:
            ValueError: If the agent has no handler for ``action``.
        """
        handler = getattr(self, f"_handle_{action}", None)
        if handler is None:
            raise ValueError(f"Agent '{self.name}' does not support action '{action}'")
        return handler(payload)
