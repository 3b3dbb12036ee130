"""Base interface definition for user-facing surfaces."""

from abc import ABC, abstractmethod

from repeat_math.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Abstract base class for all interfaces."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
