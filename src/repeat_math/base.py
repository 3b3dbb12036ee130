"""Base component providing structured logging to subclasses."""

from typing import Any

from repeat_math.utils.logger import get_logger


class BaseComponent:
    """Base class for all application components."""

    def __init__(self) -> None:
        """Initialize the component with a logger named after the class."""
        self.logger: Any = get_logger(self.__class__.__name__)
