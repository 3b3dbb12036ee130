"""User-facing interfaces for Repeat Math."""

from .base import BaseInterface
from .cli import CLIInterface

__all__ = ["BaseInterface", "CLIInterface"]
