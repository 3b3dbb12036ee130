"""Data models for Repeat Math."""

from .io import MultiplicationReport, WelcomeMessage

__all__ = ["MultiplicationReport", "WelcomeMessage"]
