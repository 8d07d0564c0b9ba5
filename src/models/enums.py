"""Enums for CF Pulse models."""

from enum import Enum


class ResponseStatus(str, Enum):
    """Status values for tool invocation results."""

    SUCCESS = "success"
    ERROR = "error"
