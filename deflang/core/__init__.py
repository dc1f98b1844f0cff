"""Configuration, logging and error types shared by every stage."""

from .config import Settings, get_settings
from .errors import (
    DeflangError,
    TokenizationError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnsupportedNodeError,
)
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "DeflangError",
    "TokenizationError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnsupportedNodeError",
    "get_context_logger",
    "get_logger",
    "setup_logging",
]
