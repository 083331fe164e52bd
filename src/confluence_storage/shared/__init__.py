"""Shared utilities for Confluence storage document building.

This module provides configuration objects, the exception hierarchy, and
logging helpers used across the tree and document layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    DocumentConfig,
    GlobalConfig,
    ParsingConfig,
    RenderConfig,
)
from .exceptions import (
    ConfluenceStorageError,
    StorageFormatError,
    StructuralPreconditionViolation,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DocumentConfig",
    "GlobalConfig",
    "ParsingConfig",
    "RenderConfig",
    "ConfluenceStorageError",
    "StorageFormatError",
    "StructuralPreconditionViolation",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
