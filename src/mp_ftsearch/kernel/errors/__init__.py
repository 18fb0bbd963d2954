"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── ArgumentConversionError
    ├── ApplicationError         (application.py)
    │   └── UnsupportedCommandError
    └── InfrastructureError      (infrastructure.py)
        ├── ConnectionError
        ├── SerializationError
        │   └── ReplyDecodeError
        └── CommandError
"""

from mp_ftsearch.kernel.errors.application import (
    ApplicationError,
    UnsupportedCommandError,
)
from mp_ftsearch.kernel.errors.base import BaseError
from mp_ftsearch.kernel.errors.domain import (
    ArgumentConversionError,
    DomainError,
    ValidationError,
)
from mp_ftsearch.kernel.errors.infrastructure import (
    CommandError,
    ConnectionError,
    InfrastructureError,
    ReplyDecodeError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "ArgumentConversionError",
    "BaseError",
    "CommandError",
    "ConnectionError",
    "DomainError",
    "InfrastructureError",
    "ReplyDecodeError",
    "SerializationError",
    "UnsupportedCommandError",
    "ValidationError",
]
