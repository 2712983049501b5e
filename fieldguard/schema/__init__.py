"""Schema registry and its request-pipeline adaptors."""

from .middleware import (
    ValidationMiddleware,
    create_dependency,
    create_dispatch,
    install_error_handler,
)
from .resolve import resolve_field
from .validator import Validator

__all__ = [
    "ValidationMiddleware",
    "Validator",
    "create_dependency",
    "create_dispatch",
    "install_error_handler",
    "resolve_field",
]
