"""
creative-ioc: Minimal signature-driven dependency injection.

Public API exports for the creative-ioc package.
"""

import logging

# Application exports
from creative_ioc.application.container import Container
from creative_ioc.application.injector import Injector

# Domain exports
from creative_ioc.domain.enums import ParameterKind, TargetKind
from creative_ioc.domain.exceptions import (
    DuplicateRegistrationError,
    InvalidArgumentError,
    IoCException,
    MethodNotFoundError,
    NotInstantiableError,
    UnresolvedPrimitiveDependencyError,
)
from creative_ioc.domain.models import ParameterSpec, ServiceBinding, ServiceResolver

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Registry and engine
    "Container",
    "Injector",
    # Models
    "ServiceBinding",
    "ServiceResolver",
    "ParameterSpec",
    # Enums
    "TargetKind",
    "ParameterKind",
    # Exceptions
    "IoCException",
    "InvalidArgumentError",
    "DuplicateRegistrationError",
    "NotInstantiableError",
    "UnresolvedPrimitiveDependencyError",
    "MethodNotFoundError",
]
