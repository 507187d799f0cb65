"""
Domain layer - Core models and rules.

This layer contains the bindings, parameter descriptors and error taxonomy.
It has no dependencies on other layers.
"""

from .enums import ParameterKind, TargetKind
from .exceptions import (
    DuplicateRegistrationError,
    InvalidArgumentError,
    IoCException,
    MethodNotFoundError,
    NotInstantiableError,
    UnresolvedPrimitiveDependencyError,
)
from .interfaces import IContainer, IInjector
from .models import Identifier, ParameterSpec, ServiceBinding, ServiceResolver

__all__ = [
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
    # Interfaces
    "IContainer",
    "IInjector",
    # Models
    "Identifier",
    "ServiceBinding",
    "ServiceResolver",
    "ParameterSpec",
]
