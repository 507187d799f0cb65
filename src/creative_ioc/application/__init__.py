"""
Application layer - Registration and resolution.

This layer contains the registry and the resolution engine that orchestrate
domain objects. It depends only on the Domain layer.
"""

from .container import Container
from .injector import Injector
from .inspector import SignatureInspector

__all__ = [
    "Container",
    "Injector",
    "SignatureInspector",
]
