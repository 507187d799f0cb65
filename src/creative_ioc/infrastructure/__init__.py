"""
Infrastructure layer - External integrations.

This layer contains integrations with external frameworks and tools.
It depends on both Application and Domain layers.

``fastapi_integration`` requires the ``fastapi`` extra and is imported
explicitly: ``from creative_ioc.infrastructure.fastapi_integration import ...``.
"""

from . import testing

__all__ = [
    "testing",
]
