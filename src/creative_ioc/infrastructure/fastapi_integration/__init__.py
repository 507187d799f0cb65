"""
FastAPI integration module.

Provides helpers and utilities for integrating creative-ioc with FastAPI.
"""

from .integration import InjectorMiddleware, create_fastapi_dependency, create_request_dependency

__all__ = [
    "create_fastapi_dependency",
    "create_request_dependency",
    "InjectorMiddleware",
]
