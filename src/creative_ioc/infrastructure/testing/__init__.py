"""
Testing utilities module.

Provides helpers and utilities for testing applications using creative-ioc.
"""

from .utilities import TestContainer, create_test_container, isolated_injector

__all__ = [
    "TestContainer",
    "create_test_container",
    "isolated_injector",
]
